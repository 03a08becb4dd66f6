from .base import BaseModel, utc_now
from .billing_cycle import BillingCycle
from .user import User
from .subscription import Subscription

__all__ = [
    "BaseModel",
    "utc_now",
    "BillingCycle",
    "User",
    "Subscription",
]
