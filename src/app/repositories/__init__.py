from .subscription_repository import SubscriptionRepository
from .user_repository import UserRepository

__all__ = [
    "SubscriptionRepository",
    "UserRepository",
]
