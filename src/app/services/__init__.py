from .unit_of_work import UnitOfWork
from .billing_calculator import BillingCalculator, InvalidBillingInput
from .clock import Clock, FixedClock
from .notification_service import NotificationService

__all__ = [
    "UnitOfWork",
    "BillingCalculator",
    "InvalidBillingInput",
    "Clock",
    "FixedClock",
    "NotificationService",
]
