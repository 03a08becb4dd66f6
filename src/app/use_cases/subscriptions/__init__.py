"""Subscription use cases"""
from .create_subscription import CreateSubscription
from .update_subscription import UpdateSubscription
from .delete_subscription import DeleteSubscription
from .get_subscription import GetSubscription
from .list_subscriptions import ListSubscriptions
from .list_upcoming_subscriptions import ListUpcomingSubscriptions
from .get_monthly_expense import GetMonthlyExpense
from .scan_upcoming_billing import ScanUpcomingBilling
from .dtos import (
    SubscriptionCommandDTO,
    SubscriptionResponseDTO,
    MonthlyExpenseResponseDTO,
    UpcomingBillingItemDTO,
    UpcomingBillingReportDTO,
)

__all__ = [
    "CreateSubscription",
    "UpdateSubscription",
    "DeleteSubscription",
    "GetSubscription",
    "ListSubscriptions",
    "ListUpcomingSubscriptions",
    "GetMonthlyExpense",
    "ScanUpcomingBilling",
    "SubscriptionCommandDTO",
    "SubscriptionResponseDTO",
    "MonthlyExpenseResponseDTO",
    "UpcomingBillingItemDTO",
    "UpcomingBillingReportDTO",
]
