"""Background workers for the subscription tracker"""
from .upcoming_billing import UpcomingBillingWorker

__all__ = ["UpcomingBillingWorker"]
