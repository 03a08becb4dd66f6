"""Billing Cycle

Closed set of payment recurrences supported by the tracker.
"""

from enum import Enum


class BillingCycle(str, Enum):
    """Billing cycle types"""
    MONTHLY = "MONTHLY"      # every calendar month
    QUARTERLY = "QUARTERLY"  # every 3 calendar months
    YEARLY = "YEARLY"        # every calendar year
