"""Billing Calculator

Pure date and money rules for subscriptions:
- next billing date from a reference date and billing cycle
- monthly-equivalent amount of a price charged every cycle

Stateless, so a single instance can be shared across requests and
substituted in tests.
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from dateutil.relativedelta import relativedelta
from src.domain.billing_cycle import BillingCycle

MONEY_QUANTUM = Decimal("0.01")


class InvalidBillingInput(ValueError):
    """Raised when the calculator receives a missing or unknown argument"""
    pass


def quantize_money(amount: Decimal) -> Decimal:
    """Round to 2 decimal places, half away from zero"""
    return amount.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


class BillingCalculator:
    """
    Billing period and expense calculations

    Month arithmetic clamps to the last valid day of the target month
    (Jan 31 + 1 month -> Feb 28/29).
    """

    def next_billing_date(self, reference_date: date, billing_cycle: BillingCycle) -> date:
        """
        Advance a billing date by exactly one billing cycle

        Args:
            reference_date: Date of the reference payment
            billing_cycle: MONTHLY, QUARTERLY or YEARLY

        Returns:
            The next billing date

        Raises:
            InvalidBillingInput: if either argument is missing or unrecognized
        """
        if reference_date is None:
            raise InvalidBillingInput("reference_date must not be None")
        if not isinstance(reference_date, date):
            raise InvalidBillingInput(f"reference_date must be a date, got {type(reference_date).__name__}")

        cycle = self._coerce_cycle(billing_cycle)

        if cycle is BillingCycle.MONTHLY:
            return reference_date + relativedelta(months=+1)
        if cycle is BillingCycle.QUARTERLY:
            return reference_date + relativedelta(months=+3)
        if cycle is BillingCycle.YEARLY:
            return reference_date + relativedelta(years=+1)

        raise InvalidBillingInput(f"Unsupported billing cycle: {cycle}")

    def monthly_equivalent(self, price: Decimal, billing_cycle: BillingCycle) -> Decimal:
        """
        Convert a per-cycle price into a monthly amount

        Args:
            price: Price charged every billing cycle
            billing_cycle: MONTHLY, QUARTERLY or YEARLY

        Returns:
            Monthly amount rounded half-up to 2 decimal places

        Raises:
            InvalidBillingInput: if either argument is missing or unrecognized
        """
        if price is None:
            raise InvalidBillingInput("price must not be None")
        if isinstance(price, bool):
            raise InvalidBillingInput("price must be a decimal amount")
        if not isinstance(price, Decimal):
            # via str so 0.1 becomes Decimal("0.1")
            price = Decimal(str(price))

        cycle = self._coerce_cycle(billing_cycle)

        if cycle is BillingCycle.MONTHLY:
            return quantize_money(price)
        if cycle is BillingCycle.QUARTERLY:
            return quantize_money(price / Decimal(3))
        if cycle is BillingCycle.YEARLY:
            return quantize_money(price / Decimal(12))

        raise InvalidBillingInput(f"Unsupported billing cycle: {cycle}")

    @staticmethod
    def _coerce_cycle(billing_cycle) -> BillingCycle:
        if billing_cycle is None:
            raise InvalidBillingInput("billing_cycle must not be None")
        try:
            return BillingCycle(billing_cycle)
        except ValueError:
            raise InvalidBillingInput(f"Unknown billing cycle: {billing_cycle!r}") from None
