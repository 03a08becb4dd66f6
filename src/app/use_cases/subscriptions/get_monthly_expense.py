"""Get Monthly Expense Use Case

Totals a user's subscriptions on a monthly basis.
"""

from decimal import Decimal
from libs.result import Result, Return
from src.app.services.billing_calculator import BillingCalculator, quantize_money
from src.app.repositories.subscription_repository import SubscriptionRepository
from .dtos import MonthlyExpenseResponseDTO


class GetMonthlyExpense:
    """
    Get Monthly Expense Use Case

    Each subscription is normalized to its monthly equivalent (already
    rounded to cents) and the amounts are summed as Decimals.
    """

    def __init__(
        self,
        subscription_repo: SubscriptionRepository,
        calculator: BillingCalculator | None = None,
    ):
        self.subscription_repo = subscription_repo
        self.calculator = calculator or BillingCalculator()

    async def execute(self, user_id: int) -> Result[MonthlyExpenseResponseDTO]:
        subscriptions = await self.subscription_repo.get_by_user_id(user_id)

        total = sum(
            (
                self.calculator.monthly_equivalent(s.price, s.billing_cycle)
                for s in subscriptions
            ),
            Decimal("0.00"),
        )

        return Return.ok(
            MonthlyExpenseResponseDTO(
                user_id=user_id,
                total_monthly_expense=quantize_money(total),
                subscription_count=len(subscriptions),
            )
        )
