"""List Upcoming Subscriptions Use Case

Finds a user's subscriptions whose next payment falls within a short
lookahead window.
"""

from datetime import timedelta
from typing import List
from libs.result import Result, Return, Error
from src.app.services.clock import Clock
from src.app.repositories.subscription_repository import SubscriptionRepository
from .dtos import SubscriptionResponseDTO

DEFAULT_HORIZON_DAYS = 3


class ListUpcomingSubscriptions:
    """
    List Upcoming Subscriptions Use Case

    Window is inclusive: today <= next_billing_date <= today + horizon_days.
    Past-due subscriptions (next_billing_date < today) are not included.
    "Today" comes from the injected clock's time zone.
    """

    def __init__(self, subscription_repo: SubscriptionRepository, clock: Clock):
        self.subscription_repo = subscription_repo
        self.clock = clock

    async def execute(
        self, user_id: int, horizon_days: int = DEFAULT_HORIZON_DAYS
    ) -> Result[List[SubscriptionResponseDTO]]:
        """
        Args:
            user_id: Owning user ID
            horizon_days: Number of days after today to include

        Errors:
            VALIDATION_ERROR: horizon_days is negative
        """
        if horizon_days < 0:
            return Return.err(
                Error(
                    code="VALIDATION_ERROR",
                    message=f"horizon_days must be >= 0, got {horizon_days}",
                )
            )

        today = self.clock.today()
        horizon_end = today + timedelta(days=horizon_days)

        subscriptions = await self.subscription_repo.get_by_user_id_and_next_billing_date_between(
            user_id, today, horizon_end
        )

        return Return.ok(
            [SubscriptionResponseDTO.from_entity(s) for s in subscriptions]
        )
