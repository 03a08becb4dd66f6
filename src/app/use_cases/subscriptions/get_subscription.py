"""Get Subscription Use Case

Retrieves a single subscription by ID.
"""

from libs.result import Result, Return, Error
from src.app.repositories.subscription_repository import SubscriptionRepository
from .dtos import SubscriptionResponseDTO


class GetSubscription:
    """Read-only lookup of one subscription"""

    def __init__(self, subscription_repo: SubscriptionRepository):
        self.subscription_repo = subscription_repo

    async def execute(self, subscription_id: int) -> Result[SubscriptionResponseDTO]:
        """
        Errors:
            SUBSCRIPTION_NOT_FOUND: No subscription with that ID
        """
        subscription = await self.subscription_repo.get_by_id(subscription_id)

        if not subscription:
            return Return.err(
                Error(
                    code="SUBSCRIPTION_NOT_FOUND",
                    message=f"Subscription {subscription_id} not found",
                )
            )

        return Return.ok(SubscriptionResponseDTO.from_entity(subscription))
