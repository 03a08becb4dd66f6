"""DeleteSubscription Use Case

Permanently removes a single subscription.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.subscription_repository import SubscriptionRepository

logger = logging.getLogger(__name__)


class DeleteSubscription:
    """
    Use Case: Delete a subscription

    Hard delete, no cascading side effects beyond the single record.
    """

    def __init__(self, uow: UnitOfWork, subscription_repo: SubscriptionRepository):
        self.uow = uow
        self.subscription_repo = subscription_repo

    async def execute(self, subscription_id: int) -> Result[None]:
        """
        Execute subscription deletion

        Args:
            subscription_id: ID of the subscription to delete

        Returns:
            Result[None]: Ok on deletion, error otherwise

        Errors:
            SUBSCRIPTION_NOT_FOUND: No subscription with that ID
            PERSISTENCE_FAILURE: store failed while deleting
        """
        if not await self.subscription_repo.exists_by_id(subscription_id):
            return Return.err(
                Error(
                    code="SUBSCRIPTION_NOT_FOUND",
                    message=f"Subscription {subscription_id} not found",
                )
            )

        try:
            await self.subscription_repo.delete(subscription_id)
            await self.uow.commit()
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete subscription {subscription_id}: {e}")
            return Return.err(
                Error(
                    code="PERSISTENCE_FAILURE",
                    message="Failed to delete subscription",
                    reason=str(e),
                )
            )

        logger.info(f"Deleted subscription {subscription_id}")
        return Return.ok(None)
