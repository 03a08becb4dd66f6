"""UpdateSubscription Use Case

Replaces the editable fields of a subscription and re-derives its next
billing date.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.billing_calculator import BillingCalculator
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.app.repositories.user_repository import UserRepository
from src.domain.base import utc_now
from .dtos import SubscriptionCommandDTO, SubscriptionResponseDTO

logger = logging.getLogger(__name__)


class UpdateSubscription:
    """
    Use Case: Full replacement of a subscription

    Business Rules:
    1. Subscription must exist
    2. Owner must exist (the owner may change)
    3. next_billing_date is always recomputed, never carried over

    Flow:
    1. Load subscription
    2. Validate owner exists
    3. Overwrite editable fields and recompute next billing date
    4. Persist and commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        subscription_repo: SubscriptionRepository,
        user_repo: UserRepository,
        calculator: BillingCalculator | None = None,
    ):
        self.uow = uow
        self.subscription_repo = subscription_repo
        self.user_repo = user_repo
        self.calculator = calculator or BillingCalculator()

    async def execute(
        self, subscription_id: int, command: SubscriptionCommandDTO
    ) -> Result[SubscriptionResponseDTO]:
        """
        Execute subscription update

        Args:
            subscription_id: ID of the subscription to replace
            command: New values for the editable fields

        Returns:
            Result[SubscriptionResponseDTO]: Updated subscription or error

        Errors:
            SUBSCRIPTION_NOT_FOUND: No subscription with that ID
            OWNER_NOT_FOUND: user_id does not reference an existing user
            PERSISTENCE_FAILURE: store failed while writing
        """
        subscription = await self.subscription_repo.get_by_id(subscription_id)
        if not subscription:
            return Return.err(
                Error(
                    code="SUBSCRIPTION_NOT_FOUND",
                    message=f"Subscription {subscription_id} not found",
                )
            )

        if not await self.user_repo.exists_by_id(command.user_id):
            return Return.err(
                Error(
                    code="OWNER_NOT_FOUND",
                    message=f"User {command.user_id} not found",
                )
            )

        next_billing_date = self.calculator.next_billing_date(
            command.billing_date, command.billing_cycle
        )

        try:
            subscription.user_id = command.user_id
            subscription.service_name = command.service_name
            subscription.price = command.price
            subscription.billing_cycle = command.billing_cycle
            subscription.billing_date = command.billing_date
            subscription.next_billing_date = next_billing_date
            subscription.updated_at = utc_now()

            updated = await self.subscription_repo.update(subscription)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update subscription {subscription_id}: {e}")
            return Return.err(
                Error(
                    code="PERSISTENCE_FAILURE",
                    message="Failed to update subscription",
                    reason=str(e),
                )
            )

        logger.info(
            f"Updated subscription {updated.id}, next billing "
            f"{updated.next_billing_date.isoformat()}"
        )
        return Return.ok(SubscriptionResponseDTO.from_entity(updated))
