"""CreateSubscription Use Case

Registers a recurring payment for an existing user.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.billing_calculator import BillingCalculator
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.app.repositories.user_repository import UserRepository
from src.domain.base import utc_now
from src.domain.subscription import Subscription
from .dtos import SubscriptionCommandDTO, SubscriptionResponseDTO

logger = logging.getLogger(__name__)


class CreateSubscription:
    """
    Use Case: Create a subscription

    Business Rules:
    1. Owner must exist
    2. next_billing_date = billing_date advanced by one billing cycle
    3. Either the whole record is persisted or nothing is

    Flow:
    1. Validate owner exists
    2. Compute next billing date
    3. Persist subscription
    4. Commit transaction
    5. Return persisted record
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

    async def execute(self, command: SubscriptionCommandDTO) -> Result[SubscriptionResponseDTO]:
        """
        Execute subscription creation

        Args:
            command: SubscriptionCommandDTO with owner, name, price, cycle, billing date

        Returns:
            Result[SubscriptionResponseDTO]: Created subscription or error

        Errors:
            OWNER_NOT_FOUND: user_id does not reference an existing user
            PERSISTENCE_FAILURE: store failed while writing
        """
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
            now = utc_now()
            subscription = Subscription(
                user_id=command.user_id,
                service_name=command.service_name,
                price=command.price,
                billing_cycle=command.billing_cycle,
                billing_date=command.billing_date,
                next_billing_date=next_billing_date,
                created_at=now,
                updated_at=now,
            )

            created = await self.subscription_repo.create(subscription)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create subscription for user {command.user_id}: {e}")
            return Return.err(
                Error(
                    code="PERSISTENCE_FAILURE",
                    message="Failed to create subscription",
                    reason=str(e),
                )
            )

        logger.info(
            f"Created subscription {created.id} ({created.service_name}) for user "
            f"{created.user_id}, next billing {created.next_billing_date.isoformat()}"
        )
        return Return.ok(SubscriptionResponseDTO.from_entity(created))
