"""ScanUpcomingBilling Use Case

Collects subscriptions of all users that are due within the scan horizon.
Used by the upcoming billing worker.
"""

import logging
from datetime import timedelta
from libs.result import Result, Return, Error
from src.app.services.clock import Clock
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.subscription import Subscription
from .dtos import UpcomingBillingItemDTO, UpcomingBillingReportDTO

logger = logging.getLogger(__name__)

SCAN_HORIZON_DAYS = 3


class ScanUpcomingBilling:
    """
    Use Case: Build the upcoming billing report

    Business Rules:
    1. Window is [today, today + horizon_days], both inclusive
    2. Every match is reported; zero matches is a valid report
    3. days_until is the whole-day difference to next_billing_date

    Read-only, never writes to the store.
    """

    def __init__(
        self,
        subscription_repo: SubscriptionRepository,
        clock: Clock,
        horizon_days: int = SCAN_HORIZON_DAYS,
    ):
        self.subscription_repo = subscription_repo
        self.clock = clock
        self.horizon_days = horizon_days

    async def execute(self) -> Result[UpcomingBillingReportDTO]:
        """
        Execute the scan

        Returns:
            Result[UpcomingBillingReportDTO]: Report of due subscriptions

        Errors:
            SCAN_FAILED: store failed while querying
        """
        today = self.clock.today()
        horizon_end = today + timedelta(days=self.horizon_days)

        logger.info(
            f"Scanning for subscriptions billed between "
            f"{today.isoformat()} and {horizon_end.isoformat()}"
        )

        try:
            subscriptions = await self.subscription_repo.get_by_next_billing_date_between(
                today, horizon_end
            )
        except Exception as e:
            logger.error(f"Upcoming billing scan failed: {e}")
            return Return.err(
                Error(
                    code="SCAN_FAILED",
                    message="Failed to scan upcoming billing",
                    reason=str(e),
                )
            )

        items = [self._to_item(s, today) for s in subscriptions]

        return Return.ok(
            UpcomingBillingReportDTO(
                scan_date=today,
                horizon_end=horizon_end,
                total_found=len(items),
                items=items,
                generated_at=self.clock.now(),
            )
        )

    def _to_item(self, subscription: Subscription, today) -> UpcomingBillingItemDTO:
        return UpcomingBillingItemDTO(
            subscription_id=subscription.id,
            user_id=subscription.user_id,
            service_name=subscription.service_name,
            price=subscription.price,
            next_billing_date=subscription.next_billing_date,
            days_until=(subscription.next_billing_date - today).days,
        )
