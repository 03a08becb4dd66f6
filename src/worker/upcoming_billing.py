"""Upcoming Billing Background Worker

Scans every day for subscriptions whose next payment is within the scan
horizon and reports them through the notification service.
Can be run as a standalone script or integrated with a scheduler.
"""

import asyncio
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.repositories.subscription_repository import SqlAlchemySubscriptionRepository
from src.adapter.services.notification_service import create_notification_service
from src.app.services.clock import Clock
from src.app.use_cases.subscriptions import ScanUpcomingBilling, UpcomingBillingReportDTO
from src.app.use_cases.subscriptions.scan_upcoming_billing import SCAN_HORIZON_DAYS

logger = logging.getLogger(__name__)


class UpcomingBillingWorker:
    """
    Background worker for upcoming billing notifications

    Features:
    - Runs daily at UPCOMING_SCAN_RUN_HOUR in the billing time zone
    - Reports subscriptions billed within the next 3 days (inclusive)
    - Read-only: never modifies subscriptions
    - Can run once or continuously

    Usage:
        # Run once
        worker = UpcomingBillingWorker()
        report = await worker.run_once()

        # Run continuously
        worker = UpcomingBillingWorker()
        await worker.run_forever()
    """

    def __init__(
        self,
        db_uri: Optional[str] = None,
        webhook_url: Optional[str] = None,
        timezone_name: Optional[str] = None,
        run_hour: Optional[int] = None,
        horizon_days: int = SCAN_HORIZON_DAYS,
        clock: Optional[Clock] = None,
    ):
        """
        Initialize the worker

        Args:
            db_uri: Database URI (defaults to ApplicationConfig.DB_URI)
            webhook_url: Notification webhook URL (defaults to config)
            timezone_name: Billing time zone (defaults to config)
            run_hour: Local hour of the daily run (defaults to config)
            horizon_days: Days after today to include in the scan
            clock: Clock override (defaults to a clock in timezone_name)
        """
        self.db_uri = db_uri or ApplicationConfig.DB_URI
        self.webhook_url = webhook_url or ApplicationConfig.UPCOMING_NOTIFICATION_WEBHOOK
        self.timezone_name = timezone_name or ApplicationConfig.BILLING_TIMEZONE
        self.run_hour = ApplicationConfig.UPCOMING_SCAN_RUN_HOUR if run_hour is None else run_hour
        self.horizon_days = horizon_days
        self.clock = clock or Clock(self.timezone_name)

        # Create engine and session factory
        self.engine = create_async_engine(self.db_uri, echo=False, future=True)
        self.async_session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

        # Create notification service
        self.notification_service = create_notification_service(self.webhook_url)

        logger.info(
            f"UpcomingBillingWorker initialized with timezone={self.timezone_name}, "
            f"run_hour={self.run_hour}, horizon_days={self.horizon_days}"
        )

    async def run_once(self) -> Optional[UpcomingBillingReportDTO]:
        """
        Run the scan once and send the report

        Returns:
            The report, or None when scanning is disabled

        Raises:
            RuntimeError: if the scan itself failed
        """
        if not ApplicationConfig.UPCOMING_SCAN_ENABLED:
            logger.info("Upcoming billing scan is disabled, skipping")
            return None

        async with self.async_session_factory() as session:
            subscription_repo = SqlAlchemySubscriptionRepository(session)

            use_case = ScanUpcomingBilling(
                subscription_repo=subscription_repo,
                clock=self.clock,
                horizon_days=self.horizon_days,
            )

            result = await use_case.execute()

        if result.is_err():
            logger.error(f"Upcoming billing scan failed: {result.error.message}")
            raise RuntimeError(f"Upcoming billing scan failed: {result.error.message}")

        report = result.value

        sent = await self.notification_service.send_upcoming_billing_report(report)
        if not sent:
            logger.warning(
                f"Upcoming billing report for {report.scan_date.isoformat()} "
                f"could not be delivered"
            )

        return report

    def _seconds_until_next_run(self, now: Optional[datetime] = None) -> float:
        """
        Seconds from now until the next run_hour:00 in the billing time zone

        Args:
            now: Current aware datetime (defaults to clock.now())
        """
        now = now or self.clock.now()
        next_run = now.replace(hour=self.run_hour, minute=0, second=0, microsecond=0)
        if next_run <= now:
            next_run = next_run + timedelta(days=1)
        # elapsed time, not wall-clock time, across DST changes
        return (next_run.astimezone(timezone.utc) - now.astimezone(timezone.utc)).total_seconds()

    async def run_forever(self):
        """Run the scan every day at run_hour, surviving failed cycles"""
        logger.info(
            f"Starting daily upcoming billing scan at {self.run_hour:02d}:00 "
            f"({self.timezone_name})"
        )

        while True:
            delay = self._seconds_until_next_run()
            logger.debug(f"Next upcoming billing scan in {delay:.0f}s")
            await asyncio.sleep(delay)

            try:
                report = await self.run_once()
                if report is not None:
                    logger.info(
                        f"Upcoming billing scan complete. "
                        f"Found {report.total_found} subscription(s)"
                    )
            except Exception as e:
                logger.error(f"Upcoming billing scan cycle failed: {e}")

    async def shutdown(self):
        """Cleanup resources"""
        await self.engine.dispose()
        logger.info("UpcomingBillingWorker shutdown complete")


async def main():
    """
    Entry point for running the worker as a standalone script

    Usage:
        # Run once
        python -m src.worker.upcoming_billing --once

        # Run daily at the configured hour (default)
        python -m src.worker.upcoming_billing
    """
    import argparse

    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Upcoming Billing Worker")
    parser.add_argument(
        "--once", action="store_true", help="Run once and exit"
    )
    parser.add_argument(
        "--horizon-days", type=int, default=SCAN_HORIZON_DAYS,
        help=f"Days after today to include (default: {SCAN_HORIZON_DAYS})"
    )
    args = parser.parse_args()

    worker = UpcomingBillingWorker(horizon_days=args.horizon_days)

    try:
        if args.once:
            report = await worker.run_once()
            if report is None:
                print("Upcoming billing scan is disabled.")
            else:
                print("Upcoming billing scan complete:")
                print(f"  Window: {report.scan_date} to {report.horizon_end}")
                print(f"  Subscriptions found: {report.total_found}")
                for item in report.items:
                    print(
                        f"  - {item.service_name} ({item.price}) on "
                        f"{item.next_billing_date}, in {item.days_until} day(s), "
                        f"user {item.user_id}"
                    )
        else:
            await worker.run_forever()
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    finally:
        await worker.shutdown()


if __name__ == "__main__":
    asyncio.run(main())
