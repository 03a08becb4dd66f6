"""Notification Service Implementations

Provides concrete implementations for reporting upcoming billing.
"""

import logging
from typing import Optional
import httpx
from src.app.services.notification_service import NotificationService
from src.app.use_cases.subscriptions.dtos import UpcomingBillingReportDTO

logger = logging.getLogger(__name__)


class LoggingNotificationService(NotificationService):
    """
    Notification service that logs the report

    One line per due subscription plus a summary line. Used in development
    and as the default channel.
    """

    async def send_upcoming_billing_report(self, report: UpcomingBillingReportDTO) -> bool:
        """
        Log upcoming billing report

        Args:
            report: Report produced by the scanner

        Returns:
            Always True (logging never fails)
        """
        if report.total_found == 0:
            logger.info(
                f"[UPCOMING BILLING] No subscriptions due between "
                f"{report.scan_date.isoformat()} and {report.horizon_end.isoformat()}"
            )
            return True

        logger.info(
            f"[UPCOMING BILLING] {report.total_found} subscription(s) due between "
            f"{report.scan_date.isoformat()} and {report.horizon_end.isoformat()}"
        )
        for item in report.items:
            logger.info(
                f"[UPCOMING BILLING] Service: {item.service_name}, "
                f"Price: {item.price}, "
                f"Next billing: {item.next_billing_date.isoformat()} "
                f"(in {item.days_until} day(s)), "
                f"User: {item.user_id}"
            )
        return True


class WebhookNotificationService(NotificationService):
    """
    Notification service that sends reports via HTTP webhook

    Sends JSON payload to configured webhook URL.
    """

    def __init__(self, webhook_url: str, timeout: float = 10.0):
        """
        Initialize webhook notification service

        Args:
            webhook_url: URL to POST reports to
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.timeout = timeout

    async def send_upcoming_billing_report(self, report: UpcomingBillingReportDTO) -> bool:
        """
        Send upcoming billing report via webhook

        Args:
            report: Report produced by the scanner

        Returns:
            True if webhook call succeeded, False otherwise
        """
        payload = {
            "type": "upcoming_billing",
            **report.model_dump(mode="json"),
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.webhook_url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
                logger.info(
                    f"Webhook notification sent for {report.total_found} upcoming "
                    f"subscription(s) to {self.webhook_url}"
                )
                return True
        except httpx.HTTPError as e:
            logger.error(f"Failed to send upcoming billing webhook: {e}")
            return False


class CompositeNotificationService(NotificationService):
    """
    Notification service that delegates to multiple services

    Useful for sending to multiple channels (e.g., log + webhook).
    """

    def __init__(self, services: list[NotificationService]):
        self.services = services

    async def send_upcoming_billing_report(self, report: UpcomingBillingReportDTO) -> bool:
        """
        Send report to all configured services

        Returns:
            True if at least one service succeeded, False otherwise
        """
        success = False
        for service in self.services:
            try:
                if await service.send_upcoming_billing_report(report):
                    success = True
            except Exception as e:
                logger.error(f"Notification service {type(service).__name__} failed: {e}")
        return success


def create_notification_service(webhook_url: Optional[str] = None) -> NotificationService:
    """
    Factory function to create appropriate notification service

    Args:
        webhook_url: Optional webhook URL. If provided, creates composite
                     service with logging + webhook. Otherwise, just logging.

    Returns:
        Configured NotificationService
    """
    services: list[NotificationService] = [LoggingNotificationService()]

    if webhook_url:
        services.append(WebhookNotificationService(webhook_url))

    if len(services) == 1:
        return services[0]

    return CompositeNotificationService(services)
