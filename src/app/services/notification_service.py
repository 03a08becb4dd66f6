"""Notification Service Interface

Defines the contract for reporting subscriptions that are about to be billed.
"""

from abc import ABC, abstractmethod
from src.app.use_cases.subscriptions.dtos import UpcomingBillingReportDTO


class NotificationService(ABC):
    """
    Abstract notification service for upcoming billing reports

    Implementations can send notifications via:
    - Log output
    - Webhook (HTTP POST)
    """

    @abstractmethod
    async def send_upcoming_billing_report(self, report: UpcomingBillingReportDTO) -> bool:
        """
        Deliver an upcoming billing report

        Args:
            report: Report produced by the scanner (may contain zero items)

        Returns:
            True if notification sent successfully, False otherwise
        """
        pass
