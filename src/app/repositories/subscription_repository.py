"""Subscription Repository Interface

Defines the contract for subscription persistence operations.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional, List
from src.domain.subscription import Subscription


class SubscriptionRepository(ABC):
    """
    Repository interface for Subscription persistence

    Writes must be visible to subsequent reads in the same session.
    Date range queries are inclusive on both bounds.
    """

    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription:
        """
        Create a new subscription

        Args:
            subscription: Subscription entity to persist

        Returns:
            Created Subscription with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, subscription_id: int) -> Optional[Subscription]:
        """
        Retrieve subscription by ID

        Args:
            subscription_id: Subscription ID

        Returns:
            Subscription if found, None otherwise
        """
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: int) -> List[Subscription]:
        """
        Retrieve all subscriptions owned by a user, ordered by ID

        Args:
            user_id: Owning user ID

        Returns:
            List of subscriptions (empty if none)
        """
        pass

    @abstractmethod
    async def get_by_user_id_and_next_billing_date_between(
        self, user_id: int, start: date, end: date
    ) -> List[Subscription]:
        """
        Retrieve a user's subscriptions whose next billing date is in [start, end]

        Args:
            user_id: Owning user ID
            start: First date of the window (inclusive)
            end: Last date of the window (inclusive)

        Returns:
            List of subscriptions ordered by next billing date
        """
        pass

    @abstractmethod
    async def get_by_next_billing_date_between(
        self, start: date, end: date
    ) -> List[Subscription]:
        """
        Retrieve subscriptions of all users whose next billing date is in [start, end]

        Used by the upcoming billing scanner.

        Args:
            start: First date of the window (inclusive)
            end: Last date of the window (inclusive)

        Returns:
            List of subscriptions ordered by next billing date
        """
        pass

    @abstractmethod
    async def update(self, subscription: Subscription) -> Subscription:
        """
        Update an existing subscription

        Args:
            subscription: Subscription entity with updated values

        Returns:
            Updated Subscription
        """
        pass

    @abstractmethod
    async def delete(self, subscription_id: int) -> None:
        """
        Permanently delete a subscription

        Args:
            subscription_id: Subscription ID
        """
        pass

    @abstractmethod
    async def exists_by_id(self, subscription_id: int) -> bool:
        """Check whether a subscription with the given ID exists"""
        pass
