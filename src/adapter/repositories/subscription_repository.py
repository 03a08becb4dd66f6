"""SQLAlchemy Subscription Repository Implementation

Implements subscription persistence using SQLAlchemy async session.
"""

from datetime import date
from typing import Optional, List
from sqlalchemy import delete
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.subscription_repository import SubscriptionRepository
from src.domain.subscription import Subscription


class SqlAlchemySubscriptionRepository(SubscriptionRepository):
    """
    SQLAlchemy implementation of SubscriptionRepository

    Uses async session for database operations. Writes are flushed so they
    are visible to later reads before the unit of work commits.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, subscription: Subscription) -> Subscription:
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription

    async def get_by_id(self, subscription_id: int) -> Optional[Subscription]:
        statement = select(Subscription).where(Subscription.id == subscription_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_user_id(self, user_id: int) -> List[Subscription]:
        statement = (
            select(Subscription)
            .where(Subscription.user_id == user_id)
            .order_by(Subscription.id.asc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_user_id_and_next_billing_date_between(
        self, user_id: int, start: date, end: date
    ) -> List[Subscription]:
        """
        Retrieve a user's subscriptions with start <= next_billing_date <= end

        Args:
            user_id: Owning user ID
            start: First date of the window (inclusive)
            end: Last date of the window (inclusive)

        Returns:
            List of subscriptions ordered by next billing date, then ID
        """
        statement = (
            select(Subscription)
            .where(Subscription.user_id == user_id)
            .where(Subscription.next_billing_date >= start)
            .where(Subscription.next_billing_date <= end)
            .order_by(Subscription.next_billing_date.asc(), Subscription.id.asc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_next_billing_date_between(
        self, start: date, end: date
    ) -> List[Subscription]:
        """
        Retrieve subscriptions of all users with start <= next_billing_date <= end

        Args:
            start: First date of the window (inclusive)
            end: Last date of the window (inclusive)

        Returns:
            List of subscriptions ordered by next billing date, then ID
        """
        statement = (
            select(Subscription)
            .where(Subscription.next_billing_date >= start)
            .where(Subscription.next_billing_date <= end)
            .order_by(Subscription.next_billing_date.asc(), Subscription.id.asc())
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def update(self, subscription: Subscription) -> Subscription:
        self.session.add(subscription)
        await self.session.flush()
        await self.session.refresh(subscription)
        return subscription

    async def delete(self, subscription_id: int) -> None:
        statement = delete(Subscription).where(Subscription.id == subscription_id)
        await self.session.execute(statement)
        await self.session.flush()

    async def exists_by_id(self, subscription_id: int) -> bool:
        statement = select(func.count()).select_from(Subscription).where(
            Subscription.id == subscription_id
        )
        result = await self.session.execute(statement)
        return result.scalar_one() > 0
