"""SQLAlchemy Unit of Work

Commits or rolls back the AsyncSession shared by a request's repositories.
"""

from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """
    UnitOfWork backed by one AsyncSession

    Leaving the context manager without commit() rolls back pending writes.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
