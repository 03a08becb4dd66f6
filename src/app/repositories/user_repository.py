"""User Repository Interface

Defines the contract for user (subscription owner) persistence.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.user import User


class UserRepository(ABC):
    """Repository interface for User persistence"""

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user

        Args:
            user: User entity to persist

        Returns:
            Created User with generated ID
        """
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def exists_by_id(self, user_id: int) -> bool:
        """Check whether a user with the given ID exists"""
        pass
