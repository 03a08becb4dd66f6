from .subscription_repository import SqlAlchemySubscriptionRepository
from .user_repository import SqlAlchemyUserRepository

__all__ = [
    "SqlAlchemySubscriptionRepository",
    "SqlAlchemyUserRepository",
]
