"""List Subscriptions Use Case

Lists every subscription owned by a user.
"""

from typing import List
from libs.result import Result, Return
from src.app.repositories.subscription_repository import SubscriptionRepository
from .dtos import SubscriptionResponseDTO


class ListSubscriptions:
    """
    List Subscriptions Use Case

    An owner without subscriptions yields an empty list, not an error.
    Results are ordered by subscription ID.
    """

    def __init__(self, subscription_repo: SubscriptionRepository):
        self.subscription_repo = subscription_repo

    async def execute(self, user_id: int) -> Result[List[SubscriptionResponseDTO]]:
        subscriptions = await self.subscription_repo.get_by_user_id(user_id)
        return Return.ok(
            [SubscriptionResponseDTO.from_entity(s) for s in subscriptions]
        )
