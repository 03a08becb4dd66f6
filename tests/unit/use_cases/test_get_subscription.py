"""Unit tests for GetSubscription and ListSubscriptions use cases"""

import pytest
from datetime import date

from src.app.use_cases.subscriptions.get_subscription import GetSubscription
from src.app.use_cases.subscriptions.list_subscriptions import ListSubscriptions


class TestGetSubscription:

    @pytest.mark.asyncio
    async def test_get_existing(self, mock_subscription_repo, make_subscription):
        # Arrange
        mock_subscription_repo.get_by_id.return_value = make_subscription(id=3)
        use_case = GetSubscription(mock_subscription_repo)

        # Act
        result = await use_case.execute(3)

        # Assert
        assert result.is_ok()
        assert result.value.id == 3
        assert result.value.next_billing_date == date(2025, 1, 15)
        mock_subscription_repo.get_by_id.assert_called_once_with(3)

    @pytest.mark.asyncio
    async def test_get_missing(self, mock_subscription_repo):
        # Arrange
        mock_subscription_repo.get_by_id.return_value = None
        use_case = GetSubscription(mock_subscription_repo)

        # Act
        result = await use_case.execute(3)

        # Assert
        assert result.is_err()
        assert result.error.code == "SUBSCRIPTION_NOT_FOUND"


class TestListSubscriptions:

    @pytest.mark.asyncio
    async def test_list_returns_all_owner_subscriptions(
        self, mock_subscription_repo, make_subscription
    ):
        # Arrange
        mock_subscription_repo.get_by_user_id.return_value = [
            make_subscription(id=1, service_name="Netflix"),
            make_subscription(id=2, service_name="Gym"),
        ]
        use_case = ListSubscriptions(mock_subscription_repo)

        # Act
        result = await use_case.execute(1)

        # Assert
        assert result.is_ok()
        assert [s.id for s in result.value] == [1, 2]
        mock_subscription_repo.get_by_user_id.assert_called_once_with(1)

    @pytest.mark.asyncio
    async def test_owner_without_subscriptions_gets_empty_list(self, mock_subscription_repo):
        # Arrange
        mock_subscription_repo.get_by_user_id.return_value = []
        use_case = ListSubscriptions(mock_subscription_repo)

        # Act
        result = await use_case.execute(1)

        # Assert
        assert result.is_ok()
        assert result.value == []
