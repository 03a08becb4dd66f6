"""Unit tests for ListUpcomingSubscriptions use case"""

import pytest
from datetime import date

from src.app.use_cases.subscriptions.list_upcoming_subscriptions import ListUpcomingSubscriptions


class TestListUpcomingSubscriptions:

    @pytest.mark.asyncio
    async def test_queries_inclusive_three_day_window(
        self, mock_subscription_repo, fixed_clock, make_subscription
    ):
        """
        Given: Today is 2025-01-10
        When: execute is called with the default horizon
        Then: Repository is queried for [2025-01-10, 2025-01-13]
        """
        # Arrange
        mock_subscription_repo.get_by_user_id_and_next_billing_date_between.return_value = [
            make_subscription(id=1, next_billing_date=date(2025, 1, 10)),
            make_subscription(id=2, next_billing_date=date(2025, 1, 13)),
        ]
        use_case = ListUpcomingSubscriptions(mock_subscription_repo, fixed_clock)

        # Act
        result = await use_case.execute(1)

        # Assert
        assert result.is_ok()
        assert [s.id for s in result.value] == [1, 2]
        mock_subscription_repo.get_by_user_id_and_next_billing_date_between.assert_called_once_with(
            1, date(2025, 1, 10), date(2025, 1, 13)
        )

    @pytest.mark.asyncio
    async def test_custom_horizon(self, mock_subscription_repo, fixed_clock):
        # Arrange
        mock_subscription_repo.get_by_user_id_and_next_billing_date_between.return_value = []
        use_case = ListUpcomingSubscriptions(mock_subscription_repo, fixed_clock)

        # Act
        result = await use_case.execute(1, horizon_days=0)

        # Assert
        assert result.is_ok()
        assert result.value == []
        mock_subscription_repo.get_by_user_id_and_next_billing_date_between.assert_called_once_with(
            1, date(2025, 1, 10), date(2025, 1, 10)
        )

    @pytest.mark.asyncio
    async def test_negative_horizon_rejected(self, mock_subscription_repo, fixed_clock):
        # Arrange
        use_case = ListUpcomingSubscriptions(mock_subscription_repo, fixed_clock)

        # Act
        result = await use_case.execute(1, horizon_days=-1)

        # Assert
        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_subscription_repo.get_by_user_id_and_next_billing_date_between.assert_not_called()
