"""Unit tests for UpdateSubscription use case"""

import pytest
from datetime import date
from decimal import Decimal

from src.app.use_cases.subscriptions.update_subscription import UpdateSubscription
from src.app.use_cases.subscriptions.dtos import SubscriptionCommandDTO
from src.domain.billing_cycle import BillingCycle


@pytest.fixture
def use_case(mock_uow, mock_subscription_repo, mock_user_repo):
    return UpdateSubscription(
        uow=mock_uow,
        subscription_repo=mock_subscription_repo,
        user_repo=mock_user_repo,
    )


async def _echo(subscription):
    return subscription


class TestUpdateSubscription:

    @pytest.mark.asyncio
    async def test_update_recomputes_next_billing_date(
        self, use_case, mock_uow, mock_subscription_repo, mock_user_repo, make_subscription
    ):
        """
        Given: Existing MONTHLY subscription
        When: Updated to YEARLY with a new billing date
        Then: next_billing_date is recomputed from the new values
        """
        # Arrange
        existing = make_subscription(id=7)
        mock_subscription_repo.get_by_id.return_value = existing
        mock_subscription_repo.update.side_effect = _echo
        mock_user_repo.exists_by_id.return_value = True

        command = SubscriptionCommandDTO(
            user_id=1,
            service_name="Netflix Premium",
            price=Decimal("300000"),
            billing_cycle=BillingCycle.YEARLY,
            billing_date=date(2025, 1, 31),
        )

        # Act
        result = await use_case.execute(7, command)

        # Assert
        assert result.is_ok()
        response = result.value
        assert response.id == 7
        assert response.service_name == "Netflix Premium"
        assert response.price == Decimal("300000")
        assert response.billing_cycle == BillingCycle.YEARLY
        assert response.billing_date == date(2025, 1, 31)
        assert response.next_billing_date == date(2026, 1, 31)
        assert response.next_billing_date != date(2025, 1, 15)
        mock_uow.commit.assert_called_once()

    @pytest.mark.asyncio
    async def test_update_can_change_owner(
        self, use_case, mock_subscription_repo, mock_user_repo, make_subscription
    ):
        # Arrange
        mock_subscription_repo.get_by_id.return_value = make_subscription(id=7, user_id=1)
        mock_subscription_repo.update.side_effect = _echo
        mock_user_repo.exists_by_id.return_value = True
        command = SubscriptionCommandDTO(
            user_id=2,
            service_name="Netflix",
            price=Decimal("9500"),
            billing_cycle=BillingCycle.MONTHLY,
            billing_date=date(2024, 12, 15),
        )

        # Act
        result = await use_case.execute(7, command)

        # Assert
        assert result.is_ok()
        assert result.value.user_id == 2
        mock_user_repo.exists_by_id.assert_called_once_with(2)

    @pytest.mark.asyncio
    async def test_subscription_not_found(
        self, use_case, mock_uow, mock_subscription_repo, mock_user_repo
    ):
        # Arrange
        mock_subscription_repo.get_by_id.return_value = None
        command = SubscriptionCommandDTO(
            user_id=1,
            service_name="Netflix",
            price=Decimal("9500"),
            billing_cycle=BillingCycle.MONTHLY,
            billing_date=date(2024, 12, 15),
        )

        # Act
        result = await use_case.execute(999, command)

        # Assert
        assert result.is_err()
        assert result.error.code == "SUBSCRIPTION_NOT_FOUND"
        assert "999" in result.error.message
        mock_subscription_repo.update.assert_not_called()
        mock_uow.commit.assert_not_called()

    @pytest.mark.asyncio
    async def test_owner_not_found_leaves_subscription_untouched(
        self, use_case, mock_uow, mock_subscription_repo, mock_user_repo, make_subscription
    ):
        # Arrange
        existing = make_subscription(id=7)
        mock_subscription_repo.get_by_id.return_value = existing
        mock_user_repo.exists_by_id.return_value = False
        command = SubscriptionCommandDTO(
            user_id=99,
            service_name="Changed",
            price=Decimal("1"),
            billing_cycle=BillingCycle.YEARLY,
            billing_date=date(2025, 6, 1),
        )

        # Act
        result = await use_case.execute(7, command)

        # Assert
        assert result.is_err()
        assert result.error.code == "OWNER_NOT_FOUND"
        assert existing.service_name == "Netflix"
        assert existing.next_billing_date == date(2025, 1, 15)
        mock_subscription_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_persistence_failure_rolls_back(
        self, use_case, mock_uow, mock_subscription_repo, mock_user_repo, make_subscription
    ):
        # Arrange
        mock_subscription_repo.get_by_id.return_value = make_subscription(id=7)
        mock_subscription_repo.update.side_effect = Exception("deadlock detected")
        mock_user_repo.exists_by_id.return_value = True
        command = SubscriptionCommandDTO(
            user_id=1,
            service_name="Netflix",
            price=Decimal("9500"),
            billing_cycle=BillingCycle.MONTHLY,
            billing_date=date(2024, 12, 15),
        )

        # Act
        result = await use_case.execute(7, command)

        # Assert
        assert result.is_err()
        assert result.error.code == "PERSISTENCE_FAILURE"
        mock_uow.rollback.assert_called_once()
