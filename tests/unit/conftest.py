import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.services.clock import FixedClock
from src.domain.billing_cycle import BillingCycle
from src.domain.subscription import Subscription


@pytest.fixture
def mock_uow():
    """Mock unit of work"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock()
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    return uow


@pytest.fixture
def mock_subscription_repo():
    """Mock subscription repository"""
    return AsyncMock()


@pytest.fixture
def mock_user_repo():
    """Mock user repository"""
    return AsyncMock()


@pytest.fixture
def fixed_clock():
    """Clock pinned to 2025-01-10"""
    return FixedClock(date(2025, 1, 10))


@pytest.fixture
def make_subscription():
    """Factory for persisted-looking Subscription entities"""
    def _make(
        id=1,
        user_id=1,
        service_name="Netflix",
        price="9500.00",
        billing_cycle=BillingCycle.MONTHLY,
        billing_date=date(2024, 12, 15),
        next_billing_date=date(2025, 1, 15),
    ):
        return Subscription(
            id=id,
            user_id=user_id,
            service_name=service_name,
            price=Decimal(price),
            billing_cycle=billing_cycle,
            billing_date=billing_date,
            next_billing_date=next_billing_date,
            created_at=datetime(2024, 12, 15, 9, 0, 0, tzinfo=timezone.utc),
            updated_at=datetime(2024, 12, 15, 9, 0, 0, tzinfo=timezone.utc),
        )
    return _make
