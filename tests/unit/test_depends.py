"""Unit tests for API dependency providers"""

from unittest.mock import patch

import src.depends as depends
from src.app.services.billing_calculator import BillingCalculator
from src.app.services.clock import Clock


class TestDependencies:

    @patch("src.depends.ApplicationConfig")
    def test_get_clock_uses_billing_timezone(self, mock_app_config):
        # Arrange
        mock_app_config.BILLING_TIMEZONE = "Asia/Seoul"

        # Act
        clock = depends.get_clock()

        # Assert
        assert isinstance(clock, Clock)
        assert clock.tz.key == "Asia/Seoul"

    def test_get_billing_calculator_is_shared(self):
        first = depends.get_billing_calculator()

        assert isinstance(first, BillingCalculator)
        assert depends.get_billing_calculator() is first

    def test_write_routes_share_the_request_session(self):
        """Routes build their unit of work from get_session; no separate provider exists"""
        assert not hasattr(depends, "get_unit_of_work")
