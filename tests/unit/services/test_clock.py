"""Unit tests for Clock"""

from datetime import date, datetime
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest

from src.app.services.clock import Clock, FixedClock


class TestClock:
    def test_today_uses_configured_timezone(self):
        """Late evening UTC is already the next day in Seoul"""
        instant = datetime(2025, 1, 10, 20, 0, 0, tzinfo=ZoneInfo("UTC"))

        with patch("src.app.services.clock.datetime") as mock_datetime:
            mock_datetime.now.side_effect = lambda tz=None: instant.astimezone(tz)
            assert Clock("UTC").today() == date(2025, 1, 10)
            assert Clock("Asia/Seoul").today() == date(2025, 1, 11)

    def test_now_is_timezone_aware(self):
        assert Clock("Europe/Berlin").now().tzinfo is not None

    def test_unknown_timezone_raises(self):
        with pytest.raises(Exception):
            Clock("Not/AZone")


class TestFixedClock:
    def test_today_is_fixed(self):
        clock = FixedClock(date(2025, 1, 10))
        assert clock.today() == date(2025, 1, 10)
        assert clock.now().date() == date(2025, 1, 10)
