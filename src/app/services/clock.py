"""Clock

Source of "today" for billing queries, bound to an explicit time zone so
results do not depend on the host's default zone.
"""

from datetime import date, datetime
from zoneinfo import ZoneInfo


class Clock:
    def __init__(self, timezone_name: str = "UTC"):
        self.timezone_name = timezone_name
        self.tz = ZoneInfo(timezone_name)

    def now(self) -> datetime:
        return datetime.now(tz=self.tz)

    def today(self) -> date:
        return self.now().date()


class FixedClock(Clock):
    """Clock pinned to a given date (scripts and tests)"""

    def __init__(self, fixed_date: date, timezone_name: str = "UTC"):
        super().__init__(timezone_name)
        self.fixed_date = fixed_date

    def now(self) -> datetime:
        return datetime(
            self.fixed_date.year, self.fixed_date.month, self.fixed_date.day, tzinfo=self.tz
        )

    def today(self) -> date:
        return self.fixed_date
