"""Value objects and static configuration of the world clock."""

from worldclock.models.clock_snapshot import ClockSnapshot
from worldclock.models.timezone_entry import TimezoneEntry
from worldclock.models.world_clock_settings import DEFAULT_TIMEZONES, WorldClockSettings

__all__ = [
    "ClockSnapshot",
    "TimezoneEntry",
    "DEFAULT_TIMEZONES",
    "WorldClockSettings",
]
