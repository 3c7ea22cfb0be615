"""
TimezoneClockModel – the configured timezones and their current wall-clock time.
Separated from the views so no formatting logic depends on Tk.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Iterable, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..exceptions.errors import UnknownTimezoneError
from ..models.clock_snapshot import ClockSnapshot
from ..models.timezone_entry import TimezoneEntry
from ..models.world_clock_settings import DEFAULT_TIMEZONES

TIME_FORMAT = "%H:%M:%S"

# Fixed English names; strftime's %a/%b would follow the process locale.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_date(moment: datetime) -> str:
    """
    Formats a date as e.g. "Mon, Jan 01 2024".

    Args:
        moment (datetime): Any datetime; only its calendar date is used.

    Returns:
        str: Abbreviated weekday, abbreviated month, zero-padded day, 4-digit year.
    """
    return (f"{_WEEKDAYS[moment.weekday()]}, {_MONTHS[moment.month - 1]} "
            f"{moment.day:02d} {moment.year:04d}")


class TimezoneClockModel:
    """Holds the configured timezone list and formats the current time per zone."""

    def __init__(
        self,
        timezones: Iterable[str] = DEFAULT_TIMEZONES,
        *,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        """
        Args:
            timezones (Iterable[str]): IANA identifiers in display order.
            clock (callable, optional): Returns the current instant as an aware
                datetime. Defaults to the system clock in UTC.
        """
        self._entries: Tuple[TimezoneEntry, ...] = tuple(TimezoneEntry(tz) for tz in timezones)
        self._clock = clock or _utc_now

    def list_timezones(self) -> Tuple[TimezoneEntry, ...]:
        return self._entries

    def now_localized(self, identifier: str) -> datetime:
        """
        Current instant converted to the given zone.

        Raises:
            UnknownTimezoneError: If the host timezone database has no such zone.
        """
        return self._clock().astimezone(self._resolve(identifier))

    def snapshot(self, identifier: str) -> ClockSnapshot:
        """
        Formats the current time in `identifier`.

        Raises:
            UnknownTimezoneError: If the host timezone database has no such zone.
        """
        now = self.now_localized(identifier)
        return ClockSnapshot(time_text=now.strftime(TIME_FORMAT), date_text=format_date(now))

    @staticmethod
    def _resolve(identifier: str) -> ZoneInfo:
        try:
            return ZoneInfo(identifier)
        except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as exc:
            # OSError covers keys naming a tzdata directory, e.g. "America"
            raise UnknownTimezoneError(identifier) from exc
