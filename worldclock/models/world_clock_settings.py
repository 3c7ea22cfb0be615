"""
Static configuration for the world clock.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_TIMEZONES: Tuple[str, ...] = (
    "America/New_York",
    "America/Los_Angeles",
    "Europe/London",
    "Europe/Paris",
    "Asia/Tokyo",
    "Asia/Dubai",
    "Asia/Singapore",
    "Australia/Sydney",
    "Pacific/Auckland",
)


@dataclass(frozen=True)
class WorldClockSettings:
    """
    Encapsulates the fixed options of the world clock window.

    Attributes:
        timezones (tuple[str, ...]): IANA timezone names, in display order.
        update_interval_ms (int): Refresh cadence in milliseconds.
        window_title (str): Title of the top-level window.
        window_width (int): Initial window width in pixels.
        window_height (int): Initial window height in pixels.
        heading (str): Text of the heading above the clock grid.
        grid_rows (int): Number of panel rows; columns follow from the zone count.
    """
    timezones: Tuple[str, ...] = DEFAULT_TIMEZONES
    update_interval_ms: int = 1000
    window_title: str = "World Clock - Multiple Timezones"
    window_width: int = 900
    window_height: int = 600
    heading: str = "World Time Zones"
    grid_rows: int = 2

    def grid_columns(self, count: Optional[int] = None) -> int:
        """
        Returns the number of panel columns needed to fit `count` panels
        (default: one per configured timezone) into `grid_rows` rows.

        Returns:
            int: At least 1.
        """
        rows = max(1, self.grid_rows)
        if count is None:
            count = len(self.timezones)
        return max(1, math.ceil(count / rows))

    def geometry(self) -> str:
        """Tk geometry string such as "900x600"."""
        return f"{self.window_width}x{self.window_height}"
