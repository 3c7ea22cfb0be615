"""Formatted time/date pair for one timezone at one instant."""

from __future__ import annotations

from dataclasses import dataclass

PLACEHOLDER_TIME = "--:--:--"
PLACEHOLDER_DATE = "---"


@dataclass(frozen=True)
class ClockSnapshot:
    time_text: str
    date_text: str

    @classmethod
    def placeholder(cls) -> "ClockSnapshot":
        """Shown before the first refresh and for zones that cannot be resolved."""
        return cls(PLACEHOLDER_TIME, PLACEHOLDER_DATE)
