"""Value object for one configured timezone."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TimezoneEntry:
    """A configured IANA timezone plus the labels derived from it."""

    identifier: str

    @property
    def display_city(self) -> str:
        """Part after the last '/', underscores shown as spaces ("Los_Angeles" -> "Los Angeles")."""
        return self.identifier.rsplit("/", 1)[-1].replace("_", " ")

    @property
    def region(self) -> str:
        """Part before the first '/' ("Asia/Tokyo" -> "Asia")."""
        return self.identifier.split("/", 1)[0]
