"""World clock exceptions."""
from __future__ import annotations


class WorldClockError(Exception):
    """Base exception for the world clock."""


class UnknownTimezoneError(WorldClockError, LookupError):
    """Raised when an identifier cannot be resolved against the timezone database."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Unknown timezone: {identifier!r}")
        self.identifier = identifier
