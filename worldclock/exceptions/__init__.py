from worldclock.exceptions.errors import UnknownTimezoneError, WorldClockError

__all__ = ["UnknownTimezoneError", "WorldClockError"]
