"""Toolkit-independent clock logic: the timezone model and the refresh controller."""

from worldclock.logic.timezone_clock_model import TimezoneClockModel
from worldclock.logic.clock_display_controller import ClockDisplayController, ControllerState

__all__ = [
    "TimezoneClockModel",
    "ClockDisplayController",
    "ControllerState",
]
