"""
World clock feature package.

Provides factory functions a host window can call to embed the clock grid
without hard-coding internals. The standalone application lives in
`worldclock.app`.

Tk is imported only by the factories, so the model and controller stay
usable on interpreters built without tkinter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .models.world_clock_settings import WorldClockSettings

if TYPE_CHECKING:
    import tkinter as tk

    from .gui.world_clock_view import WorldClockView


def get_feature_name() -> str:
    """
    Human readable feature name (used e.g. for navigation labels).

    Returns:
        str: The feature name.
    """
    return "World Clock"


def create_feature_view(
    parent: "tk.Misc",
    settings: Optional[WorldClockSettings] = None,
    *,
    autostart: bool = True,
) -> "WorldClockView":
    """
    Factory for the clock grid view.

    Args:
        parent (tk.Misc): Tk container to mount the view onto.
        settings (WorldClockSettings, optional): Defaults to the built-in configuration.
        autostart (bool): Start the refresh loop right away.

    Returns:
        WorldClockView: A fully wired clock grid.
    """
    from .gui.world_clock_view import WorldClockView

    view = WorldClockView(parent, settings)
    if autostart:
        view.start()
    return view
