"""
worldclock/gui/main_window.py
=============================

Root window hosting a single WorldClockView. Closing the window stops the
refresh loop before Tk is torn down.
"""

from __future__ import annotations

import logging
import tkinter as tk
from typing import Optional

from ..models.world_clock_settings import WorldClockSettings
from .world_clock_view import WorldClockView

logger = logging.getLogger(__name__)


class MainWindow(tk.Tk):
    """Top-level world clock window."""

    def __init__(self, settings: Optional[WorldClockSettings] = None) -> None:
        super().__init__()
        self.settings = settings or WorldClockSettings()

        # Window properties
        self.title(self.settings.window_title)
        self._center_on_screen()

        self.view = WorldClockView(self, self.settings)
        self.view.pack(fill="both", expand=True)

        self.protocol("WM_DELETE_WINDOW", self.on_close)

    def start(self) -> None:
        logger.info("World clock opened with %d timezones", len(self.view.panels))
        self.view.start()

    def on_close(self) -> None:
        logger.info("World clock closed")
        self.view.stop()
        self.destroy()

    def _center_on_screen(self) -> None:
        width, height = self.settings.window_width, self.settings.window_height
        x = max(0, (self.winfo_screenwidth() - width) // 2)
        y = max(0, (self.winfo_screenheight() - height) // 2)
        self.geometry(f"{width}x{height}+{x}+{y}")
