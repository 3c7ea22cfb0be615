"""
WorldClockView – heading plus a grid of ClockPanels, one per configured timezone.

Conventions:
- The view owns the TimezoneClockModel and the ClockDisplayController.
- The view itself is the controller's tick scheduler (Tk `after`).
- Destroying the view stops the refresh loop.
"""

from __future__ import annotations

import math
import tkinter as tk
from tkinter import ttk
from typing import List, Optional

from ..logic.clock_display_controller import ClockDisplayController
from ..logic.timezone_clock_model import TimezoneClockModel
from ..models.world_clock_settings import WorldClockSettings
from . import theme
from .clock_panel import ClockPanel


class WorldClockView(ttk.Frame):
    """Grid of clocks refreshed once per tick."""

    def __init__(
        self,
        parent: tk.Misc,
        settings: Optional[WorldClockSettings] = None,
        *,
        model: Optional[TimezoneClockModel] = None,
    ) -> None:
        super().__init__(parent, style=theme.BACKDROP_STYLE)
        self._settings = settings or WorldClockSettings()
        self._model = model or TimezoneClockModel(self._settings.timezones)

        self.panels: List[ClockPanel] = []
        self._build_ui()

        self.controller = ClockDisplayController(
            self._model,
            self.panels,
            self,
            interval_ms=self._settings.update_interval_ms,
        )

    # --- Public API ---------------------------------------------------------

    def start(self) -> None:
        self.controller.start()

    def stop(self) -> None:
        self.controller.stop()

    def destroy(self) -> None:
        self.controller.stop()
        super().destroy()

    # --- UI -----------------------------------------------------------------

    def _build_ui(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        self.heading_label = ttk.Label(self, text=self._settings.heading, style=theme.HEADING_STYLE)
        self.heading_label.grid(row=0, column=0, sticky="ew", pady=(20, 10))

        grid = ttk.Frame(self, style=theme.BACKDROP_STYLE, padding=(20, 10, 20, 20))
        grid.grid(row=1, column=0, sticky="nsew")

        entries = self._model.list_timezones()
        columns = self._settings.grid_columns(len(entries))
        for index, entry in enumerate(entries):
            row, col = divmod(index, columns)
            panel = ClockPanel(grid, entry)
            panel.grid(row=row, column=col, sticky="nsew", padx=7, pady=7)
            self.panels.append(panel)

        for col in range(columns):
            grid.columnconfigure(col, weight=1, uniform="clock")
        for row in range(math.ceil(len(self.panels) / columns)):
            grid.rowconfigure(row, weight=1, uniform="clock")
