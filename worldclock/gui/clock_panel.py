"""
ClockPanel (Tkinter)
--------------------
One tile of the world clock grid.

Layout, top to bottom: city name, time, date, region. City and region are set
once from the timezone entry; time and date change on every refresh.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk

from ..models.clock_snapshot import ClockSnapshot
from ..models.timezone_entry import TimezoneEntry
from . import theme


class ClockPanel(ttk.Frame):
    """Shows the current time of a single timezone."""

    def __init__(self, parent: tk.Misc, entry: TimezoneEntry) -> None:
        """
        Args:
            parent (tk.Misc): Tk parent container.
            entry (TimezoneEntry): The timezone this panel displays.
        """
        super().__init__(parent, style=theme.PANEL_STYLE, padding=(10, 15))
        self._entry = entry
        self._build_ui()

    # --- Public API ---------------------------------------------------------

    @property
    def entry(self) -> TimezoneEntry:
        return self._entry

    @property
    def time_text(self) -> str:
        return self.time_var.get()

    @property
    def date_text(self) -> str:
        return self.date_var.get()

    def show_snapshot(self, snapshot: ClockSnapshot) -> None:
        self.time_var.set(snapshot.time_text)
        self.date_var.set(snapshot.date_text)

    # --- UI -----------------------------------------------------------------

    def _build_ui(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        placeholder = ClockSnapshot.placeholder()
        self.time_var = tk.StringVar(self, value=placeholder.time_text)
        self.date_var = tk.StringVar(self, value=placeholder.date_text)

        self.city_label = ttk.Label(self, text=self._entry.display_city, style=theme.CITY_STYLE)
        self.city_label.grid(row=0, column=0, sticky="ew")

        self.time_label = ttk.Label(self, textvariable=self.time_var, style=theme.TIME_STYLE)
        self.time_label.grid(row=1, column=0, sticky="ew", pady=(5, 0))

        self.date_label = ttk.Label(self, textvariable=self.date_var, style=theme.DATE_STYLE)
        self.date_label.grid(row=2, column=0, sticky="ew", pady=(0, 5))

        self.region_label = ttk.Label(self, text=self._entry.region, style=theme.REGION_STYLE)
        self.region_label.grid(row=3, column=0, sticky="ew")
