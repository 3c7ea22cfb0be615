"""
Look-and-feel for the world clock window.

Picks the platform's native ttk theme and registers the named styles the
clock panels use. Styling is cosmetic: any failure here is logged and the
window falls back to Tk's default look.
"""

from __future__ import annotations

import logging
import sys
import tkinter as tk
from tkinter import ttk
from typing import Optional

logger = logging.getLogger(__name__)

BACKDROP_BG = "#1e3c72"
PANEL_BG = "#ffffff"

HEADING_STYLE = "Heading.TLabel"
PANEL_STYLE = "ClockPanel.TFrame"
CITY_STYLE = "City.ClockPanel.TLabel"
TIME_STYLE = "Time.ClockPanel.TLabel"
DATE_STYLE = "Date.ClockPanel.TLabel"
REGION_STYLE = "Region.ClockPanel.TLabel"
BACKDROP_STYLE = "Backdrop.TFrame"


def system_theme_name(platform: Optional[str] = None) -> str:
    """
    Name of the ttk theme that matches the native look of a platform.

    Args:
        platform (str, optional): A `sys.platform` value; defaults to the current one.

    Returns:
        str: "vista" on Windows, "aqua" on macOS, "clam" elsewhere.
    """
    platform = platform or sys.platform
    if platform.startswith("win"):
        return "vista"
    if platform == "darwin":
        return "aqua"
    return "clam"


def configure_styles(style: ttk.Style) -> None:
    style.configure(BACKDROP_STYLE, background=BACKDROP_BG)
    style.configure(HEADING_STYLE, background=BACKDROP_BG, foreground="#ffffff",
                    font=("Arial", 28, "bold"), anchor="center")
    style.configure(PANEL_STYLE, background=PANEL_BG, relief="solid", borderwidth=1)
    style.configure(CITY_STYLE, background=PANEL_BG, foreground="#282828",
                    font=("Arial", 16, "bold"), anchor="center")
    style.configure(TIME_STYLE, background=PANEL_BG, foreground="#1464b4",
                    font=("Courier", 24, "bold"), anchor="center")
    style.configure(DATE_STYLE, background=PANEL_BG, foreground="#505050",
                    font=("Arial", 12), anchor="center")
    style.configure(REGION_STYLE, background=PANEL_BG, foreground="#787878",
                    font=("Arial", 10, "italic"), anchor="center")


def apply_theme(root: tk.Misc, style: Optional[ttk.Style] = None) -> bool:
    """
    Applies the native theme (when installed) and the clock styles.

    Args:
        root (tk.Misc): Any widget of the target Tk instance.
        style (ttk.Style, optional): Style object to use instead of creating one.

    Returns:
        bool: True if everything was applied, False if it failed and the
        default presentation stays in place.
    """
    try:
        style = style or ttk.Style(root)
        wanted = system_theme_name()
        if wanted in style.theme_names():
            style.theme_use(wanted)
            logger.debug("Using ttk theme %r", wanted)
        else:
            logger.debug("ttk theme %r not available, keeping %r", wanted, style.theme_use())
        configure_styles(style)
    except Exception:
        logger.warning("Could not apply look-and-feel, using defaults", exc_info=True)
        return False
    return True
