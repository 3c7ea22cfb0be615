"""
Entry point: builds the window, applies the look-and-feel and runs Tk.
"""

from __future__ import annotations

import logging

from .gui.main_window import MainWindow
from .gui.theme import apply_theme

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)


def main() -> None:
    configure_logging()

    app = MainWindow()
    apply_theme(app)
    app.start()
    app.mainloop()


if __name__ == "__main__":
    main()
