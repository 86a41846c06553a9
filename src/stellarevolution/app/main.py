"""
Run with: python -m stellarevolution
"""
from __future__ import annotations

import logging
import sys

from stellarevolution.app.application import create_app
from stellarevolution.app.ui.main_window import MainWindow
from stellarevolution.logging_config import setup_logging

import pyqtgraph as pg

pg.setConfigOption("background", "#0a0a1a")
pg.setConfigOption("foreground", "w")


def main() -> int:
    """Main entry point for the application."""
    # Use logging.DEBUG with show_ticks=True to see every tick on the console
    setup_logging(level=logging.INFO)

    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
