from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import logging
import os
import sys

from stellarevolution.config import STYLESHEET_PATH

logger = logging.getLogger(__name__)

ORG_ID = "stellarevolution"
APP_ID = "stellar-evolution-simulator"

VISIBLE_APP_NAME = "Stellar Evolution Simulator"


def load_stylesheet(path: str = STYLESHEET_PATH) -> str:
    """Return the Qt stylesheet text, or an empty string when it is missing."""
    if not os.path.isfile(path):
        logger.warning(f"Stylesheet not found at {path}; using the default style.")
        return ""
    with open(path, encoding="utf-8") as f:
        return f.read()


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    app.setStyleSheet(load_stylesheet())

    return app
