import os

# Must be set before any Qt module is imported
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def clock(qapp):
    from stellarevolution.controller.clock import SimulationClock

    c = SimulationClock()
    yield c
    c.shutdown()
