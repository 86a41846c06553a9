from __future__ import annotations

from PySide6.QtWidgets import QWidget

from stellarevolution.controller.clock import SimulationClock


class BasePanel(QWidget):
    """Base class for panels. Holds a reference to the simulation clock."""
    def __init__(self, clock: SimulationClock, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.clock = clock
