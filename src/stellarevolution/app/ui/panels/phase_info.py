from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel

from stellarevolution.app.ui.panels.base import BasePanel
from stellarevolution.controller.clock import SimulationClock
from stellarevolution.model.phases import Phase, phase_info


class PhaseInfoPanel(BasePanel):
    """Title and description of the current phase."""
    def __init__(self, clock: SimulationClock, parent: QWidget | None = None) -> None:
        super().__init__(clock, parent)
        self.setObjectName("phaseInfo")

        layout = QVBoxLayout(self)
        self.lbl_title = QLabel()
        self.lbl_title.setObjectName("phaseTitle")
        layout.addWidget(self.lbl_title)

        self.lbl_description = QLabel()
        self.lbl_description.setWordWrap(True)
        layout.addWidget(self.lbl_description)

        self.clock.phase_changed.connect(self.show_phase)
        self.show_phase(self.clock.phase)

    def show_phase(self, phase: Phase) -> None:
        info = phase_info(phase)
        self.lbl_title.setText(info.title)
        self.lbl_description.setText(info.description)
