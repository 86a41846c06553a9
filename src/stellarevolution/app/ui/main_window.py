"""
Main window: simulation area on the left, controls on the right.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QMainWindow, QSplitter, QWidget, QVBoxLayout, QLabel, QScrollArea, QStatusBar
)

from stellarevolution.app.application import VISIBLE_APP_NAME
from stellarevolution.app.ui.hr_diagram import HRDiagram
from stellarevolution.app.ui.panels.controls import ControlsPanel
from stellarevolution.app.ui.panels.equations import EquationsPanel
from stellarevolution.app.ui.panels.phase_info import PhaseInfoPanel
from stellarevolution.app.ui.panels.timeline import TimelinePanel
from stellarevolution.app.ui.star_view import StarView
from stellarevolution.config import DEFAULT_SETTINGS, SimulationSettings
from stellarevolution.controller.clock import SimulationClock
from stellarevolution.model.state import SimulationState

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, settings: SimulationSettings = DEFAULT_SETTINGS) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 900)

        # One clock per window; torn down in closeEvent
        self.clock = SimulationClock(settings=settings, parent=self)

        # ---- Left: simulation area ----
        sim_area = QWidget()
        v = QVBoxLayout(sim_area)

        header = QLabel("Stellar Evolution Simulator")
        header.setObjectName("header")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        v.addWidget(header)

        subtitle = QLabel("Explore how stars live and die based on their initial mass!")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        v.addWidget(subtitle)

        self.star_view = StarView()
        v.addWidget(self.star_view, 1)

        self.phase_info = PhaseInfoPanel(self.clock)
        v.addWidget(self.phase_info)

        self.timeline = TimelinePanel(self.clock)
        v.addWidget(self.timeline)

        self.hr_diagram = HRDiagram()
        v.addWidget(self.hr_diagram)

        self.equations = EquationsPanel(self.clock)
        v.addWidget(self.equations)

        scroll = QScrollArea()
        scroll.setWidget(sim_area)
        scroll.setWidgetResizable(True)

        # ---- Right: controls ----
        self.controls = ControlsPanel(self.clock)
        self.controls.setMinimumWidth(320)

        split = QSplitter(Qt.Orientation.Horizontal, self)
        split.setChildrenCollapsible(False)
        split.addWidget(scroll)
        split.addWidget(self.controls)
        split.setStretchFactor(0, 1)
        split.setStretchFactor(1, 0)
        self.setCentralWidget(split)

        self.setStatusBar(QStatusBar())

        self.clock.state_changed.connect(self._render_state)
        self.clock.finished.connect(self._on_finished)
        self._render_state(self.clock.state)

    def _render_state(self, state: SimulationState) -> None:
        properties = state.properties
        self.star_view.set_star(state.phase, properties)
        self.hr_diagram.set_star(properties)
        phases = state.phases
        self.statusBar().showMessage(
            f"{state.mass:g} M☉ - phase {phases.index(state.phase) + 1}/{len(phases)}: "
            f"{state.phase_info.title}"
        )

    def _on_finished(self) -> None:
        self.statusBar().showMessage(
            f"Evolution complete: {self.clock.phase_info.title} after {self.clock.age:.0f} Myr"
        )

    def closeEvent(self, event: QCloseEvent) -> None:
        self.clock.shutdown()
        super().closeEvent(event)
