"""Lifetime progress bar and stat cards."""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QLabel, QProgressBar, QFrame

from stellarevolution.app.ui.panels.base import BasePanel
from stellarevolution.app.ui.presentation import format_stats
from stellarevolution.controller.clock import SimulationClock
from stellarevolution.model.state import SimulationState

PROGRESS_RESOLUTION = 1000


class StatCard(QFrame):
    def __init__(self, label: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("statCard")
        v = QVBoxLayout(self)
        self.lbl_value = QLabel("-")
        self.lbl_value.setObjectName("statValue")
        self.lbl_value.setAlignment(Qt.AlignmentFlag.AlignCenter)
        v.addWidget(self.lbl_value)
        lbl = QLabel(label)
        lbl.setObjectName("statLabel")
        lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
        v.addWidget(lbl)

    def set_value(self, text: str) -> None:
        self.lbl_value.setText(text)


class TimelinePanel(BasePanel):
    def __init__(self, clock: SimulationClock, parent: QWidget | None = None) -> None:
        super().__init__(clock, parent)

        layout = QVBoxLayout(self)
        title = QLabel("Stellar Lifetime Progress")
        title.setObjectName("sectionTitle")
        layout.addWidget(title)

        self.progress = QProgressBar()
        self.progress.setRange(0, PROGRESS_RESOLUTION)
        self.progress.setTextVisible(False)
        layout.addWidget(self.progress)

        grid = QGridLayout()
        self.cards: dict[str, StatCard] = {}
        labels = format_stats(self.clock.age, self.clock.properties).keys()
        for i, label in enumerate(labels):
            card = StatCard(label)
            grid.addWidget(card, i // 2, i % 2)
            self.cards[label] = card
        layout.addLayout(grid)

        self.clock.state_changed.connect(self.show_state)
        self.show_state(self.clock.state)

    def show_state(self, state: SimulationState) -> None:
        self.progress.setValue(round(state.progress * PROGRESS_RESOLUTION))
        for label, text in format_stats(state.age, state.properties).items():
            self.cards[label].set_value(text)
