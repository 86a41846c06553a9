"""Mass selection, run controls and presets."""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QGroupBox, QLabel, QPushButton, QSlider
)

from stellarevolution.app.ui.panels.base import BasePanel
from stellarevolution.app.ui.presentation import (
    MASS_PRESETS, format_mass, mass_to_slider, slider_range, slider_to_mass,
)
from stellarevolution.controller.clock import SimulationClock

logger = logging.getLogger(__name__)


class ControlsPanel(BasePanel):
    def __init__(self, clock: SimulationClock, parent: QWidget | None = None) -> None:
        super().__init__(clock, parent)

        layout = QVBoxLayout(self)

        # --- Mass ---
        grp_mass = QGroupBox("Initial Stellar Mass")
        l_mass = QVBoxLayout(grp_mass)

        self.slider = QSlider(Qt.Orientation.Horizontal)
        lo, hi = slider_range()
        self.slider.setRange(lo, hi)
        self.slider.setSingleStep(1)
        self.slider.setPageStep(2)
        self.slider.setValue(mass_to_slider(self.clock.mass))
        self.slider.valueChanged.connect(self.on_slider_changed)
        l_mass.addWidget(self.slider)

        self.lbl_mass = QLabel(format_mass(self.clock.mass))
        self.lbl_mass.setAlignment(Qt.AlignmentFlag.AlignCenter)
        l_mass.addWidget(self.lbl_mass)

        layout.addWidget(grp_mass)

        # --- Run ---
        hbox_run = QHBoxLayout()
        self.btn_start = QPushButton("Start Evolution")
        self.btn_start.setMinimumHeight(40)
        self.btn_start.clicked.connect(self.clock.toggle)
        hbox_run.addWidget(self.btn_start)

        self.btn_reset = QPushButton("Reset")
        self.btn_reset.setObjectName("secondary")
        self.btn_reset.setMinimumHeight(40)
        self.btn_reset.clicked.connect(self.clock.reset)
        hbox_run.addWidget(self.btn_reset)
        layout.addLayout(hbox_run)

        # --- Presets ---
        grp_presets = QGroupBox("Quick Presets")
        grid = QGridLayout(grp_presets)
        self.preset_buttons: list[QPushButton] = []
        for i, preset in enumerate(MASS_PRESETS):
            btn = QPushButton(preset.label)
            btn.clicked.connect(lambda _=False, m=preset.mass: self.apply_mass(m))
            grid.addWidget(btn, i // 2, i % 2)
            self.preset_buttons.append(btn)
        layout.addWidget(grp_presets)

        layout.addStretch()

        self.clock.running_changed.connect(self.on_running_changed)
        self.clock.state_changed.connect(lambda *_: self.sync_mass())

    def on_slider_changed(self, position: int) -> None:
        mass = slider_to_mass(position)
        if mass != self.clock.mass:
            self.clock.set_mass(mass)

    def apply_mass(self, mass: float) -> None:
        logger.info(f"Preset selected: {mass:g} Msun")
        self.clock.set_mass(mass)

    def sync_mass(self) -> None:
        """Keep the slider and label in line with the clock (e.g. after a preset)."""
        self.slider.blockSignals(True)
        self.slider.setValue(mass_to_slider(self.clock.mass))
        self.slider.blockSignals(False)
        self.lbl_mass.setText(format_mass(self.clock.mass))

    def on_running_changed(self, running: bool) -> None:
        self.btn_start.setText("Pause" if running else "Start Evolution")
