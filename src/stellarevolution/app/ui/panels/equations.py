"""Textbook mass scaling relations shown for comparison with the table."""
from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGridLayout, QLabel, QFrame

from stellarevolution.app.ui.panels.base import BasePanel
from stellarevolution.controller.clock import SimulationClock
from stellarevolution.model.scaling import scaling_relations
from stellarevolution.model.state import SimulationState
from stellarevolution.utils import myr_to_gyr

DISCLAIMER = (
    "<p><b>Important Disclaimer:</b> These relationships are simplified educational "
    "approximations for main sequence stars. The <b>luminosity</b> (L ∝ M<sup>3.5</sup>) and "
    "<b>lifetime</b> (τ ∝ M<sup>-2.5</sup>) scaling laws are well-established and broadly "
    "accurate across stellar masses.</p>"
    "<p><b>Temperature and radius relationships are observational fits</b> that provide "
    "reasonable estimates but vary significantly across different stellar mass ranges and "
    "evolutionary phases. Real stellar properties depend on metallicity, rotation, magnetic "
    "fields, and convection efficiency.</p>"
    "<p>This simulator uses interpolated observational data for more accurate values, while "
    "displaying the simplified relationships for educational comparison.</p>"
)


class EquationCard(QFrame):
    def __init__(self, title: str, equation: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("equationCard")
        v = QVBoxLayout(self)
        for text, name in ((title, "equationTitle"), (equation, "equation")):
            lbl = QLabel(text)
            lbl.setObjectName(name)
            lbl.setTextFormat(Qt.TextFormat.RichText)
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            v.addWidget(lbl)
        self.lbl_result = QLabel()
        self.lbl_result.setObjectName("equationResult")
        self.lbl_result.setTextFormat(Qt.TextFormat.RichText)
        self.lbl_result.setAlignment(Qt.AlignmentFlag.AlignCenter)
        v.addWidget(self.lbl_result)

    def set_result(self, html: str) -> None:
        self.lbl_result.setText(html)

    def result(self) -> str:
        return self.lbl_result.text()


class EquationsPanel(BasePanel):
    def __init__(self, clock: SimulationClock, parent: QWidget | None = None) -> None:
        super().__init__(clock, parent)

        layout = QVBoxLayout(self)
        title = QLabel("Mass-Stellar Property Relations")
        title.setObjectName("sectionTitle")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(title)

        grid = QGridLayout()
        self.card_temperature = EquationCard("Temperature", "T = 5800 × M<sup>0.5</sup> K")
        self.card_radius = EquationCard("Radius", "R = M<sup>0.8</sup> R<sub>☉</sub>")
        self.card_luminosity = EquationCard("Luminosity", "L = M<sup>3.5</sup> L<sub>☉</sub>")
        self.card_lifetime = EquationCard("Lifetime", "τ = 10<sup>10</sup> × M<sup>-2.5</sup> years")
        for i, card in enumerate(
            (self.card_temperature, self.card_radius, self.card_luminosity, self.card_lifetime)
        ):
            grid.addWidget(card, i // 2, i % 2)
        layout.addLayout(grid)

        disclaimer = QLabel(DISCLAIMER)
        disclaimer.setObjectName("disclaimer")
        disclaimer.setWordWrap(True)
        disclaimer.setTextFormat(Qt.TextFormat.RichText)
        layout.addWidget(disclaimer)

        self._shown_mass: float | None = None
        self.clock.state_changed.connect(self.show_state)
        self.show_state(self.clock.state)

    def show_state(self, state: SimulationState) -> None:
        # Relations depend on mass only
        if state.mass == self._shown_mass:
            return
        self._shown_mass = state.mass

        rel = scaling_relations(state.mass)
        self.card_temperature.set_result(f"T = {round(rel.temperature)} K")
        self.card_radius.set_result(f"R = {rel.radius:.3f} R<sub>☉</sub>")
        self.card_luminosity.set_result(f"L = {rel.luminosity:.2f} L<sub>☉</sub>")
        # The simulation runs on the tabulated lifetime, so that is what is shown here
        self.card_lifetime.set_result(f"τ = {myr_to_gyr(state.max_age):.1f} billion years")
