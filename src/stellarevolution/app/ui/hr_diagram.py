"""Hertzsprung-Russell diagram with the current star marked."""
from __future__ import annotations

import numpy as np
import pyqtgraph as pg
from PySide6.QtWidgets import QWidget, QVBoxLayout

from stellarevolution.model.stellar_table import LUMINOSITIES, TEMPERATURES, StellarProperties


class HRDiagram(QWidget):
    """
    log10 luminosity against log10 temperature, hottest stars on the left.

    The table's main sequence is drawn as a line; the current star is a dot.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setTitle("Hertzsprung-Russell Diagram")
        self.plot_widget.setLabel("bottom", "log T (K)")
        self.plot_widget.setLabel("left", "log L (L☉)")
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.getViewBox().invertX(True)
        self.plot_widget.setMinimumHeight(220)
        layout.addWidget(self.plot_widget)

        self.main_sequence = self.plot_widget.plot(
            np.log10(TEMPERATURES), np.log10(LUMINOSITIES),
            pen=pg.mkPen(color=(120, 120, 120), width=2),
        )
        self.marker = pg.ScatterPlotItem(
            size=14, brush=pg.mkBrush(78, 205, 196), pen=pg.mkPen("k", width=1)
        )
        self.plot_widget.addItem(self.marker)

    def set_star(self, properties: StellarProperties) -> None:
        """Move the marker; hidden when the star has no temperature or luminosity."""
        if properties.temperature <= 0 or properties.luminosity <= 0:
            self.marker.setData([], [])
            return
        self.marker.setData(
            [float(np.log10(properties.temperature))],
            [float(np.log10(properties.luminosity))],
        )
