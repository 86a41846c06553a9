"""Animated drawing of the star, its fusion glow and stellar wind."""
from __future__ import annotations

import math

from PySide6.QtCore import Qt, QPointF, QTimer, QElapsedTimer
from PySide6.QtGui import QColor, QPainter, QPen, QBrush, QRadialGradient
from PySide6.QtWidgets import QWidget, QSizePolicy

from stellarevolution.app.ui.presentation import (
    palette_for, shows_fusion, shows_wind, visual_radius_px,
)
from stellarevolution.model.phases import Phase
from stellarevolution.model.stellar_table import StellarProperties

FRAME_INTERVAL_MS = 33
SIZE_TRANSITION_MS = 1500.0
FUSION_PERIOD_MS = 2000.0
WIND_PERIOD_MS = 3000.0
WIND_MAX_DIAMETER_PX = 400.0
SETTLED_TOLERANCE_PX = 0.5


class StarView(QWidget):
    """
    Dark 'sky' with the star in the middle.

    The displayed diameter eases towards the target diameter so that phase
    changes animate instead of jumping. The frame timer only runs while the
    size is still easing or the phase has a moving effect.
    """
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumHeight(400)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        self._phase = Phase.MAIN_SEQUENCE
        self._target_diameter = visual_radius_px(1.0)
        self._diameter = self._target_diameter

        self._clock = QElapsedTimer()
        self._clock.start()

        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self._advance_frame)
        self._sync_frame_timer()

    def set_star(self, phase: Phase, properties: StellarProperties) -> None:
        self._phase = phase
        self._target_diameter = visual_radius_px(properties.radius)
        self._sync_frame_timer()
        self.update()

    def diameter(self) -> float:
        return self._diameter

    def is_animating(self) -> bool:
        return self._frame_timer.isActive()

    def _has_moving_effect(self) -> bool:
        return (
            self._phase == Phase.SUPERNOVA
            or shows_fusion(self._phase)
            or shows_wind(self._phase)
        )

    def _is_settled(self) -> bool:
        return abs(self._target_diameter - self._diameter) <= SETTLED_TOLERANCE_PX

    def _sync_frame_timer(self) -> None:
        if self._has_moving_effect() or not self._is_settled():
            if not self._frame_timer.isActive():
                self._frame_timer.start()
        else:
            self._frame_timer.stop()

    def _advance_frame(self) -> None:
        # Ease towards the target size over roughly SIZE_TRANSITION_MS
        step = FRAME_INTERVAL_MS / SIZE_TRANSITION_MS * 4.0
        self._diameter += (self._target_diameter - self._diameter) * min(step, 1.0)
        if self._is_settled():
            self._diameter = self._target_diameter
        self._sync_frame_timer()
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        rect = self.rect()
        center = QPointF(rect.center())

        sky = QRadialGradient(center, max(rect.width(), rect.height()) * 0.7)
        sky.setColorAt(0.0, QColor("#000033"))
        sky.setColorAt(1.0, QColor("#000000"))
        painter.fillRect(rect, QBrush(sky))

        elapsed = float(self._clock.elapsed())
        palette = palette_for(self._phase)
        radius = self._diameter / 2.0

        if self._phase == Phase.SUPERNOVA:
            # Blast: swell up to 3x and back every two seconds
            pulse = math.sin(math.pi * ((elapsed % FUSION_PERIOD_MS) / FUSION_PERIOD_MS))
            radius *= 1.0 + 2.0 * pulse

        # Glow
        glow = QRadialGradient(center, radius * 2.0)
        glow_color = QColor(palette.glow)
        glow_color.setAlpha(90)
        glow.setColorAt(0.0, glow_color)
        glow.setColorAt(1.0, QColor(0, 0, 0, 0))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(glow))
        painter.drawEllipse(center, radius * 2.0, radius * 2.0)

        # Body
        body = QRadialGradient(center, radius)
        body.setColorAt(0.0, QColor(palette.core))
        body.setColorAt(0.7, QColor(palette.mid))
        body.setColorAt(1.0, QColor(palette.edge))
        painter.setBrush(QBrush(body))
        if palette.outline:
            painter.setPen(QPen(QColor(palette.outline), 2))
        painter.drawEllipse(center, radius, radius)

        if shows_fusion(self._phase):
            phase = (elapsed % FUSION_PERIOD_MS) / FUSION_PERIOD_MS
            wave = 0.5 - 0.5 * math.cos(2.0 * math.pi * phase)
            opacity = 0.3 + 0.5 * wave
            scale = 1.0 + 0.1 * wave
            core = QRadialGradient(center, radius * 0.6 * scale)
            core.setColorAt(0.0, QColor(255, 255, 0, int(255 * 0.3 * opacity)))
            core.setColorAt(0.7, QColor(255, 255, 0, 0))
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(core))
            painter.drawEllipse(center, radius * 0.6 * scale, radius * 0.6 * scale)

        if shows_wind(self._phase):
            t = (elapsed % WIND_PERIOD_MS) / WIND_PERIOD_MS
            ring = WIND_MAX_DIAMETER_PX * t / 2.0
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.setPen(QPen(QColor(255, 255, 255, int(255 * 0.3 * (1.0 - t))), 2))
            painter.drawEllipse(center, ring, ring)

        painter.end()
