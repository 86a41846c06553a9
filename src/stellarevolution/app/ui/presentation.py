"""
Presentation helpers.

Pure functions translating model values into what the widgets draw: star size
in pixels, gradient colours, which effects are visible, and formatted stats.
Kept free of Qt so they can be tested without a display.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

from stellarevolution.config import MIN_SLIDER_MASS, MAX_SLIDER_MASS, MASS_STEP
from stellarevolution.model.phases import Phase
from stellarevolution.model.stellar_table import StellarProperties
from stellarevolution.utils import clamp

BASE_STAR_SIZE_PX = 60.0
MAX_STAR_SIZE_PX = 200.0
MIN_STAR_SIZE_PX = 4.0

FUSION_PHASES = frozenset({Phase.MAIN_SEQUENCE, Phase.HELIUM_BURNING})
WIND_PHASES = frozenset({Phase.SUPERNOVA, Phase.ASYMPTOTIC_GIANT, Phase.PLANETARY_NEBULA})


@dataclass(frozen=True)
class StarPalette:
    """Radial gradient stops (centre, 70 %, edge) and glow colour."""
    core: str
    mid: str
    edge: str
    glow: str
    outline: str | None = None


PHASE_PALETTES: dict[Phase, StarPalette] = {
    Phase.MAIN_SEQUENCE: StarPalette("#ffff00", "#ff8800", "#ff4400", "#ffff00"),
    Phase.RED_GIANT: StarPalette("#ff4444", "#cc0000", "#880000", "#ff4444"),
    Phase.HELIUM_BURNING: StarPalette("#ffaa00", "#ff6600", "#cc4400", "#ffaa00"),
    Phase.ASYMPTOTIC_GIANT: StarPalette("#ff6666", "#dd2222", "#aa0000", "#ff6666"),
    Phase.PLANETARY_NEBULA: StarPalette("#66ffff", "#2299ff", "#0066cc", "#66ffff"),
    Phase.WHITE_DWARF: StarPalette("#ffffff", "#ccccff", "#8888ff", "#ffffff"),
    Phase.SUPERNOVA: StarPalette("#ffffff", "#ff4444", "#8844ff", "#ffffff"),
    Phase.NEUTRON_STAR: StarPalette("#8888ff", "#4444cc", "#222288", "#8888ff"),
    Phase.BLACK_HOLE: StarPalette("#000000", "#333333", "#000000", "#ffffff", outline="#ff4444"),
}


@dataclass(frozen=True)
class MassPreset:
    label: str
    mass: float


MASS_PRESETS: tuple[MassPreset, ...] = (
    MassPreset("Red Dwarf", 0.5),
    MassPreset("Sun-like", 1.0),
    MassPreset("Massive", 8.0),
    MassPreset("Supergiant", 25.0),
)


def visual_radius_px(radius: float) -> float:
    """
    On-screen diameter of the star for a radius in solar radii.

    Logarithmic so that red giants and white dwarfs both fit on screen.
    """
    if radius <= 0:
        return MIN_STAR_SIZE_PX
    size = BASE_STAR_SIZE_PX * math.log10(radius * 10)
    return clamp(size, MIN_STAR_SIZE_PX, MAX_STAR_SIZE_PX)


def shows_fusion(phase: Phase) -> bool:
    return phase in FUSION_PHASES


def shows_wind(phase: Phase) -> bool:
    return phase in WIND_PHASES


def palette_for(phase: Phase) -> StarPalette:
    return PHASE_PALETTES[phase]


def slider_to_mass(position: int) -> float:
    """Map an integer slider position to a mass in MASS_STEP increments."""
    return clamp(position * MASS_STEP, MIN_SLIDER_MASS, MAX_SLIDER_MASS)


def mass_to_slider(mass: float) -> int:
    return round(clamp(mass, MIN_SLIDER_MASS, MAX_SLIDER_MASS) / MASS_STEP)


def slider_range() -> tuple[int, int]:
    return mass_to_slider(MIN_SLIDER_MASS), mass_to_slider(MAX_SLIDER_MASS)


def format_stats(age: float, properties: StellarProperties) -> dict[str, str]:
    """Stat card texts keyed by label."""
    return {
        "Million Years": f"{round(age)}",
        "Temperature (K)": f"{round(properties.temperature)}",
        "Solar Radii": f"{properties.radius:.3f}",
        "Solar Luminosity": f"{properties.luminosity:.2f}",
    }


def format_mass(mass: float) -> str:
    return f"{mass:g} Solar Masses"
