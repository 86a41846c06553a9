"""
Simplified main-sequence scaling relations.

These textbook power laws are shown next to the interpolated table values for
comparison. The luminosity and lifetime laws are broadly accurate; the
temperature and radius laws are rough observational fits. The simulation
itself never uses them.
"""
from __future__ import annotations

from dataclasses import dataclass

SUN_TEMPERATURE = 5800.0  # K
SUN_LIFETIME_YR = 1e10

TEMPERATURE_EXPONENT = 0.5
RADIUS_EXPONENT = 0.8
LUMINOSITY_EXPONENT = 3.5
LIFETIME_EXPONENT = -2.5


@dataclass(frozen=True)
class ScalingRelations:
    temperature: float  # K
    radius: float  # Rsun
    luminosity: float  # Lsun
    lifetime_yr: float

    @property
    def lifetime_gyr(self) -> float:
        return self.lifetime_yr / 1e9


def scaling_relations(mass: float) -> ScalingRelations:
    """
    Evaluate T = 5800 M^0.5, R = M^0.8, L = M^3.5 and tau = 1e10 M^-2.5.

    Raises:
        ValueError: If the mass is not positive.
    """
    if not mass > 0:
        raise ValueError(f"Stellar mass must be positive, got {mass}.")
    return ScalingRelations(
        temperature=SUN_TEMPERATURE * mass ** TEMPERATURE_EXPONENT,
        radius=mass ** RADIUS_EXPONENT,
        luminosity=mass ** LUMINOSITY_EXPONENT,
        lifetime_yr=SUN_LIFETIME_YR * mass ** LIFETIME_EXPONENT,
    )
