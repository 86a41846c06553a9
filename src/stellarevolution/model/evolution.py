"""Phase-dependent adjustment of the interpolated stellar properties."""
from __future__ import annotations

from dataclasses import replace

from stellarevolution.model.phases import Phase
from stellarevolution.model.stellar_table import StellarProperties, lookup

# Expansion of the envelope on the red giant branch
RED_GIANT_RADIUS_FACTOR = 10.0
RED_GIANT_TEMPERATURE_FACTOR = 0.7

# Compact remnants: (radius [Rsun], temperature [K], luminosity [Lsun])
WHITE_DWARF = (0.01, 50000.0, 0.001)
NEUTRON_STAR = (0.00001, 1000000.0, 0.0001)
BLACK_HOLE = (0.000001, 0.0, 0.0)


def _remnant(base: StellarProperties, values: tuple[float, float, float]) -> StellarProperties:
    radius, temperature, luminosity = values
    return replace(base, radius=radius, temperature=temperature, luminosity=luminosity)


def adjust_properties(phase: Phase, base: StellarProperties) -> StellarProperties:
    """
    Override or scale the base (main-sequence) properties for the given phase.

    Lifetime is always carried over from `base`.
    """
    match phase:
        case Phase.RED_GIANT:
            return replace(
                base,
                radius=base.radius * RED_GIANT_RADIUS_FACTOR,
                temperature=base.temperature * RED_GIANT_TEMPERATURE_FACTOR,
            )
        case Phase.WHITE_DWARF:
            return _remnant(base, WHITE_DWARF)
        case Phase.NEUTRON_STAR:
            return _remnant(base, NEUTRON_STAR)
        case Phase.BLACK_HOLE:
            return _remnant(base, BLACK_HOLE)
        case _:
            return base


def stellar_properties(phase: Phase, mass: float) -> StellarProperties:
    """Displayed properties of a star of `mass` while in `phase`."""
    return adjust_properties(phase, lookup(mass))
