"""Evolutionary phases, their metadata, and the mapping from age to phase."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum


# ------------------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------------------
class Phase(StrEnum):
    MAIN_SEQUENCE = "main-sequence"
    RED_GIANT = "red-giant"
    HELIUM_BURNING = "helium-burning"
    ASYMPTOTIC_GIANT = "asymptotic-giant"
    PLANETARY_NEBULA = "planetary-nebula"
    WHITE_DWARF = "white-dwarf"
    SUPERNOVA = "supernova"
    NEUTRON_STAR = "neutron-star"
    BLACK_HOLE = "black-hole"


# ------------------------------------------------------------------------------
# Data Structures
# ------------------------------------------------------------------------------
@dataclass(frozen=True)
class PhaseInfo:
    """
    Static, user-facing description of a phase.

    `duration` is the rough fraction of the stellar lifetime the phase lasts
    in nature. It is informational; the simulation slices time uniformly.
    """
    title: str
    description: str
    duration: float


PHASE_INFO: dict[Phase, PhaseInfo] = {
    Phase.MAIN_SEQUENCE: PhaseInfo(
        title="Main Sequence Star",
        description=(
            "Hydrogen is fusing into helium in the core, providing the energy that makes the star "
            "shine. The star is in hydrostatic equilibrium - gravity pulling inward balanced by "
            "radiation pressure pushing outward."
        ),
        duration=0.9,
    ),
    Phase.RED_GIANT: PhaseInfo(
        title="Red Giant Phase",
        description=(
            "Hydrogen in the core is exhausted. The core contracts and heats up while the outer "
            "layers expand dramatically. Hydrogen shell burning occurs around the inert helium core."
        ),
        duration=0.08,
    ),
    Phase.HELIUM_BURNING: PhaseInfo(
        title="Helium Burning Phase",
        description=(
            "The core temperature reaches 100 million K, igniting helium fusion (triple-alpha "
            "process). Carbon and oxygen are produced in the core."
        ),
        duration=0.02,
    ),
    Phase.ASYMPTOTIC_GIANT: PhaseInfo(
        title="Asymptotic Giant Branch",
        description=(
            "Alternating hydrogen and helium shell burning creates thermal pulses. Strong stellar "
            "winds begin to eject the outer layers."
        ),
        duration=0.01,
    ),
    Phase.PLANETARY_NEBULA: PhaseInfo(
        title="Planetary Nebula",
        description=(
            "The outer layers are ejected, creating a beautiful nebula. The hot core is exposed as "
            "a white dwarf precursor."
        ),
        duration=0.001,
    ),
    Phase.WHITE_DWARF: PhaseInfo(
        title="White Dwarf",
        description=(
            "A hot, dense stellar remnant supported by electron degeneracy pressure. No fusion "
            "occurs - it slowly cools over billions of years."
        ),
        duration=0.0,
    ),
    Phase.SUPERNOVA: PhaseInfo(
        title="Supernova Explosion",
        description=(
            "Core collapse occurs when iron builds up. The explosive death creates and disperses "
            "heavy elements throughout the galaxy."
        ),
        duration=0.001,
    ),
    Phase.NEUTRON_STAR: PhaseInfo(
        title="Neutron Star",
        description=(
            "An incredibly dense remnant where protons and electrons are crushed together. "
            "A teaspoon would weigh as much as a mountain!"
        ),
        duration=0.0,
    ),
    Phase.BLACK_HOLE: PhaseInfo(
        title="Black Hole",
        description=(
            "Gravitational collapse has created a region where spacetime is so curved that "
            "nothing, not even light, can escape."
        ),
        duration=0.0,
    ),
}

# Mass thresholds (Msun), left-inclusive
LOW_MASS_LIMIT = 0.8
CORE_COLLAPSE_LIMIT = 8.0
BLACK_HOLE_LIMIT = 20.0

_LOW_MASS_TRACK = (Phase.MAIN_SEQUENCE, Phase.WHITE_DWARF)
_INTERMEDIATE_MASS_TRACK = (
    Phase.MAIN_SEQUENCE,
    Phase.RED_GIANT,
    Phase.HELIUM_BURNING,
    Phase.ASYMPTOTIC_GIANT,
    Phase.PLANETARY_NEBULA,
    Phase.WHITE_DWARF,
)
_NEUTRON_STAR_TRACK = (
    Phase.MAIN_SEQUENCE,
    Phase.RED_GIANT,
    Phase.HELIUM_BURNING,
    Phase.SUPERNOVA,
    Phase.NEUTRON_STAR,
)
_BLACK_HOLE_TRACK = (
    Phase.MAIN_SEQUENCE,
    Phase.RED_GIANT,
    Phase.HELIUM_BURNING,
    Phase.SUPERNOVA,
    Phase.BLACK_HOLE,
)


def phase_info(phase: Phase) -> PhaseInfo:
    return PHASE_INFO[phase]


def phase_sequence(mass: float) -> tuple[Phase, ...]:
    """
    Ordered phases a star of the given initial mass passes through.

    Args:
        mass: Initial mass in solar masses.

    Returns:
        Immutable sequence starting with the main sequence and ending with the
        stellar remnant.
    """
    if mass < LOW_MASS_LIMIT:
        return _LOW_MASS_TRACK
    if mass < CORE_COLLAPSE_LIMIT:
        return _INTERMEDIATE_MASS_TRACK
    if mass < BLACK_HOLE_LIMIT:
        return _NEUTRON_STAR_TRACK
    return _BLACK_HOLE_TRACK


def phase_index(age: float, max_age: float, phase_count: int) -> int:
    """
    Index of the current phase when the lifetime is split into `phase_count`
    equal slices. A non-positive `max_age` maps to the first phase.
    """
    if max_age <= 0 or phase_count <= 0 or math.isnan(age):
        return 0
    progress = age / max_age
    if progress >= 1.0:
        return phase_count - 1
    if progress <= 0.0:
        return 0
    return min(math.floor(progress * phase_count), phase_count - 1)


def phase_at_age(age: float, max_age: float, mass: float) -> Phase:
    """Current phase of a star of `mass` at `age` out of a total `max_age` (both Myr)."""
    sequence = phase_sequence(mass)
    return sequence[phase_index(age, max_age, len(sequence))]
