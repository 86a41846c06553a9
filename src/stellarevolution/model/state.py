"""
Simulation State (Data Model)
=============================
This module defines the central data structure for a running simulation.

Why is this file needed?
------------------------
1. State Management: It holds the selected mass, the elapsed age and the run
   flag in one place.
2. Consistency: The current phase is derived from (age, max_age, mass) on
   every read, so it can never go stale.
3. Decoupling: Views read from this object; the SimulationClock writes to it.

Classes:
    SimulationState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import math

from stellarevolution.config import DEFAULT_MASS
from stellarevolution.model.evolution import stellar_properties
from stellarevolution.model.phases import Phase, PhaseInfo, phase_at_age, phase_info, phase_sequence
from stellarevolution.model.stellar_table import StellarProperties, lifetime_myr
from stellarevolution.utils import clamp

logger = logging.getLogger(__name__)


@dataclass
class SimulationState:
    """
    State of one simulation session.

    Invariant: 0 <= age <= max_age.
    """
    mass: float = DEFAULT_MASS
    age: float = 0.0  # Myr elapsed
    max_age: float = -1.0  # Myr, derived from mass when not given
    running: bool = False

    def __post_init__(self) -> None:
        if self.max_age < 0:
            self.max_age = lifetime_myr(self.mass)
        self.age = clamp(self.age, 0.0, self.max_age)

    @property
    def phases(self) -> tuple[Phase, ...]:
        return phase_sequence(self.mass)

    @property
    def phase(self) -> Phase:
        return phase_at_age(self.age, self.max_age, self.mass)

    @property
    def phase_info(self) -> PhaseInfo:
        return phase_info(self.phase)

    @property
    def properties(self) -> StellarProperties:
        return stellar_properties(self.phase, self.mass)

    @property
    def progress(self) -> float:
        """Fraction of the lifetime elapsed, in [0, 1]."""
        if self.max_age <= 0:
            return 0.0
        return clamp(self.age / self.max_age, 0.0, 1.0)

    @property
    def completed(self) -> bool:
        return self.max_age > 0 and self.age >= self.max_age

    def set_age(self, age: float) -> None:
        self.age = clamp(age, 0.0, self.max_age)

    def set_mass(self, mass: float) -> None:
        """Select a new star. Recomputes the lifetime and rewinds to age 0."""
        if math.isnan(mass):
            raise ValueError("Stellar mass must be a number, got NaN.")
        self.mass = float(mass)
        self.max_age = lifetime_myr(self.mass)
        self.reset()
        logger.info(f"Mass set to {self.mass:g} Msun, lifetime {self.max_age:.1f} Myr.")

    def reset(self) -> None:
        """Rewind to the start of the main sequence."""
        self.age = 0.0
        self.running = False
