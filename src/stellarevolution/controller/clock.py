"""
Simulation Clock
================
This module advances the age of the simulated star in real time.

Why is this file needed?
------------------------
1. Time: It is the only place where time passes. Everything in the model
   layer is a pure function of (age, max_age, mass).
2. Timer ownership: It owns exactly one QTimer. Starting never creates a
   second timer, and pause, reset, completion and shutdown all stop it.
3. Signals: Views subscribe to the signals below instead of polling.

Classes:
    SimulationClock: Session controller with start/pause/reset/set_mass.
"""
from __future__ import annotations

import logging
import math

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from stellarevolution.config import DEFAULT_MASS, DEFAULT_SETTINGS, SimulationSettings
from stellarevolution.model.phases import Phase, PhaseInfo, phase_index
from stellarevolution.model.state import SimulationState
from stellarevolution.model.stellar_table import StellarProperties

logger = logging.getLogger(__name__)


class SimulationClock(QObject):
    """Advances a SimulationState at a fixed tick rate while running."""
    state_changed = Signal(object)  # SimulationState
    phase_changed = Signal(object)  # Phase
    running_changed = Signal(bool)
    finished = Signal()

    def __init__(
        self,
        mass: float = DEFAULT_MASS,
        settings: SimulationSettings = DEFAULT_SETTINGS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.settings = settings
        self._state = SimulationState(mass=mass)
        self._age_increment = 0.0
        self._ticks = 0
        self._total_ticks = 0
        self._last_phase = self._state.phase

        self._timer: QTimer | None = QTimer(self)
        self._timer.setInterval(self.settings.tick_interval_ms)
        self._timer.timeout.connect(self.tick)

    # ------------------------------------------------------------------------------
    # Observables
    # ------------------------------------------------------------------------------

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def mass(self) -> float:
        return self._state.mass

    @property
    def age(self) -> float:
        return self._state.age

    @property
    def max_age(self) -> float:
        return self._state.max_age

    @property
    def running(self) -> bool:
        return self._state.running

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def phase_info(self) -> PhaseInfo:
        return self._state.phase_info

    @property
    def phases(self) -> tuple[Phase, ...]:
        return self._state.phases

    @property
    def properties(self) -> StellarProperties:
        return self._state.properties

    @property
    def progress(self) -> float:
        return self._state.progress

    @property
    def age_increment(self) -> float:
        """Age added per tick during the current run (0 before the first start)."""
        return self._age_increment

    def is_timer_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    # ------------------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------------------

    @Slot()
    def start(self) -> None:
        """Begin ticking. No-op if already running, completed or shut down."""
        if self._timer is None:
            logger.warning("Start requested on a clock that has been shut down.")
            return
        if self._state.running:
            return
        if self._state.completed:
            logger.info("Simulation already complete; reset before starting again.")
            return

        self._total_ticks = len(self._state.phases) * self.settings.ticks_per_phase
        self._age_increment = self._state.max_age / self._total_ticks
        # Continue from the current age when resuming after a pause
        self._ticks = round(self._state.age / self._age_increment) if self._age_increment > 0 else 0

        self._timer.stop()
        self._timer.start()
        self._set_running(True)
        logger.info(
            f"Simulation started: mass={self._state.mass:g} Msun, age={self._state.age:.1f} Myr, "
            f"step={self._age_increment:.4g} Myr/tick."
        )
        self.state_changed.emit(self._state)

    @Slot()
    def pause(self) -> None:
        """Stop ticking and keep the current age."""
        self._stop_timer()
        if not self._state.running:
            return
        self._set_running(False)
        logger.info(f"Simulation paused at {self._state.age:.1f} Myr.")
        self.state_changed.emit(self._state)

    @Slot()
    def toggle(self) -> None:
        if self._state.running:
            self.pause()
        else:
            self.start()

    @Slot()
    def reset(self) -> None:
        """Stop ticking and rewind to age 0 (main sequence)."""
        self._stop_timer()
        was_running = self._state.running
        self._state.reset()
        self._ticks = 0
        if was_running:
            self.running_changed.emit(False)
        logger.info("Simulation reset.")
        self._emit_phase_if_changed()
        self.state_changed.emit(self._state)

    @Slot(float)
    def set_mass(self, mass: float) -> None:
        """Select a new initial mass; recomputes the lifetime and resets."""
        # Reject before touching the timer or the run flag
        if math.isnan(mass):
            raise ValueError("Stellar mass must be a number, got NaN.")
        self._stop_timer()
        was_running = self._state.running
        self._state.set_mass(mass)
        self._ticks = 0
        self._age_increment = 0.0
        if was_running:
            self.running_changed.emit(False)
        self._emit_phase_if_changed()
        self.state_changed.emit(self._state)

    def shutdown(self) -> None:
        """Cancel the timer for good. Called when the hosting UI is torn down."""
        if self._timer is None:
            return
        self._timer.stop()
        self._timer.timeout.disconnect(self.tick)
        self._timer.deleteLater()
        self._timer = None
        if self._state.running:
            self._set_running(False)
        logger.info("Simulation clock shut down.")

    # ------------------------------------------------------------------------------
    # Timer callback
    # ------------------------------------------------------------------------------

    @Slot()
    def tick(self) -> None:
        """Advance the age by one increment; stops automatically at max_age."""
        if not self._state.running:
            return

        self._ticks += 1
        new_age = self._age_at(self._ticks)

        if self._ticks >= self._total_ticks or new_age >= self._state.max_age:
            self._state.set_age(self._state.max_age)
            self._stop_timer()
            self._set_running(False)
            logger.info(f"Simulation complete after {self._ticks} ticks.")
            self._emit_phase_if_changed()
            self.state_changed.emit(self._state)
            self.finished.emit()
            return

        self._state.set_age(new_age)
        logger.debug(f"Tick {self._ticks}: age={new_age:.2f} Myr", extra={"tick": True})
        self._emit_phase_if_changed()
        self.state_changed.emit(self._state)

    # ------------------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------------------

    def _age_at(self, ticks: int) -> float:
        """
        Age after `ticks` ticks of the current run.

        A tick count that is a whole number of phase spans must land in the
        phase it starts, so an age rounded just below the slice boundary is
        stepped up to the first float on the far side of it.
        """
        max_age = self._state.max_age
        age = max_age * ticks / self._total_ticks
        phase_count = len(self._state.phases)
        expected = min(ticks // self.settings.ticks_per_phase, phase_count - 1)
        while age < max_age and phase_index(age, max_age, phase_count) < expected:
            age = math.nextafter(age, math.inf)
        return age

    def _stop_timer(self) -> None:
        if self._timer is not None:
            self._timer.stop()

    def _set_running(self, running: bool) -> None:
        if self._state.running != running:
            self._state.running = running
            self.running_changed.emit(running)

    def _emit_phase_if_changed(self) -> None:
        phase = self._state.phase
        if phase != self._last_phase:
            logger.info(f"Phase transition: {self._last_phase} -> {phase} at {self._state.age:.1f} Myr.")
            self._last_phase = phase
            self.phase_changed.emit(phase)
