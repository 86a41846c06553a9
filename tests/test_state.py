"""Tests for SimulationState."""
import pytest

from stellarevolution.model.phases import Phase
from stellarevolution.model.state import SimulationState


class TestSimulationState:
    def test_defaults(self):
        state = SimulationState()
        assert state.mass == 1.0
        assert state.age == 0.0
        assert state.max_age == 10000.0
        assert state.running is False
        assert state.phase is Phase.MAIN_SEQUENCE
        assert state.progress == 0.0

    def test_age_clamped_on_construction(self):
        assert SimulationState(age=-5.0).age == 0.0
        assert SimulationState(age=1e9).age == 10000.0

    def test_set_age_clamps(self):
        state = SimulationState()
        state.set_age(20000.0)
        assert state.age == state.max_age
        assert state.completed
        state.set_age(-1.0)
        assert state.age == 0.0

    def test_phase_follows_age(self):
        state = SimulationState()
        state.set_age(state.max_age / 6 * 1.5)
        assert state.phase is Phase.RED_GIANT
        assert state.properties.radius == pytest.approx(10.0)

    def test_set_mass_recomputes_lifetime_and_resets(self):
        state = SimulationState()
        state.set_age(5000.0)
        state.running = True
        state.set_mass(25.0)
        assert state.max_age == pytest.approx(5.0)
        assert state.age == 0.0
        assert state.running is False
        assert state.phases[-1] is Phase.BLACK_HOLE

    def test_set_mass_nan_rejected(self):
        with pytest.raises(ValueError):
            SimulationState().set_mass(float("nan"))

    def test_progress(self):
        state = SimulationState()
        state.set_age(2500.0)
        assert state.progress == pytest.approx(0.25)

    def test_progress_with_zero_lifetime(self):
        state = SimulationState(max_age=0.0)
        assert state.progress == 0.0
        assert state.phase is Phase.MAIN_SEQUENCE

    def test_reset(self):
        state = SimulationState(mass=3.0)
        state.set_age(state.max_age)
        state.running = True
        state.reset()
        assert state.age == 0.0
        assert state.phase is Phase.MAIN_SEQUENCE
        assert state.running is False
        assert state.mass == 3.0
