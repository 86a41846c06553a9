"""Tests for phase sequencing and uniform time slicing."""
import math

import pytest

from stellarevolution.model.phases import (
    PHASE_INFO, Phase, phase_at_age, phase_index, phase_info, phase_sequence,
)
from stellarevolution.model.stellar_table import lifetime_myr

MASSES = [0.1, 0.5, 0.79, 0.8, 1.0, 3.0, 7.99, 8.0, 12.0, 19.99, 20.0, 25.0, 50.0]


class TestPhaseInfo:
    def test_every_phase_has_metadata(self):
        assert set(PHASE_INFO) == set(Phase)

    def test_titles(self):
        assert phase_info(Phase.MAIN_SEQUENCE).title == "Main Sequence Star"
        assert phase_info(Phase.BLACK_HOLE).title == "Black Hole"

    def test_string_values(self):
        assert Phase.RED_GIANT == "red-giant"
        assert Phase("white-dwarf") is Phase.WHITE_DWARF


class TestPhaseSequence:
    def test_low_mass(self):
        assert phase_sequence(0.5) == (Phase.MAIN_SEQUENCE, Phase.WHITE_DWARF)

    def test_intermediate_mass(self):
        assert phase_sequence(1.0) == (
            Phase.MAIN_SEQUENCE,
            Phase.RED_GIANT,
            Phase.HELIUM_BURNING,
            Phase.ASYMPTOTIC_GIANT,
            Phase.PLANETARY_NEBULA,
            Phase.WHITE_DWARF,
        )

    def test_neutron_star_track(self):
        assert phase_sequence(10.0) == (
            Phase.MAIN_SEQUENCE,
            Phase.RED_GIANT,
            Phase.HELIUM_BURNING,
            Phase.SUPERNOVA,
            Phase.NEUTRON_STAR,
        )

    def test_black_hole_track(self):
        assert phase_sequence(25.0)[-1] is Phase.BLACK_HOLE

    @pytest.mark.parametrize(
        "mass, length, terminal",
        [
            (0.79, 2, Phase.WHITE_DWARF),
            (0.8, 6, Phase.WHITE_DWARF),
            (7.99, 6, Phase.WHITE_DWARF),
            (8.0, 5, Phase.NEUTRON_STAR),
            (19.99, 5, Phase.NEUTRON_STAR),
            (20.0, 5, Phase.BLACK_HOLE),
            (50.0, 5, Phase.BLACK_HOLE),
        ],
    )
    def test_band_boundaries_are_left_inclusive(self, mass, length, terminal):
        sequence = phase_sequence(mass)
        assert len(sequence) == length
        assert sequence[-1] is terminal

    @pytest.mark.parametrize("mass", MASSES)
    def test_always_starts_on_main_sequence(self, mass):
        assert phase_sequence(mass)[0] is Phase.MAIN_SEQUENCE


class TestPhaseAtAge:
    @pytest.mark.parametrize("mass", MASSES)
    def test_age_zero_is_first_phase(self, mass):
        max_age = lifetime_myr(mass)
        assert phase_at_age(0.0, max_age, mass) is phase_sequence(mass)[0]

    @pytest.mark.parametrize("mass", MASSES)
    def test_max_age_is_last_phase(self, mass):
        max_age = lifetime_myr(mass)
        assert phase_at_age(max_age, max_age, mass) is phase_sequence(mass)[-1]

    def test_beyond_max_age_is_last_phase(self):
        assert phase_at_age(2e6, 10000.0, 1.0) is Phase.WHITE_DWARF

    @pytest.mark.parametrize("max_age", [0.0, -5.0])
    def test_non_positive_max_age_is_first_phase(self, max_age):
        assert phase_at_age(100.0, max_age, 1.0) is Phase.MAIN_SEQUENCE

    def test_uniform_slices(self):
        # Six phases over 6000 Myr: one phase per 1000 Myr
        sequence = phase_sequence(1.0)
        for i, phase in enumerate(sequence):
            assert phase_at_age(i * 1000.0 + 500.0, 6000.0, 1.0) is phase

    def test_slice_boundary_belongs_to_next_phase(self):
        assert phase_at_age(1000.0, 2000.0, 0.5) is Phase.WHITE_DWARF
        assert phase_at_age(999.9, 2000.0, 0.5) is Phase.MAIN_SEQUENCE

    def test_just_below_boundary_stays_in_earlier_phase(self):
        assert phase_at_age(999.9999999, 2000.0, 0.5) is Phase.MAIN_SEQUENCE
        assert phase_index(math.nextafter(1000.0, 0.0), 2000.0, 2) == 0

    @pytest.mark.parametrize("mass", MASSES)
    def test_monotonic_in_age(self, mass):
        max_age = lifetime_myr(mass)
        sequence = phase_sequence(mass)
        indices = [
            sequence.index(phase_at_age(max_age * k / 997, max_age, mass)) for k in range(998)
        ]
        assert indices == sorted(indices)
        assert indices[0] == 0
        assert indices[-1] == len(sequence) - 1


class TestPhaseIndex:
    def test_clamped_to_last(self):
        assert phase_index(10.0, 10.0, 4) == 3

    def test_negative_age_is_first(self):
        assert phase_index(-1.0, 10.0, 4) == 0

    def test_nan_age_is_first(self):
        assert phase_index(float("nan"), 10.0, 4) == 0
