"""Tests for the Qt-free presentation helpers."""
import pytest

from stellarevolution.app.ui.presentation import (
    MASS_PRESETS, MAX_STAR_SIZE_PX, MIN_STAR_SIZE_PX, PHASE_PALETTES,
    format_mass, format_stats, mass_to_slider, shows_fusion, shows_wind,
    slider_range, slider_to_mass, visual_radius_px,
)
from stellarevolution.model.evolution import stellar_properties
from stellarevolution.model.phases import Phase
from stellarevolution.model.stellar_table import lookup


class TestVisualRadius:
    def test_sun(self):
        assert visual_radius_px(1.0) == pytest.approx(60.0)

    def test_capped(self):
        assert visual_radius_px(1000.0) == MAX_STAR_SIZE_PX

    @pytest.mark.parametrize("phase", [Phase.WHITE_DWARF, Phase.NEUTRON_STAR, Phase.BLACK_HOLE])
    def test_remnants_stay_visible(self, phase):
        radius = stellar_properties(phase, 1.0).radius
        assert visual_radius_px(radius) == MIN_STAR_SIZE_PX

    def test_zero_radius(self):
        assert visual_radius_px(0.0) == MIN_STAR_SIZE_PX

    def test_red_giant_larger_than_main_sequence(self):
        ms = stellar_properties(Phase.MAIN_SEQUENCE, 1.0).radius
        rg = stellar_properties(Phase.RED_GIANT, 1.0).radius
        assert visual_radius_px(rg) > visual_radius_px(ms)


class TestEffects:
    def test_fusion_phases(self):
        assert {p for p in Phase if shows_fusion(p)} == {Phase.MAIN_SEQUENCE, Phase.HELIUM_BURNING}

    def test_wind_phases(self):
        assert {p for p in Phase if shows_wind(p)} == {
            Phase.SUPERNOVA, Phase.ASYMPTOTIC_GIANT, Phase.PLANETARY_NEBULA
        }

    def test_every_phase_has_palette(self):
        assert set(PHASE_PALETTES) == set(Phase)

    def test_only_black_hole_outlined(self):
        outlined = {p for p, pal in PHASE_PALETTES.items() if pal.outline}
        assert outlined == {Phase.BLACK_HOLE}


class TestSlider:
    def test_range(self):
        assert slider_range() == (1, 100)

    @pytest.mark.parametrize("position, mass", [(1, 0.5), (2, 1.0), (16, 8.0), (100, 50.0)])
    def test_position_to_mass(self, position, mass):
        assert slider_to_mass(position) == mass
        assert mass_to_slider(mass) == position

    def test_out_of_range_clamped(self):
        assert slider_to_mass(0) == 0.5
        assert slider_to_mass(500) == 50.0
        assert mass_to_slider(0.1) == 1

    def test_presets(self):
        assert [p.mass for p in MASS_PRESETS] == [0.5, 1.0, 8.0, 25.0]
        assert all(mass_to_slider(p.mass) * 0.5 == p.mass for p in MASS_PRESETS)


class TestFormatting:
    def test_stats(self):
        stats = format_stats(1234.6, lookup(1.0))
        assert stats == {
            "Million Years": "1235",
            "Temperature (K)": "5800",
            "Solar Radii": "1.000",
            "Solar Luminosity": "1.00",
        }

    def test_mass(self):
        assert format_mass(1.0) == "1 Solar Masses"
        assert format_mass(2.5) == "2.5 Solar Masses"
