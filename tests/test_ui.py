"""Smoke tests for the widgets, run on the offscreen Qt platform."""
import pytest

from stellarevolution.app.application import load_stylesheet
from stellarevolution.app.ui.main_window import MainWindow
from stellarevolution.app.ui.star_view import StarView
from stellarevolution.config import STYLESHEET_PATH
from stellarevolution.model.evolution import stellar_properties
from stellarevolution.model.phases import Phase


@pytest.fixture
def window(qapp):
    win = MainWindow()
    win.show()
    yield win
    win.close()


class TestMainWindow:
    def test_initial_render(self, window):
        assert window.phase_info.lbl_title.text() == "Main Sequence Star"
        assert window.timeline.cards["Temperature (K)"].lbl_value.text() == "5800"
        assert window.timeline.progress.value() == 0
        assert window.controls.lbl_mass.text() == "1 Solar Masses"

    def test_start_button_toggles(self, window):
        window.controls.btn_start.click()
        assert window.clock.running
        assert window.controls.btn_start.text() == "Pause"
        window.controls.btn_start.click()
        assert not window.clock.running
        assert window.controls.btn_start.text() == "Start Evolution"

    def test_preset_updates_slider_and_equations(self, window):
        supergiant = window.controls.preset_buttons[3]
        supergiant.click()
        assert window.clock.mass == 25.0
        assert window.controls.slider.value() == 50
        assert window.controls.lbl_mass.text() == "25 Solar Masses"
        assert window.equations.card_temperature.result() == "T = 29000 K"

    def test_slider_sets_mass(self, window):
        window.controls.slider.setValue(16)
        assert window.clock.mass == 8.0
        assert window.clock.phases[-1] is Phase.NEUTRON_STAR

    def test_ticks_update_views(self, window):
        window.clock.start()
        for _ in range(50):
            window.clock.tick()
        assert window.phase_info.lbl_title.text() == "Red Giant Phase"
        assert window.timeline.cards["Solar Radii"].lbl_value.text() == "10.000"
        assert window.timeline.progress.value() == pytest.approx(167, abs=1)

    def test_reset_button(self, window):
        window.clock.start()
        for _ in range(120):
            window.clock.tick()
        window.controls.btn_reset.click()
        assert window.clock.age == 0.0
        assert window.phase_info.lbl_title.text() == "Main Sequence Star"

    def test_close_shuts_down_clock(self, window):
        window.clock.start()
        window.close()
        assert not window.clock.running
        assert not window.clock.is_timer_active()


class TestStylesheet:
    def test_bundled_stylesheet_loads(self):
        assert "QPushButton" in load_stylesheet(STYLESHEET_PATH)

    def test_missing_stylesheet_is_empty(self, tmp_path):
        assert load_stylesheet(str(tmp_path / "missing.qss")) == ""


class TestStarView:
    @staticmethod
    def _settle(view, frames=500):
        for _ in range(frames):
            if not view.is_animating():
                break
            view._advance_frame()

    def test_fusion_keeps_animating(self, qapp):
        view = StarView()
        assert view.is_animating()
        self._settle(view)
        assert view.is_animating()

    def test_frame_timer_stops_once_remnant_settles(self, qapp):
        view = StarView()
        white_dwarf = stellar_properties(Phase.WHITE_DWARF, 1.0)
        view.set_star(Phase.WHITE_DWARF, white_dwarf)
        assert view.is_animating()
        self._settle(view)
        assert not view.is_animating()
        assert view.diameter() == pytest.approx(4.0)

    def test_new_target_restarts_frame_timer(self, qapp):
        view = StarView()
        view.set_star(Phase.RED_GIANT, stellar_properties(Phase.RED_GIANT, 1.0))
        self._settle(view)
        assert not view.is_animating()
        view.set_star(Phase.HELIUM_BURNING, stellar_properties(Phase.HELIUM_BURNING, 1.0))
        assert view.is_animating()
