"""Tests for models/view.py: zoom clamping, coordinate mapping and snapping."""

import pytest
from models.constants import ZOOM_MAX, ZOOM_MIN
from models.view import ViewState, round_half_away, snap


class TestRoundHalfAway:
    @pytest.mark.parametrize(
        "value, expected",
        [(0.5, 1), (1.5, 2), (2.5, 3), (-0.5, -1), (-2.5, -3), (0.49, 0), (-0.49, 0), (3.0, 3)],
    )
    def test_rounding(self, value, expected):
        assert round_half_away(value) == expected

    def test_negative_zero_is_zero(self):
        assert str(round_half_away(-0.2)) == "0"


class TestSnap:
    def test_snaps_to_nearest_multiple(self):
        assert snap(29, 31) == (20, 40)

    def test_half_rounds_away_from_zero(self):
        assert snap(10, -10) == (20, -20)
        assert snap(30, -30) == (40, -40)

    def test_axes_are_independent(self):
        assert snap(9, 11) == (0, 20)

    def test_custom_grid(self):
        assert snap(12, 18, grid_size=5) == (10, 20)

    @pytest.mark.parametrize("grid", [5, 10, 20, 25])
    @pytest.mark.parametrize("point", [(0, 0), (7.3, -12.9), (-55.5, 33.3), (1234.5, -987.6), (10, 10)])
    def test_idempotent(self, point, grid):
        once = snap(*point, grid_size=grid)
        assert snap(*once, grid_size=grid) == once


class TestZoom:
    def test_default(self):
        view = ViewState()
        assert view.zoom == 1.0
        assert view.pan == (0.0, 0.0)

    def test_clamp_high(self):
        view = ViewState()
        assert view.set_zoom(100) == 5.0
        assert view.zoom == ZOOM_MAX

    def test_clamp_low(self):
        view = ViewState()
        view.set_zoom(0.0001)
        assert view.zoom == 0.1
        assert view.zoom == ZOOM_MIN

    def test_in_range_value_kept(self):
        view = ViewState()
        view.set_zoom(2.5)
        assert view.zoom == 2.5

    def test_constructor_clamps(self):
        assert ViewState(zoom=50).zoom == ZOOM_MAX

    def test_reset(self):
        view = ViewState(zoom=3, pan=(10, 20))
        view.reset()
        assert view.zoom == 1.0
        assert view.pan == (0.0, 0.0)


class TestCoordinateMapping:
    def test_identity(self):
        assert ViewState().screen_to_model(37, 42) == (37, 42)

    def test_pan_and_zoom(self):
        view = ViewState(zoom=2.0, pan=(100, 50))
        assert view.screen_to_model(140, 90) == (20, 20)

    def test_model_to_screen_inverts(self):
        view = ViewState(zoom=1.5, pan=(-30, 12))
        x, y = view.model_to_screen(40, -20)
        assert view.screen_to_model(x, y) == pytest.approx((40, -20))

    def test_pan_by(self):
        view = ViewState()
        view.pan_by(5, -7)
        view.pan_by(5, -7)
        assert view.pan == (10, -14)
