"""Unit tests for pixel/percent conversion and zone layout."""

import pytest
from pygame import Rect

from board.controllers.view_state import FieldView, compute_zone_rects
from board.core.constants import STATUS_HEIGHT, TOOLBAR_HEIGHT


class TestFieldView:
    """Tests for FieldView coordinate conversion."""

    @pytest.fixture
    def view(self, surface_rect):
        return FieldView(surface_rect)

    def test_corners(self, view):
        assert view.screen_to_percent((100, 50)) == (0.0, 0.0)
        assert view.screen_to_percent((600, 550)) == (100.0, 100.0)

    def test_not_clamped(self, view):
        x, y = view.screen_to_percent((50, 600))

        assert x == pytest.approx(-10)
        assert y == pytest.approx(110)

    def test_clamped(self, view):
        assert view.screen_to_percent_clamped((50, 600)) == (2.0, 98.0)
        assert view.screen_to_percent_clamped((50, 600), 0, 100) == (0.0, 100.0)

    @pytest.mark.parametrize("pos", [(100, 50), (137, 412), (599, 549), (350, 300)])
    def test_round_trip(self, view, pos):
        back = view.percent_to_screen(view.screen_to_percent(pos))

        assert back == pytest.approx(pos)

    def test_non_square_rect(self):
        view = FieldView(Rect(0, 0, 340, 525))

        assert view.screen_to_percent((170, 105)) == pytest.approx((50, 20))
        assert view.percent_to_screen((50, 20)) == pytest.approx((170, 105))

    def test_degenerate_rect_returns_last_value(self, view):
        view.screen_to_percent((350, 300))
        view.update_rect(Rect(0, 0, 0, 0))

        assert view.is_degenerate
        assert view.screen_to_percent((10, 10)) == (50.0, 50.0)

    def test_degenerate_rect_default(self):
        view = FieldView(Rect(10, 10, 0, 200))

        assert view.screen_to_percent((20, 20)) == (0.0, 0.0)


class TestComputeZoneRects:
    """Tests for window layout."""

    @pytest.mark.parametrize("size", [(900, 900), (1600, 700), (500, 1000), (320, 480)])
    def test_zones_do_not_overlap(self, size):
        pitch, bench = compute_zone_rects(*size, compact=size[0] < 768)

        assert pitch.width > 0 and pitch.height > 0
        assert bench.top > pitch.bottom
        assert pitch.top >= TOOLBAR_HEIGHT
        assert bench.bottom <= size[1] - STATUS_HEIGHT
        assert pitch.right <= size[0]

    def test_pitch_is_portrait(self):
        pitch, bench = compute_zone_rects(900, 900, compact=False)

        assert pitch.height > pitch.width
        assert pitch.width / pitch.height == pytest.approx(68 / 105, abs=0.01)
        assert bench.width == pitch.width

    def test_compact_bench_is_shorter(self):
        _, full = compute_zone_rects(900, 900, compact=False)
        _, compact = compute_zone_rects(900, 900, compact=True)

        assert compact.height < full.height

    def test_tiny_window(self):
        pitch, bench = compute_zone_rects(20, 100, compact=True)

        assert pitch.width == 0 and bench.width == 0
