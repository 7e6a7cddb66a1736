"""Unit tests for ZoneBoundsTracker."""

from pygame import Rect

from board.controllers.zone_bounds import ZoneBoundsTracker
from lineup.formats.roster_data import BENCH, SURFACE


class TestClassify:
    """Tests for classifying pointer positions."""

    def test_zones(self, zones):
        assert zones.classify((300, 300)) == SURFACE
        assert zones.classify((300, 650)) == BENCH
        assert zones.classify((300, 575)) is None
        assert zones.classify((10, 10)) is None

    def test_edges_inclusive(self, zones):
        assert zones.classify((100, 50)) == SURFACE
        assert zones.classify((600, 550)) == SURFACE
        assert zones.classify((600, 700)) == BENCH

    def test_empty_zone_contains_nothing(self):
        zones = ZoneBoundsTracker(Rect(0, 0, 0, 0), Rect(0, 100, 200, 50))

        assert zones.classify((0, 0)) is None
        assert zones.classify((50, 120)) == BENCH

    def test_overlap_is_neither(self):
        zones = ZoneBoundsTracker(Rect(0, 0, 100, 100), Rect(50, 50, 100, 100))

        assert zones.classify((75, 75)) is None
        assert zones.classify((10, 10)) == SURFACE


class TestLiveMeasurement:
    """Rectangles are read each time, never cached."""

    def test_callable_sources_follow_layout(self):
        layout = {"pitch": Rect(0, 0, 100, 100)}
        zones = ZoneBoundsTracker(lambda: layout["pitch"], Rect(0, 200, 100, 50))

        assert zones.classify((150, 50)) is None
        layout["pitch"] = Rect(0, 0, 200, 100)
        assert zones.classify((150, 50)) == SURFACE

    def test_rect_for_returns_copy(self, zones, surface_rect):
        rect = zones.rect_for(SURFACE)
        rect.width = 1

        assert zones.rect_for(SURFACE) == surface_rect
