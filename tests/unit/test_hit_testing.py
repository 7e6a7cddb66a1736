"""Unit tests for token and arrow hit testing."""

import pytest

from lineup.core.annotations import Arrow
from lineup.core.hit_testing import distance_to_segment, find_arrow_at, find_nearest
from lineup.formats.roster_data import Token


@pytest.fixture
def tokens():
    return [
        Token(1, 1, "A", (40.0, 60.0)),
        Token(2, 2, "B", (42.0, 61.0)),
        Token(3, 3, "C"),
    ]


class TestFindNearest:
    """Tests for the per-axis box hit test."""

    def test_hit_within_box(self, tokens):
        assert find_nearest((44.0, 64.0), tokens).id == 1

    def test_first_match_wins_over_closest(self, tokens):
        """B is closer to the point, but A comes first."""
        assert find_nearest((42.0, 61.0), tokens).id == 1

    def test_box_not_circle(self):
        """A corner point at 4.9 on both axes is a hit even though it is ~6.9 away."""
        token = Token(1, 1, "A", (50.0, 50.0))

        assert find_nearest((54.9, 54.9), [token]) is token

    def test_tolerance_is_exclusive(self):
        token = Token(1, 1, "A", (50.0, 50.0))

        assert find_nearest((55.0, 50.0), [token]) is None
        assert find_nearest((50.0, 45.0), [token]) is None

    def test_custom_tolerance(self):
        token = Token(1, 1, "A", (50.0, 50.0))

        assert find_nearest((57.0, 50.0), [token], tolerance_x=8, tolerance_y=1) is token
        assert find_nearest((50.0, 52.0), [token], tolerance_x=8, tolerance_y=1) is None

    def test_skips_unplaced_tokens(self):
        assert find_nearest((50.0, 50.0), [Token(1, 1, "A")]) is None

    def test_empty(self):
        assert find_nearest((50.0, 50.0), []) is None


class TestArrowHit:
    """Tests for clicking arrows on screen."""

    def test_distance_to_segment(self):
        assert distance_to_segment((5, 3), (0, 0), (10, 0)) == 3
        assert distance_to_segment((-4, 3), (0, 0), (10, 0)) == 5
        assert distance_to_segment((13, 4), (0, 0), (10, 0)) == 5

    def test_distance_to_degenerate_segment(self):
        assert distance_to_segment((3, 4), (0, 0), (0, 0)) == 5

    def test_find_arrow_at(self):
        arrow = Arrow("a", (0, 0), (10, 0))
        scale = lambda p: (p[0] * 10, p[1] * 10)  # noqa: E731

        assert find_arrow_at((50, 6), [arrow], scale, 8) is arrow
        assert find_arrow_at((50, 9), [arrow], scale, 8) is None

    def test_topmost_arrow_wins(self):
        bottom = Arrow("a", (0, 0), (10, 0))
        top = Arrow("b", (0, 1), (10, 1))

        assert find_arrow_at((5, 0.5), [bottom, top], lambda p: p, 1) is top
