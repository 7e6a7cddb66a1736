"""Unit tests for token marker sizing and labels."""

import pytest

from board.controllers.view_state import FieldView, compute_zone_rects
from board.core.constants import HIT_TOLERANCE
from board.rendering.token_layout import (
    fit_label,
    marker_metrics,
    place_token,
    short_label,
)
from lineup.core.hit_testing import DEFAULT_TOLERANCE
from lineup.formats.roster_data import Token


class TestLabels:
    def test_last_word(self):
        assert short_label("Kevin De Bruyne") == "Bruyne"

    def test_single_word(self):
        assert short_label("Pele") == "Pele"

    def test_custom_label_wins(self):
        assert short_label("Kevin De Bruyne", custom="KDB") == "KDB"

    def test_empty_name(self):
        assert short_label("   ") == ""

    def test_fit_label(self):
        assert fit_label("Short", 8) == "Short"
        assert fit_label("Lewandowski", 8) == "Lewando…"


class TestMetrics:
    def test_compact_is_smaller(self):
        full = marker_metrics(False)
        compact = marker_metrics(True)

        assert full.diameter == 36
        assert compact.diameter < full.diameter
        assert compact.number_font < full.number_font
        assert compact.name_font < full.name_font

    def test_place_token(self, surface_rect):
        token = Token(1, 10, "Luka Modric", (50.0, 20.0))
        placed = place_token(token, FieldView(surface_rect), compact=False)

        assert placed.center == (350, 150)
        assert placed.rect.size == (36, 36)
        assert placed.rect.center == (350, 150)
        assert placed.label == "Modric"

    def test_place_bench_token(self, surface_rect):
        assert place_token(Token(1, 10, "X"), FieldView(surface_rect), compact=False) is None


class TestTolerance:
    """The fixed drop tolerance stays in step with the drawn marker size."""

    @pytest.mark.parametrize(
        "width, height, compact",
        [(900, 900, False), (1280, 800, False), (640, 800, True), (480, 720, True)],
    )
    def test_tolerance_covers_marker_radius(self, width, height, compact):
        pitch, _ = compute_zone_rects(width, height, compact)
        radius = marker_metrics(compact).diameter / 2

        assert radius / pitch.width * 100 <= HIT_TOLERANCE
        assert radius / pitch.height * 100 <= HIT_TOLERANCE

    def test_engine_and_hit_tester_agree(self):
        assert HIT_TOLERANCE == DEFAULT_TOLERANCE
