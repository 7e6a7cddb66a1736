"""
Pitch Board - Token Layout

Sizing and labeling policy for token markers. HIT_TOLERANCE in
board.core.constants is tuned against MARKER_SIZES; change them together.
"""

from typing import NamedTuple, Optional

from pygame import Rect

from board.controllers.view_state import FieldView
from lineup.formats.roster_data import Token


class MarkerMetrics(NamedTuple):
    diameter: int
    number_font: int
    name_font: int
    label_chars: int  # longest name label before truncation


MARKER_SIZES = {
    False: MarkerMetrics(diameter=36, number_font=14, name_font=12, label_chars=12),
    True: MarkerMetrics(diameter=28, number_font=11, name_font=10, label_chars=8),
}

# Bench markers are a fixed size regardless of pitch size
BENCH_MARKER_SIZES = {
    False: MarkerMetrics(diameter=32, number_font=13, name_font=11, label_chars=7),
    True: MarkerMetrics(diameter=26, number_font=11, name_font=9, label_chars=6),
}


class PlacedMarker(NamedTuple):
    token: Token
    center: tuple[int, int]
    rect: Rect
    metrics: MarkerMetrics
    label: str


def marker_metrics(compact: bool) -> MarkerMetrics:
    return MARKER_SIZES[bool(compact)]


def short_label(name: str, custom: Optional[str] = None) -> str:
    """Display label: the custom short label if given, else the last word of the name."""
    if custom:
        return custom
    parts = name.split()
    return parts[-1] if parts else ""


def fit_label(label: str, max_chars: int) -> str:
    if len(label) <= max_chars:
        return label
    return label[: max(1, max_chars - 1)] + "…"


def marker_rect(center: tuple[int, int], diameter: int) -> Rect:
    rect = Rect(0, 0, diameter, diameter)
    rect.center = center
    return rect


def place_token(
    token: Token, view: FieldView, compact: bool, custom_label: Optional[str] = None
) -> Optional[PlacedMarker]:
    """
    Position a pitch token's marker on screen.

    Returns:
        The placed marker, or None if the token has no pitch position
    """
    if token.position is None:
        return None
    metrics = marker_metrics(compact)
    x, y = view.percent_to_screen(token.position)
    center = (round(x), round(y))
    label = fit_label(short_label(token.name, custom_label), metrics.label_chars)
    return PlacedMarker(token, center, marker_rect(center, metrics.diameter), metrics, label)
