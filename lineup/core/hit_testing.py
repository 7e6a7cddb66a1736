"""
Pitch Board - Hit Testing

Geometric queries used when a drag is released on the pitch or when the
user clicks an arrow to delete it.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable, Iterable

if TYPE_CHECKING:
    from lineup.core.annotations import Arrow
    from lineup.formats.roster_data import Token

# Half-width of the hit box, in percent of the pitch dimension. Tuned to the
# full-size marker footprint (see board.rendering.token_layout).
DEFAULT_TOLERANCE = 5.0


def find_nearest(
    point: tuple[float, float],
    tokens: Iterable[Token],
    tolerance_x: float = DEFAULT_TOLERANCE,
    tolerance_y: float = DEFAULT_TOLERANCE,
) -> Token | None:
    """
    Find a placed token under a percentage point.

    The test is a per-axis box, not a circle. When several tokens qualify,
    the first one in iteration order wins, not the closest one.

    Args:
        point: (x, y) in pitch percentage coordinates
        tokens: Tokens to search; tokens without a position are skipped
        tolerance_x: Maximum horizontal distance (exclusive)
        tolerance_y: Maximum vertical distance (exclusive)

    Returns:
        The first matching token, or None
    """
    x, y = point
    for token in tokens:
        if token.position is None:
            continue
        dx = abs(token.position[0] - x)
        dy = abs(token.position[1] - y)
        if dx < tolerance_x and dy < tolerance_y:
            return token
    return None


def distance_to_segment(
    point: tuple[float, float], a: tuple[float, float], b: tuple[float, float]
) -> float:
    """Shortest distance from a point to the segment a-b."""
    ax, ay = a
    bx, by = b
    px, py = point
    dx = bx - ax
    dy = by - ay
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.dist(point, a)

    t = ((px - ax) * dx + (py - ay) * dy) / length_sq
    t = max(0.0, min(1.0, t))
    return math.dist(point, (ax + t * dx, ay + t * dy))


def find_arrow_at(
    pos: tuple[float, float],
    arrows: Iterable[Arrow],
    to_screen: Callable[[tuple[float, float]], tuple[float, float]],
    tolerance_px: float,
) -> Arrow | None:
    """
    Find the topmost arrow whose rendered segment passes near a screen position.

    Distances are measured in pixels so the click target keeps a constant
    width regardless of the pitch aspect ratio.

    Args:
        pos: Pointer position in screen pixels
        arrows: Arrows in draw order (later arrows are on top)
        to_screen: Maps a percentage point to screen pixels
        tolerance_px: Maximum distance from the segment

    Returns:
        The matching arrow drawn last, or None
    """
    hit = None
    for arrow in arrows:
        start = to_screen(arrow.start)
        end = to_screen(arrow.end)
        if distance_to_segment(pos, start, end) <= tolerance_px:
            hit = arrow
    return hit
