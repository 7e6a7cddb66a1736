"""
Pitch Board - View State

Converts between screen pixels and pitch percentage coordinates, and lays
out the pitch and bench rectangles inside the window.
"""

from pygame import Rect

from board.core.constants import (
    BENCH_HEIGHT,
    BENCH_HEIGHT_COMPACT,
    MOVE_CLAMP_MAX,
    MOVE_CLAMP_MIN,
    PITCH_ASPECT,
    PITCH_FILL,
    STATUS_HEIGHT,
    TOOLBAR_HEIGHT,
    ZONE_MARGIN,
)


class FieldView:
    """Maps pointer positions to and from the pitch's percentage space."""

    def __init__(self, surface_rect: Rect):
        """
        Initialize field view.

        Args:
            surface_rect: The pitch area in screen coordinates
        """
        self.surface_rect = Rect(surface_rect)
        self._last_percent: tuple[float, float] = (0.0, 0.0)

    def update_rect(self, surface_rect: Rect):
        """Re-measure the pitch area (after a resize or relayout)."""
        self.surface_rect = Rect(surface_rect)

    @property
    def is_degenerate(self) -> bool:
        return self.surface_rect.width <= 0 or self.surface_rect.height <= 0

    def screen_to_percent(self, screen_pos: tuple[float, float]) -> tuple[float, float]:
        """
        Convert a screen position to pitch percentage coordinates.

        The result is not clamped, so points off the pitch map outside
        [0, 100]. If the pitch has no area yet, the last computed value
        is returned instead.

        Args:
            screen_pos: Screen position (x, y) in pixels

        Returns:
            (x, y) as percentages of the pitch width and height
        """
        if self.is_degenerate:
            return self._last_percent

        rect = self.surface_rect
        x = (screen_pos[0] - rect.x) / rect.width * 100
        y = (screen_pos[1] - rect.y) / rect.height * 100
        self._last_percent = (x, y)
        return self._last_percent

    def screen_to_percent_clamped(
        self,
        screen_pos: tuple[float, float],
        low: float = MOVE_CLAMP_MIN,
        high: float = MOVE_CLAMP_MAX,
    ) -> tuple[float, float]:
        """Convert a screen position, keeping the result inside [low, high] on both axes."""
        x, y = self.screen_to_percent(screen_pos)
        return (max(low, min(high, x)), max(low, min(high, y)))

    def percent_to_screen(self, point: tuple[float, float]) -> tuple[float, float]:
        """
        Convert pitch percentage coordinates to a screen position.

        Args:
            point: (x, y) percentages

        Returns:
            Screen position (x, y) in pixels, unrounded
        """
        rect = self.surface_rect
        return (
            rect.x + point[0] / 100 * rect.width,
            rect.y + point[1] / 100 * rect.height,
        )


def compute_zone_rects(screen_width: int, screen_height: int, compact: bool) -> tuple[Rect, Rect]:
    """
    Lay out the pitch and the bench for a window size.

    The pitch keeps its portrait aspect ratio and is centred in the space
    between the toolbar and the bench; the bench spans the pitch width
    below it. The two rectangles never overlap.

    Returns:
        (pitch_rect, bench_rect)
    """
    bench_height = BENCH_HEIGHT_COMPACT if compact else BENCH_HEIGHT
    area_top = TOOLBAR_HEIGHT + ZONE_MARGIN
    area_height = screen_height - area_top - STATUS_HEIGHT - bench_height - 2 * ZONE_MARGIN
    area_width = screen_width - 2 * ZONE_MARGIN
    if area_width <= 0 or area_height <= 0:
        return Rect(0, 0, 0, 0), Rect(0, 0, 0, 0)

    # Limited by whichever dimension runs out first
    if area_height * PITCH_ASPECT > area_width:
        pitch_width = int(area_width * PITCH_FILL)
        pitch_height = int(pitch_width / PITCH_ASPECT)
    else:
        pitch_height = int(area_height * PITCH_FILL)
        pitch_width = int(pitch_height * PITCH_ASPECT)

    pitch_x = (screen_width - pitch_width) // 2
    pitch_y = area_top + (area_height - pitch_height) // 2
    pitch = Rect(pitch_x, pitch_y, pitch_width, pitch_height)
    bench = Rect(pitch_x, pitch.bottom + ZONE_MARGIN, pitch_width, bench_height)
    return pitch, bench
