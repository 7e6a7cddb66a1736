"""
Pitch Board - Zone Bounds

Measures the pitch and bench rectangles on demand and classifies a
pointer position as over one of them or over neither.
"""

from typing import Callable, Optional, Union

from pygame import Rect

from lineup.formats.roster_data import BENCH, SURFACE, ZoneName

RectSource = Union[Rect, Callable[[], Rect]]


class ZoneBoundsTracker:
    """Live bounding rectangles of the two drop zones."""

    def __init__(self, surface: RectSource, bench: RectSource):
        """
        Initialize the tracker.

        Args:
            surface: Pitch rectangle, or a callable returning the current one
            bench: Bench rectangle, or a callable returning the current one
        """
        self._sources: dict[str, RectSource] = {SURFACE: surface, BENCH: bench}

    def rect_for(self, zone: ZoneName) -> Rect:
        """Measure a zone now. Nothing is cached between calls."""
        source = self._sources[zone]
        return Rect(source() if callable(source) else source)

    @staticmethod
    def _contains(rect: Rect, pos: tuple[float, float]) -> bool:
        # Edges are inclusive; a zone without area contains nothing
        if rect.width <= 0 or rect.height <= 0:
            return False
        return rect.left <= pos[0] <= rect.right and rect.top <= pos[1] <= rect.bottom

    def classify(self, pos: tuple[float, float]) -> Optional[ZoneName]:
        """
        Classify a screen position.

        Returns:
            "surface", "bench", or None when the point is over neither zone
            (or, against the layout contract, over both)
        """
        over_surface = self._contains(self.rect_for(SURFACE), pos)
        over_bench = self._contains(self.rect_for(BENCH), pos)
        if over_surface and not over_bench:
            return SURFACE
        if over_bench and not over_surface:
            return BENCH
        return None
