"""
Pitch Board - Lineup Core

Annotation model and hit-testing helpers.
"""

from .annotations import DEFAULT_ARROW_COLOR, Arrow, ArrowSet
from .hit_testing import DEFAULT_TOLERANCE, distance_to_segment, find_arrow_at, find_nearest

__all__ = [
    "DEFAULT_ARROW_COLOR",
    "DEFAULT_TOLERANCE",
    "Arrow",
    "ArrowSet",
    "distance_to_segment",
    "find_arrow_at",
    "find_nearest",
]
