"""
Pitch Board - Controllers Module

Gesture handling, zone tracking, coordinate mapping and application state.
"""

from .board_state import BoardState
from .event_handler import EventHandler
from .interaction_engine import InteractionEngine
from .pointer_capture import PointerCapture
from .view_state import FieldView, compute_zone_rects
from .zone_bounds import ZoneBoundsTracker

__all__ = [
    "BoardState",
    "EventHandler",
    "FieldView",
    "InteractionEngine",
    "PointerCapture",
    "ZoneBoundsTracker",
    "compute_zone_rects",
]
