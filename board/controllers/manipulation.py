"""
Pitch Board - Manipulation State

The single in-progress gesture, as one of three tagged states. Only the
payload that is valid for a state exists on it.
"""

from dataclasses import dataclass
from typing import Optional, Union

from lineup.formats.roster_data import ZoneName


@dataclass(frozen=True)
class Idle:
    """No gesture in progress."""


IDLE = Idle()


@dataclass(frozen=True)
class MovingToken:
    """A token is being dragged."""

    token_id: int
    source_zone: ZoneName
    start_pointer: tuple[int, int]  # screen pixels, for click detection
    original_position: Optional[tuple[float, float]]  # restored on abort


@dataclass(frozen=True)
class DrawingArrow:
    """An arrow is being drawn; end follows the pointer."""

    start: tuple[float, float]
    end: tuple[float, float]


Manipulation = Union[Idle, MovingToken, DrawingArrow]
