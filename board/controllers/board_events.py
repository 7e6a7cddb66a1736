"""
Pitch Board - Board Events

Committed changes emitted by the interaction engine. Consumers (the
persistence layer, the application status bar) receive exactly one batch
per finished gesture or command; an empty batch means nothing changed.
"""

from dataclasses import dataclass
from typing import Optional, Union

from lineup.core.annotations import Arrow
from lineup.formats.roster_data import Token, ZoneName


@dataclass(frozen=True)
class PositionChanged:
    token_id: int
    position: tuple[float, float]


@dataclass(frozen=True)
class Transferred:
    token_id: int
    from_zone: ZoneName
    to_zone: ZoneName
    position: Optional[tuple[float, float]] = None


@dataclass(frozen=True)
class Swapped:
    bench_token_id: int
    surface_token_id: int


@dataclass(frozen=True)
class ArrowAdded:
    arrow: Arrow


@dataclass(frozen=True)
class ArrowRemoved:
    arrow_id: str


@dataclass(frozen=True)
class TokenActivated:
    """A token was clicked rather than dragged."""

    token_id: int


@dataclass(frozen=True)
class TokenAdded:
    token: Token
    zone: ZoneName


BoardEvent = Union[
    PositionChanged,
    Transferred,
    Swapped,
    ArrowAdded,
    ArrowRemoved,
    TokenActivated,
    TokenAdded,
]
