"""
Pitch Board - Arrow Annotations

Directional arrows drawn on the pitch. Arrows are immutable once created;
the set supports adding, removing by id, and clearing.
"""

import math
import uuid
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

DEFAULT_ARROW_COLOR = "white"


@dataclass(frozen=True)
class Arrow:
    """A directional segment in pitch percentage coordinates."""

    id: str
    start: tuple[float, float]
    end: tuple[float, float]
    color: str = DEFAULT_ARROW_COLOR

    def length(self) -> float:
        """Euclidean length in percentage units."""
        return math.dist(self.start, self.end)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "start": [self.start[0], self.start[1]],
            "end": [self.end[0], self.end[1]],
            "color": self.color,
        }

    @staticmethod
    def from_dict(data: dict) -> "Arrow":
        return Arrow(
            id=str(data["id"]),
            start=(float(data["start"][0]), float(data["start"][1])),
            end=(float(data["end"][0]), float(data["end"][1])),
            color=data.get("color", DEFAULT_ARROW_COLOR),
        )


def _random_arrow_id() -> str:
    return uuid.uuid4().hex


class ArrowSet:
    """Ordered collection of arrows keyed by id."""

    def __init__(
        self,
        arrows: Iterable[Arrow] | None = None,
        id_factory: Callable[[], str] = _random_arrow_id,
    ):
        """
        Initialize the arrow set.

        Args:
            arrows: Existing arrows, e.g. loaded from a file
            id_factory: Generates candidate ids for new arrows
        """
        self._arrows: dict[str, Arrow] = {}
        self._id_factory = id_factory
        for arrow in arrows or ():
            self._arrows[arrow.id] = arrow

    def add(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        color: str = DEFAULT_ARROW_COLOR,
    ) -> str:
        """
        Create a new arrow and return its id.

        Ids are unique within the set for the lifetime of the session; a
        generated id that is already taken is discarded and regenerated.
        """
        arrow_id = self._id_factory()
        while arrow_id in self._arrows:
            arrow_id = self._id_factory()

        self._arrows[arrow_id] = Arrow(arrow_id, tuple(start), tuple(end), color)
        return arrow_id

    def remove(self, arrow_id: str) -> bool:
        """Remove an arrow. Removing an unknown id is a no-op returning False."""
        return self._arrows.pop(arrow_id, None) is not None

    def clear(self) -> list[str]:
        """Remove every arrow, returning the removed ids in order."""
        removed = list(self._arrows)
        self._arrows.clear()
        return removed

    def get(self, arrow_id: str) -> Arrow | None:
        return self._arrows.get(arrow_id)

    def __iter__(self) -> Iterator[Arrow]:
        return iter(list(self._arrows.values()))

    def __len__(self) -> int:
        return len(self._arrows)

    def __contains__(self, arrow_id: object) -> bool:
        return arrow_id in self._arrows
