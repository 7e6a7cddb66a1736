"""
Pitch Board - Roster Data Model

Manages both teams' tokens (pitch and bench) and the arrow annotations.
Handles loading from and saving to JSON files.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Literal, Optional

from lineup.core.annotations import Arrow, ArrowSet

logger = logging.getLogger(__name__)

ZoneName = Literal["surface", "bench"]
SURFACE: ZoneName = "surface"
BENCH: ZoneName = "bench"

SIDES = ("home", "away")

# Where tokens land when they join the pitch without a drop position
DEFAULT_POSITION = (50.0, 50.0)


class RosterFormatError(ValueError):
    """Raised when a roster file does not have the expected structure."""


@dataclass
class Token:
    """A labeled marker for one roster entry."""

    id: int
    number: int
    name: str
    position: Optional[tuple[float, float]] = None  # percent, only while on the pitch
    note: str = ""
    is_manual: bool = False  # created in the editor rather than from a preset roster

    def to_dict(self, zone: ZoneName) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "number": self.number, "name": self.name}
        if zone == SURFACE and self.position is not None:
            data["x"] = round(self.position[0], 3)
            data["y"] = round(self.position[1], 3)
        if self.note:
            data["note"] = self.note
        if self.is_manual:
            data["manual"] = True
        return data

    @staticmethod
    def from_dict(data: dict[str, Any], zone: ZoneName) -> "Token":
        try:
            token = Token(
                id=int(data["id"]),
                number=int(data.get("number", 0)),
                name=str(data.get("name", "")),
                note=str(data.get("note", "")),
                is_manual=bool(data.get("manual", False)),
            )
            if zone == SURFACE:
                x = float(data.get("x", DEFAULT_POSITION[0]))
                y = float(data.get("y", DEFAULT_POSITION[1]))
                token.position = (max(0.0, min(100.0, x)), max(0.0, min(100.0, y)))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise RosterFormatError(f"Invalid token entry {data!r}: {e}") from e
        return token


class TeamRoster:
    """
    One side's tokens split between the pitch (surface) and the bench.

    Every token id lives in exactly one of the two lists. All moves between
    zones go through the methods below, which remove and insert in one step.
    """

    def __init__(
        self,
        name: str = "",
        surface: Optional[list[Token]] = None,
        bench: Optional[list[Token]] = None,
    ):
        self.name = name
        self.surface: list[Token] = list(surface or [])
        self.bench: list[Token] = list(bench or [])
        self.modified = False

        for token in self.bench:
            token.position = None
        duplicates = self._duplicate_ids()
        if duplicates:
            raise RosterFormatError(f"Duplicate token ids: {sorted(duplicates)}")

    def _duplicate_ids(self) -> set[int]:
        seen: set[int] = set()
        duplicates: set[int] = set()
        for token in self.surface + self.bench:
            if token.id in seen:
                duplicates.add(token.id)
            seen.add(token.id)
        return duplicates

    def tokens(self, zone: ZoneName) -> list[Token]:
        """Get the live token list for a zone."""
        return self.surface if zone == SURFACE else self.bench

    def zone_of(self, token_id: int) -> Optional[ZoneName]:
        """Return which zone holds a token, or None if the id is unknown."""
        if any(t.id == token_id for t in self.surface):
            return SURFACE
        if any(t.id == token_id for t in self.bench):
            return BENCH
        return None

    def get(self, token_id: int) -> Optional[Token]:
        for token in self.surface:
            if token.id == token_id:
                return token
        for token in self.bench:
            if token.id == token_id:
                return token
        return None

    def all_ids(self) -> list[int]:
        return [t.id for t in self.surface] + [t.id for t in self.bench]

    def next_id(self) -> int:
        return max(self.all_ids(), default=0) + 1

    def next_number(self) -> int:
        numbers = [t.number for t in self.surface + self.bench]
        return max(numbers, default=0) + 1

    def set_position(
        self, token_id: int, position: tuple[float, float], mark_modified: bool = True
    ) -> bool:
        """
        Set a pitch token's position. Bench tokens have no position.

        Live drag feedback passes mark_modified=False; only the committed drop
        counts as a change to the file.
        """
        for token in self.surface:
            if token.id == token_id:
                token.position = (float(position[0]), float(position[1]))
                if mark_modified:
                    self.modified = True
                return True
        return False

    def place_on_surface(self, token_id: int, position: tuple[float, float]) -> bool:
        """Transfer a bench token to the pitch at a position."""
        index = self._index_in(self.bench, token_id)
        if index is None:
            return False
        token = self.bench.pop(index)
        token.position = (float(position[0]), float(position[1]))
        self.surface.append(token)
        self.modified = True
        return True

    def move_to_bench(self, token_id: int) -> bool:
        """Transfer a pitch token to the end of the bench, discarding its position."""
        index = self._index_in(self.surface, token_id)
        if index is None:
            return False
        token = self.surface.pop(index)
        token.position = None
        self.bench.append(token)
        self.modified = True
        return True

    def swap(self, bench_id: int, surface_id: int) -> bool:
        """
        Exchange a bench token with a pitch token.

        The incoming token takes over the outgoing token's position and list
        slot; the outgoing token takes the incoming token's bench slot.
        """
        bench_index = self._index_in(self.bench, bench_id)
        surface_index = self._index_in(self.surface, surface_id)
        if bench_index is None or surface_index is None:
            return False

        incoming = self.bench[bench_index]
        outgoing = self.surface[surface_index]
        incoming.position = outgoing.position
        outgoing.position = None
        self.surface[surface_index] = incoming
        self.bench[bench_index] = outgoing
        self.modified = True
        return True

    def add_token(self, token: Token, zone: ZoneName) -> None:
        if self.get(token.id) is not None:
            raise ValueError(f"Token id {token.id} already in roster")
        if zone == SURFACE:
            if token.position is None:
                token.position = DEFAULT_POSITION
        else:
            token.position = None
        self.tokens(zone).append(token)
        self.modified = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "surface": [t.to_dict(SURFACE) for t in self.surface],
            "bench": [t.to_dict(BENCH) for t in self.bench],
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "TeamRoster":
        if not isinstance(data, dict):
            raise RosterFormatError(f"Expected a team object, got {type(data).__name__}")
        for zone in (SURFACE, BENCH):
            if not isinstance(data.get(zone, []), list):
                raise RosterFormatError(f"Team '{zone}' must be a list of tokens")
        surface = [Token.from_dict(t, SURFACE) for t in data.get(SURFACE, [])]
        bench = [Token.from_dict(t, BENCH) for t in data.get(BENCH, [])]
        return TeamRoster(data.get("name", ""), surface, bench)

    @staticmethod
    def _index_in(tokens: list[Token], token_id: int) -> Optional[int]:
        for i, token in enumerate(tokens):
            if token.id == token_id:
                return i
        return None


class BoardData:
    """Both sides' rosters plus arrow annotations."""

    def __init__(self):
        self.teams: dict[str, TeamRoster] = {side: TeamRoster() for side in SIDES}
        self.arrows = ArrowSet()
        self.filepath: Optional[str] = None
        self.arrows_modified: bool = False

    @property
    def home(self) -> TeamRoster:
        return self.teams["home"]

    @property
    def away(self) -> TeamRoster:
        return self.teams["away"]

    @property
    def modified(self) -> bool:
        return self.arrows_modified or any(r.modified for r in self.teams.values())

    def mark_saved(self):
        self.arrows_modified = False
        for roster in self.teams.values():
            roster.modified = False

    def roster(self, side: str) -> TeamRoster:
        if side not in self.teams:
            raise ValueError(f"Unknown side: {side}")
        return self.teams[side]

    def load(self, path: str):
        """Load board data from a JSON file."""
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                raise RosterFormatError(f"{path}: not valid JSON ({e})") from e

        self.load_dict(data)
        self.filepath = path
        logger.info(
            "Loaded %s: %d home tokens, %d away tokens, %d arrows",
            path,
            len(self.home.all_ids()),
            len(self.away.all_ids()),
            len(self.arrows),
        )

    def load_dict(self, data: dict[str, Any]):
        if not isinstance(data, dict):
            raise RosterFormatError("Board file must contain a JSON object")

        teams = {side: TeamRoster.from_dict(data.get(side, {})) for side in SIDES}
        try:
            arrows = [Arrow.from_dict(a) for a in data.get("arrows", [])]
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise RosterFormatError(f"Invalid arrow entry: {e}") from e
        self.teams = teams
        self.arrows = ArrowSet(arrows)
        self.mark_saved()

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {side: self.teams[side].to_dict() for side in SIDES}
        data["arrows"] = [a.to_dict() for a in self.arrows]
        return data

    def save(self, path: Optional[str] = None):
        """Save board data to a JSON file."""
        if path is None:
            path = self.filepath
        if path is None:
            raise ValueError("No save path specified")

        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

        self.filepath = path
        self.mark_saved()
        logger.info("Saved %s", path)
