"""
Tool protocol and base definitions for board tools.
"""

import math
from typing import Optional, Protocol

from board.controllers.board_state import BoardState
from board.controllers.interaction_engine import InteractionEngine
from board.controllers.view_state import FieldView
from board.controllers.zone_bounds import ZoneBoundsTracker
from board.rendering.bench_renderer import BenchRenderer
from board.rendering.token_layout import place_token
from lineup.formats.roster_data import BENCH, SURFACE, Token


class Tool(Protocol):
    """What the event handler expects from a board tool (structural, no base class).

    Pointer motion and release during a gesture bypass the tool and go straight
    to the engine through the pointer capture.
    """

    def handle_mouse_down(
        self, pos: tuple[int, int], button: int, modifiers: int, context: "ToolContext"
    ) -> "ToolResult":
        """Handle pointer down (mouse button or first finger)."""
        ...

    def handle_mouse_motion(self, pos: tuple[int, int], context: "ToolContext") -> "ToolResult":
        """Handle pointer motion while no gesture is in progress (hover)."""
        ...

    def handle_key_down(self, key: int, modifiers: int, context: "ToolContext") -> "ToolResult":
        """Tool-specific shortcuts; global keys never reach here."""
        ...

    def on_activated(self, context: "ToolContext") -> None:
        """Set up the status hint and any view state the tool needs."""
        ...

    def on_deactivated(self, context: "ToolContext") -> None:
        """Undo per-tool view state such as the selection."""
        ...

    def get_mode(self) -> str:
        """Engine mode this tool drives ("move" or "draw")."""
        ...

    def get_hotkey(self) -> int | None:
        """Return pygame key constant for this tool's activation hotkey."""
        ...


class ToolContext:
    """What a tool may touch: the engine, the view state and the zone layout.

    Token lookups go through the same marker geometry the renderers use, so
    a press lands on the token that is drawn there.
    """

    def __init__(self, engine: InteractionEngine, state: BoardState, zones: ZoneBoundsTracker):
        self.engine = engine
        self.state = state
        self.zones = zones

    @property
    def roster(self):
        return self.engine.roster

    def field_view(self) -> FieldView:
        """Field view measured against the current pitch rectangle."""
        return FieldView(self.zones.rect_for(SURFACE))

    def surface_token_at(self, pos: tuple[int, int]) -> Optional[Token]:
        """Topmost pitch token whose marker circle contains pos."""
        view = self.field_view()
        for token in reversed(self.roster.surface):
            placed = place_token(token, view, self.state.compact)
            if placed is None:
                continue
            if math.dist(pos, placed.center) <= placed.metrics.diameter / 2:
                return token
        return None

    def bench_token_at(self, pos: tuple[int, int]) -> Optional[Token]:
        return BenchRenderer.token_at(
            self.zones.rect_for(BENCH),
            self.roster.bench,
            self.state.compact,
            pos,
            self.state.bench_scroll,
        )

    def scroll_bench_by(self, pixels: int) -> bool:
        """Scroll the bench row; returns True if the offset changed."""
        scroll = BenchRenderer.clamp_scroll(
            self.zones.rect_for(BENCH),
            len(self.roster.bench),
            self.state.compact,
            self.state.bench_scroll + pixels,
        )
        changed = scroll != self.state.bench_scroll
        self.state.bench_scroll = scroll
        return changed

    def scroll_bench_slots(self, steps: int) -> bool:
        return self.scroll_bench_by(steps * BenchRenderer.slot_pitch(self.state.compact))

    def reveal_bench_token(self, token_id: int):
        """Scroll the bench just enough to show a token's slot."""
        ids = [t.id for t in self.roster.bench]
        if token_id not in ids:
            return
        self.state.bench_scroll = BenchRenderer.scroll_to_reveal(
            self.zones.rect_for(BENCH),
            ids.index(token_id),
            len(ids),
            self.state.compact,
            self.state.bench_scroll,
        )

    def token_at(self, pos: tuple[int, int]) -> Optional[Token]:
        return self.surface_token_at(pos) or self.bench_token_at(pos)


class ToolResult:
    """Outcome of a tool callback; `message` goes to the status bar."""

    def __init__(
        self,
        handled: bool = False,
        needs_render: bool = False,
        message: str | None = None,
    ):
        self.handled = handled
        self.needs_render = needs_render
        self.message = message

    @staticmethod
    def handled() -> "ToolResult":
        """Consumed, nothing changed."""
        return ToolResult(handled=True)

    @staticmethod
    def not_handled() -> "ToolResult":
        """Event not handled."""
        return ToolResult(handled=False)

    @staticmethod
    def modified(message: str | None = None) -> "ToolResult":
        """Board content was changed."""
        return ToolResult(handled=True, needs_render=True, message=message)
