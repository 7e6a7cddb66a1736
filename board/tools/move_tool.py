"""
Move tool - drag tokens around the pitch and between the pitch and the bench.
"""

import pygame

from board.core.constants import MODE_MOVE
from lineup.formats.roster_data import BENCH

from .base_tool import ToolContext, ToolResult


class BenchPan:
    """Dragging on empty bench space scrolls the bench row with the pointer."""

    def __init__(self, context: ToolContext, start_x: int):
        self.context = context
        self.last_x = start_x

    def on_pointer_move(self, pos: tuple[int, int]) -> None:
        self.context.scroll_bench_by(self.last_x - pos[0])
        self.last_x = pos[0]

    def on_pointer_up(self, pos: tuple[int, int]) -> None:
        self.on_pointer_move(pos)
        self.context.engine.capture.release(self)

    def on_pointer_cancel(self) -> None:
        self.context.engine.capture.release(self)


class MoveTool:
    """Move tool - left-drag a token, right-click a bench token to bring it on."""

    def handle_mouse_down(self, pos, button, modifiers, context):
        token = context.token_at(pos)
        if token is None:
            if button == 1 and context.zones.classify(pos) == BENCH:
                context.engine.capture.acquire(BenchPan(context, pos[0]))
                return ToolResult.handled()
            return ToolResult.not_handled()

        # Right click on a bench token sends it to the centre of the pitch
        if button == 3:
            if context.engine.promote(token.id):
                return ToolResult.modified(f"#{token.number} {token.name} on to the pitch")
            return ToolResult.handled()

        if button != 1:
            return ToolResult.not_handled()

        if context.engine.pointer_down_on_token(token.id, pos):
            return ToolResult(handled=True, needs_render=True)
        return ToolResult.handled()

    def handle_mouse_motion(self, pos, context):
        return ToolResult.not_handled()

    def handle_key_down(self, key, modifiers, context):
        # Escape clears the selection
        if key == pygame.K_ESCAPE and context.state.selected_token_id is not None:
            context.state.select_token(None)
            return ToolResult(handled=True, needs_render=True)
        return ToolResult.not_handled()

    def on_activated(self, context):
        context.state.status_message = "Move: drag tokens, drop on the bench or onto a player to swap"

    def on_deactivated(self, context):
        context.state.select_token(None)

    def get_mode(self) -> str:
        return MODE_MOVE

    def get_hotkey(self) -> int | None:
        """Return 'M' key for Move tool."""
        return pygame.K_m
