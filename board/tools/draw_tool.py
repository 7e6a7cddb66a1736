"""
Draw tool - draw arrows on the pitch, click an arrow to delete it.
"""

import pygame

from board.core.constants import ARROW_HIT_TOLERANCE_PX, MODE_DRAW
from lineup.core.hit_testing import find_arrow_at
from lineup.formats.roster_data import SURFACE

from .base_tool import ToolResult


class DrawTool:
    """Draw tool - drag on the pitch to draw an arrow."""

    def handle_mouse_down(self, pos, button, modifiers, context):
        if button != 1:
            return ToolResult.not_handled()

        if context.zones.classify(pos) != SURFACE:
            return ToolResult.not_handled()

        # Clicking an existing arrow deletes it instead of starting a new one
        if context.state.show_arrows:
            view = context.field_view()
            arrow = find_arrow_at(
                pos, context.engine.arrows, view.percent_to_screen, ARROW_HIT_TOLERANCE_PX
            )
            if arrow is not None:
                context.engine.remove_arrow(arrow.id)
                return ToolResult.modified("Arrow removed")

        if context.engine.pointer_down_on_surface(pos):
            return ToolResult(handled=True, needs_render=True)
        return ToolResult.not_handled()

    def handle_mouse_motion(self, pos, context):
        return ToolResult.not_handled()

    def handle_key_down(self, key, modifiers, context):
        # Shift+C clears every arrow
        if key == pygame.K_c and (modifiers & pygame.KMOD_SHIFT):
            removed = context.engine.clear_arrows()
            return ToolResult.modified(f"Cleared {len(removed)} arrows")
        return ToolResult.not_handled()

    def on_activated(self, context):
        context.state.status_message = "Draw: drag on the pitch to draw, click an arrow to delete it"
        context.state.show_arrows = True

    def on_deactivated(self, context):
        pass

    def get_mode(self) -> str:
        return MODE_DRAW

    def get_hotkey(self) -> int | None:
        """Return 'D' key for Draw tool."""
        return pygame.K_d
