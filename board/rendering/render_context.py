"""
Pitch Board - Render Context

Bundles rendering resources and settings for pitch and bench rendering.
"""

from typing import Optional

import pygame

from board.core.constants import (
    COLOR_AWAY,
    COLOR_AWAY_TEXT,
    COLOR_HOME,
    COLOR_HOME_TEXT,
)

TEAM_COLORS = {
    "home": (COLOR_HOME, COLOR_HOME_TEXT),
    "away": (COLOR_AWAY, COLOR_AWAY_TEXT),
}


class FontCache:
    """Lazily created fonts keyed by (size, bold)."""

    def __init__(self, name: str = "arial"):
        self.name = name
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}

    def get(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont(self.name, size, bold=bold)
        return self._fonts[key]


class RenderContext:
    """Bundles rendering resources and settings."""

    def __init__(
        self,
        fonts: FontCache,
        side: str,
        compact: bool = False,
        selected_token_id: Optional[int] = None,
        dragging_token_id: Optional[int] = None,
        pointer_pos: Optional[tuple[int, int]] = None,
        show_arrows: bool = True,
        bench_scroll: int = 0,
    ):
        """
        Initialize render context.

        Args:
            fonts: Shared font cache
            side: Team shown ("home" or "away"), selects marker colors
            compact: Whether the compact marker table applies
            selected_token_id: Token drawn with a selection ring
            dragging_token_id: Token currently being dragged
            pointer_pos: Current pointer position during a drag
            show_arrows: Whether arrows are drawn
            bench_scroll: Horizontal bench scroll offset in pixels
        """
        self.fonts = fonts
        self.side = side
        self.compact = compact
        self.selected_token_id = selected_token_id
        self.dragging_token_id = dragging_token_id
        self.pointer_pos = pointer_pos
        self.show_arrows = show_arrows
        self.bench_scroll = bench_scroll

    @property
    def team_colors(self) -> tuple[tuple[int, int, int], tuple[int, int, int]]:
        """(fill, text) colors for this side's markers."""
        return TEAM_COLORS.get(self.side, TEAM_COLORS["home"])
