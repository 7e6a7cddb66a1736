"""
Pitch Board - Board State

Manages application state that is not part of the roster: which side is
shown, display density, selection, and the status message.
"""

from typing import Optional

from board.core.constants import COMPACT_BREAKPOINT
from lineup.formats.roster_data import SIDES


class BoardState:
    """Manages board application state."""

    def __init__(self, side: str = "home", compact_override: Optional[bool] = None):
        # Which team's pitch and bench are on screen
        self.side: str = side if side in SIDES else "home"

        # Display density; None means follow the window width
        self.compact_override: Optional[bool] = compact_override
        self.compact: bool = bool(compact_override)

        # Selection (set by clicking a pitch token)
        self.selected_token_id: Optional[int] = None

        # View settings
        self.show_arrows: bool = True
        self.bench_scroll: int = 0  # pixels; clamped by the bench layout on use

        # Status bar message from the last action
        self.status_message: Optional[str] = None

    def update_compact(self, screen_width: int):
        """Recompute compact mode for a window width."""
        if self.compact_override is not None:
            self.compact = self.compact_override
        else:
            self.compact = screen_width < COMPACT_BREAKPOINT

    def toggle_side(self) -> str:
        """Switch to the other team and clear the selection."""
        self.side = "away" if self.side == "home" else "home"
        self.selected_token_id = None
        self.bench_scroll = 0
        return self.side

    def toggle_arrows(self):
        self.show_arrows = not self.show_arrows

    def select_token(self, token_id: Optional[int]):
        self.selected_token_id = token_id
