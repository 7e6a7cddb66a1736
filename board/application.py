"""
Pitch Board - Board Application

Main application class that orchestrates all board components.
"""

import logging
from pathlib import Path
from typing import Optional

import pygame
from pygame import Rect

from board.controllers.board_events import (
    ArrowAdded,
    ArrowRemoved,
    BoardEvent,
    Swapped,
    TokenActivated,
    TokenAdded,
    Transferred,
)
from board.controllers.board_state import BoardState
from board.controllers.event_handler import EventHandler
from board.controllers.interaction_engine import InteractionEngine
from board.controllers.pointer_capture import PointerCapture
from board.controllers.view_state import FieldView, compute_zone_rects
from board.controllers.zone_bounds import ZoneBoundsTracker
from board.core.constants import (
    COLOR_BENCH_TARGET_RING,
    COLOR_BG,
    COLOR_STATUS,
    COLOR_TEXT,
    DEFAULT_SCREEN_HEIGHT,
    DEFAULT_SCREEN_WIDTH,
    FPS,
    STATUS_HEIGHT,
)
from board.rendering.bench_renderer import BenchRenderer
from board.rendering.field_renderer import FieldRenderer
from board.rendering.render_context import FontCache, RenderContext
from board.tools import ToolContext, create_default_tools
from board.ui.dialogs import ask_open_board_path, ask_save_board_path
from board.ui.toolbar import Toolbar, ToolbarCallbacks
from lineup.formats.roster_data import BENCH, SURFACE, BoardData, RosterFormatError

logger = logging.getLogger(__name__)


class BoardApplication:
    """Main board application."""

    def __init__(
        self,
        screen_width: int = DEFAULT_SCREEN_WIDTH,
        screen_height: int = DEFAULT_SCREEN_HEIGHT,
        side: str = "home",
        compact: Optional[bool] = None,
    ):
        pygame.init()

        self.screen_width = screen_width
        self.screen_height = screen_height
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height), pygame.RESIZABLE
        )
        pygame.display.set_caption("Pitch Board")

        self.fonts = FontCache()
        self.clock = pygame.time.Clock()
        self.running = True

        # Data and state
        self.board = BoardData()
        self.state = BoardState(side=side, compact_override=compact)
        self.state.update_compact(self.screen_width)

        # Zone rectangles are recomputed on resize; the tracker reads them live
        self.pitch_rect, self.bench_rect = compute_zone_rects(
            self.screen_width, self.screen_height, self.state.compact
        )
        self.zones = ZoneBoundsTracker(lambda: self.pitch_rect, lambda: self.bench_rect)

        self.capture = PointerCapture()
        self.engine = InteractionEngine(
            self.board.roster(self.state.side),
            self.board.arrows,
            self.zones,
            capture=self.capture,
            on_events=self._on_board_events,
        )

        # Tools
        self.tool_manager = create_default_tools()
        self.tool_context = ToolContext(self.engine, self.state, self.zones)
        self.tool_manager.set_active_tool("move", self.tool_context)

        self._create_ui()

        self.event_handler = EventHandler(
            self.state,
            self.capture,
            self.tool_manager,
            self.tool_context,
            self.toolbar.buttons,
            self.screen_width,
            self.screen_height,
            on_load=self._on_load,
            on_save=self._on_save,
            on_toggle_side=self._toggle_side,
            on_resize=self._on_resize,
        )

    def _create_ui(self):
        """Create toolbar buttons."""
        callbacks = ToolbarCallbacks(
            on_load=self._on_load,
            on_save=self._on_save,
            on_set_tool=self._set_tool,
            on_set_side=self._set_side,
            on_add_token=self._add_token,
            on_clear_arrows=self._clear_arrows,
        )
        self.toolbar = Toolbar(self.screen_width, callbacks, compact=self.state.compact)

    # --- Board changes ---

    def _on_board_events(self, events: list[BoardEvent]):
        """Reflect committed gestures in the status bar and selection."""
        for event in events:
            if isinstance(event, (ArrowAdded, ArrowRemoved)):
                self.board.arrows_modified = True

            if isinstance(event, TokenActivated):
                token = self.engine.roster.get(event.token_id)
                self.state.select_token(event.token_id)
                if token is not None:
                    message = f"#{token.number} {token.name}"
                    if token.note:
                        message += f": {token.note}"
                    self.state.status_message = message
            elif isinstance(event, Swapped):
                incoming = self.engine.roster.get(event.bench_token_id)
                outgoing = self.engine.roster.get(event.surface_token_id)
                if incoming is not None and outgoing is not None:
                    self.state.status_message = f"#{incoming.number} on for #{outgoing.number}"
            elif isinstance(event, Transferred):
                token = self.engine.roster.get(event.token_id)
                if event.to_zone == BENCH and self.state.selected_token_id == event.token_id:
                    self.state.select_token(None)
                if event.to_zone == BENCH:
                    self.tool_context.reveal_bench_token(event.token_id)
                if token is not None:
                    where = "pitch" if event.to_zone == SURFACE else "bench"
                    self.state.status_message = f"#{token.number} to the {where}"
            elif isinstance(event, TokenAdded):
                if event.zone == BENCH:
                    self.tool_context.reveal_bench_token(event.token.id)
                self.state.status_message = f"Added #{event.token.number} {event.token.name}"

    def _set_tool(self, name: str):
        if not self.tool_manager.set_active_tool(name, self.tool_context):
            self.state.status_message = "Finish the current gesture first"

    def _set_side(self, side: str):
        if side != self.state.side:
            self._toggle_side()

    def _toggle_side(self):
        """Show the other team. Ignored mid-gesture."""
        if not self.engine.is_idle:
            return
        side = "away" if self.state.side == "home" else "home"
        self.engine.bind(self.board.roster(side))
        self.state.toggle_side()
        self.state.status_message = f"Showing {side} side"
        logger.debug("Switched to %s side", side)

    def _add_token(self, zone: str):
        roster = self.engine.roster
        self.engine.add_token(f"Player {roster.next_number()}", zone)

    def _clear_arrows(self):
        removed = self.engine.clear_arrows()
        if removed:
            self.state.status_message = f"Cleared {len(removed)} arrows"

    # --- File handling ---

    def _on_load(self):
        """Load a board file."""
        if not self.engine.is_idle:
            return
        path = ask_open_board_path()
        if path:
            self.load_board(path)

    def _on_save(self):
        """Save the current board."""
        if self.board.filepath:
            path = self.board.filepath
        else:
            path = ask_save_board_path()
            if not path:
                return
        try:
            self.board.save(path)
        except OSError as e:
            logger.error("Could not save %s: %s", path, e)
            self.state.status_message = f"Save failed: {e}"
            return
        self.state.status_message = f"Saved {Path(path).name}"

    def load_board(self, path: str) -> bool:
        """Load a board from file path, reporting failures in the status bar."""
        try:
            self.board.load(path)
        except (OSError, RosterFormatError) as e:
            logger.error("Could not load %s: %s", path, e)
            self.state.status_message = f"Load failed: {e}"
            return False

        self.engine.bind(self.board.roster(self.state.side), self.board.arrows)
        self.state.select_token(None)
        self.state.bench_scroll = 0
        self.state.status_message = f"Loaded {Path(path).name}"
        return True

    # --- Window ---

    def _on_resize(self, width: int, height: int):
        """Handle window resize."""
        self.screen_width = width
        self.screen_height = height
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self.state.update_compact(width)
        self.pitch_rect, self.bench_rect = compute_zone_rects(width, height, self.state.compact)
        self._create_ui()
        self.event_handler.buttons = self.toolbar.buttons
        self.event_handler.update_screen_size(width, height)

    def run(self):
        """Main loop."""
        while self.running:
            events = pygame.event.get()
            self.running = self.event_handler.handle_events(events)
            self._render()
            self.clock.tick(FPS)

        self.engine.cancel()
        pygame.quit()

    # --- Rendering ---

    def _render(self):
        """Render the board."""
        self.screen.fill(COLOR_BG)

        self.toolbar.update_active(self.tool_manager.get_active_tool_name(), self.state.side)
        self.toolbar.render(self.screen, self.fonts.get(13 if self.state.compact else 14))

        ctx = RenderContext(
            self.fonts,
            self.state.side,
            compact=self.state.compact,
            selected_token_id=self.state.selected_token_id,
            dragging_token_id=self.engine.dragging_token_id,
            pointer_pos=self.engine.pointer_pos,
            show_arrows=self.state.show_arrows,
            bench_scroll=self.state.bench_scroll,
        )
        roster = self.engine.roster
        FieldRenderer.render(
            self.screen,
            FieldView(self.pitch_rect),
            roster.surface,
            self.engine.arrows,
            self.engine.preview_arrow,
            ctx,
        )

        # Each zone lights up while a token from the other one hovers over it
        dragging = self.engine.dragging_token_id
        source = roster.zone_of(dragging) if dragging is not None else None
        if source == BENCH and self.engine.is_over_surface:
            pygame.draw.rect(self.screen, COLOR_BENCH_TARGET_RING, self.pitch_rect, 3, border_radius=8)
        is_drop_target = source == SURFACE and self.engine.hover_zone == BENCH
        BenchRenderer.render(self.screen, self.bench_rect, roster.bench, ctx, is_drop_target)

        self._render_status()

        pygame.display.flip()

    def _render_status(self):
        """Render status bar."""
        status_rect = Rect(0, self.screen_height - STATUS_HEIGHT, self.screen_width, STATUS_HEIGHT)
        pygame.draw.rect(self.screen, COLOR_STATUS, status_rect)

        mode = self.tool_manager.get_active_tool_name() or "-"
        status_parts = [f"Mode: {mode.title()}", f"Side: {self.state.side.title()}"]
        if not self.state.show_arrows:
            status_parts.append("Arrows hidden")

        if self.board.filepath:
            name = Path(self.board.filepath).name
            modified = "*" if self.board.modified else ""
            status_parts.append(f"File: {name}{modified}")

        if self.state.status_message:
            status_parts.append(self.state.status_message)

        status_text = "  |  ".join(status_parts)
        text_surf = self.fonts.get(13).render(status_text, True, COLOR_TEXT)
        self.screen.blit(text_surf, (10, self.screen_height - STATUS_HEIGHT + 8))
