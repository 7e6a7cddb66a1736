"""
Pitch Board - Event Handler

Handles user input events: mouse, touch, keyboard, and window events.
Mouse and touch are normalized into one pointer stream; while a gesture
holds the pointer capture, motion and release go to the gesture owner
instead of the active tool.
"""

import logging
from typing import Callable, Optional

import pygame

from board.controllers.board_state import BoardState
from board.controllers.pointer_capture import PointerCapture
from board.tools.base_tool import ToolContext, ToolResult
from board.tools.tool_manager import ToolManager
from board.ui.widgets import Button
from lineup.formats.roster_data import BENCH

logger = logging.getLogger(__name__)


class EventHandler:
    """Handles all user input events."""

    def __init__(
        self,
        state: BoardState,
        capture: PointerCapture,
        tool_manager: ToolManager,
        tool_context: ToolContext,
        buttons: list[Button],
        screen_width: int,
        screen_height: int,
        on_load: Callable[[], None],
        on_save: Callable[[], None],
        on_toggle_side: Callable[[], None],
        on_resize: Callable[[int, int], None],
    ):
        """
        Initialize event handler.

        Args:
            state: Board state
            capture: Pointer capture shared with the interaction engine
            tool_manager: Tool registry with the active tool
            tool_context: Context handed to tools
            buttons: Toolbar buttons
            screen_width: Screen width
            screen_height: Screen height
            on_load: Callback for load action
            on_save: Callback for save action
            on_toggle_side: Callback to switch between home and away
            on_resize: Callback for window resize (width, height)
        """
        self.state = state
        self.capture = capture
        self.tool_manager = tool_manager
        self.tool_context = tool_context
        self.buttons = buttons
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.on_load = on_load
        self.on_save = on_save
        self.on_toggle_side = on_toggle_side
        self.on_resize = on_resize

        # Only the first finger down is tracked
        self.active_finger: Optional[int] = None

    def update_screen_size(self, width: int, height: int):
        """Update screen dimensions."""
        self.screen_width = width
        self.screen_height = height

    def handle_events(self, events: list[pygame.event.Event]) -> bool:
        """
        Handle all pygame events.

        Args:
            events: List of pygame events to process

        Returns:
            True if application should continue running, False if quit requested
        """
        for event in events:
            if event.type == pygame.QUIT:
                self.cancel_gesture()
                return False

            if event.type == pygame.KEYDOWN:
                self._handle_key(event)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                if self._is_touch_emulated(event):
                    continue
                if event.button == 1 and self._handle_buttons(event):
                    continue
                self._pointer_down(event.pos, event.button)

            elif event.type == pygame.MOUSEMOTION:
                if self._is_touch_emulated(event):
                    continue
                for button in self.buttons:
                    button.handle_event(event)
                self._pointer_move(event.pos)

            elif event.type == pygame.MOUSEBUTTONUP:
                if self._is_touch_emulated(event):
                    continue
                if event.button == 1:
                    self._pointer_up(event.pos)

            elif event.type == pygame.FINGERDOWN:
                if self.active_finger is not None:
                    continue
                self.active_finger = event.finger_id
                pos = self._finger_pos(event)
                if not self._handle_buttons_at(pos):
                    self._pointer_down(pos, 1)

            elif event.type == pygame.FINGERMOTION:
                if event.finger_id == self.active_finger:
                    self._pointer_move(self._finger_pos(event))

            elif event.type == pygame.FINGERUP:
                if event.finger_id == self.active_finger:
                    self.active_finger = None
                    self._pointer_up(self._finger_pos(event))

            elif event.type == pygame.MOUSEWHEEL:
                self._scroll_bench(event)

            elif event.type in (pygame.WINDOWFOCUSLOST, pygame.WINDOWLEAVE):
                self.cancel_gesture()

            elif event.type == pygame.VIDEORESIZE:
                self.on_resize(event.w, event.h)

        return True

    def cancel_gesture(self) -> bool:
        """Abort whatever gesture holds the pointer."""
        self.active_finger = None
        if self.capture.dispatch_cancel():
            logger.debug("Gesture cancelled by window event")
            return True
        return False

    @staticmethod
    def _is_touch_emulated(event) -> bool:
        # SDL also reports touches as mouse events; those are handled as fingers
        return bool(getattr(event, "touch", False))

    def _finger_pos(self, event) -> tuple[int, int]:
        """Finger coordinates are normalized to [0, 1]; convert to window pixels."""
        return (int(event.x * self.screen_width), int(event.y * self.screen_height))

    def _handle_buttons(self, event) -> bool:
        for button in self.buttons:
            if button.handle_event(event):
                return True
        return False

    def _handle_buttons_at(self, pos: tuple[int, int]) -> bool:
        for button in self.buttons:
            if button.rect.collidepoint(pos):
                button.callback()
                return True
        return False

    def _pointer_down(self, pos: tuple[int, int], button: int):
        if self.capture.active:
            return
        tool = self.tool_manager.get_active_tool()
        if tool is None:
            return
        result = tool.handle_mouse_down(pos, button, pygame.key.get_mods(), self.tool_context)
        self._apply_result(result)

    def _pointer_move(self, pos: tuple[int, int]):
        if self.capture.dispatch_move(pos):
            return
        tool = self.tool_manager.get_active_tool()
        if tool is not None:
            self._apply_result(tool.handle_mouse_motion(pos, self.tool_context))

    def _pointer_up(self, pos: tuple[int, int]):
        self.capture.dispatch_up(pos)

    def _scroll_bench(self, event):
        """Wheel over the bench scrolls it one slot per notch; down or right moves on."""
        if self.tool_context.zones.classify(pygame.mouse.get_pos()) != BENCH:
            return
        self.tool_context.scroll_bench_slots(event.x - event.y)

    def _apply_result(self, result: ToolResult):
        if result.message:
            self.state.status_message = result.message

    def _handle_key(self, event):
        """Handle keyboard input."""
        mods = pygame.key.get_mods()

        if event.key == pygame.K_ESCAPE and self.capture.active:
            self.cancel_gesture()
            return

        if event.key == pygame.K_s and mods & pygame.KMOD_CTRL:
            self.on_save()
            return
        if event.key == pygame.K_o and mods & pygame.KMOD_CTRL:
            self.on_load()
            return

        if event.key == pygame.K_TAB:
            self.on_toggle_side()
            return

        if event.key == pygame.K_a and not mods & pygame.KMOD_CTRL:
            self.state.toggle_arrows()
            return

        if not mods & pygame.KMOD_CTRL:
            if self.tool_manager.activate_by_hotkey(event.key, self.tool_context):
                return

        tool = self.tool_manager.get_active_tool()
        if tool is not None:
            self._apply_result(tool.handle_key_down(event.key, mods, self.tool_context))
