"""
Toolbar for board buttons.
"""

import pygame
from pygame import Rect

from board.core.constants import COLOR_TOOLBAR, TOOLBAR_HEIGHT

from .widgets import Button


class ToolbarCallbacks:
    """Named toolbar actions (on_load, on_set_tool, ...), set as attributes."""

    def __init__(self, **callbacks):
        for name, callback in callbacks.items():
            setattr(self, name, callback)


class Toolbar:
    """Top strip with file, tool, side and edit buttons."""

    def __init__(self, screen_width: int, callbacks: ToolbarCallbacks, compact: bool = False):
        self.screen_width = screen_width
        self.callbacks = callbacks
        self.compact = compact

        # Button groups
        self.file_buttons: list[Button] = []
        self.tool_buttons: list[Button] = []
        self.side_buttons: list[Button] = []
        self.edit_buttons: list[Button] = []

        self._create_buttons()

        self.buttons = self.file_buttons + self.tool_buttons + self.side_buttons + self.edit_buttons

    def _create_buttons(self):
        """Lay the button groups out left to right; compact mode shrinks the buttons."""
        width = 52 if self.compact else 64
        gap = 6 if self.compact else 10
        x = 10

        def add(group: list[Button], text: str, callback, extra_gap: int = 0):
            nonlocal x
            group.append(Button(Rect(x, 5, width, 30), text, callback))
            x += width + gap + extra_gap

        add(self.file_buttons, "Load", self.callbacks.on_load)
        add(self.file_buttons, "Save", self.callbacks.on_save, extra_gap=gap)

        add(self.tool_buttons, "Move", lambda: self.callbacks.on_set_tool("move"))
        add(self.tool_buttons, "Draw", lambda: self.callbacks.on_set_tool("draw"), extra_gap=gap)

        add(self.side_buttons, "Home", lambda: self.callbacks.on_set_side("home"))
        add(self.side_buttons, "Away", lambda: self.callbacks.on_set_side("away"), extra_gap=gap)

        add(self.edit_buttons, "+Pitch", lambda: self.callbacks.on_add_token("surface"))
        add(self.edit_buttons, "+Bench", lambda: self.callbacks.on_add_token("bench"))
        add(self.edit_buttons, "Clear", self.callbacks.on_clear_arrows)

    def update_active(self, tool_name: str | None, side: str):
        """Highlight the active tool and side."""
        self.tool_buttons[0].active = tool_name == "move"
        self.tool_buttons[1].active = tool_name == "draw"
        self.side_buttons[0].active = side == "home"
        self.side_buttons[1].active = side == "away"

    def render(self, screen: pygame.Surface, font: pygame.font.Font):
        pygame.draw.rect(screen, COLOR_TOOLBAR, (0, 0, self.screen_width, TOOLBAR_HEIGHT))
        for button in self.buttons:
            button.render(screen, font)
