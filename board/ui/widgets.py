"""
Pitch Board - UI Widgets

Basic UI widget components for the board.
"""

from typing import Callable

import pygame
from pygame import Rect, Surface

from board.core.constants import (
    COLOR_BORDER,
    COLOR_BUTTON,
    COLOR_BUTTON_ACTIVE,
    COLOR_BUTTON_HOVER,
    COLOR_TEXT,
)


class Button:
    """Simple toolbar button; `active` marks the current mode or side."""

    def __init__(self, rect: Rect, text: str, callback: Callable[[], None]):
        self.rect = rect
        self.text = text
        self.callback = callback
        self.hovered = False
        self.active = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update hover state; run the callback on a left click inside. Returns True if clicked."""
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False

    def render(self, screen: Surface, font: pygame.font.Font):
        if self.active:
            color = COLOR_BUTTON_ACTIVE
        elif self.hovered:
            color = COLOR_BUTTON_HOVER
        else:
            color = COLOR_BUTTON
        pygame.draw.rect(screen, color, self.rect, border_radius=4)
        pygame.draw.rect(screen, COLOR_BORDER, self.rect, 1, border_radius=4)

        text_surf = font.render(self.text, True, COLOR_TEXT)
        screen.blit(text_surf, text_surf.get_rect(center=self.rect.center))
