"""
Pitch Board - Marker Utilities

Shared drawing of token markers for the pitch and bench renderers.
"""

import pygame

from board.core.constants import (
    COLOR_LABEL_BG,
    COLOR_MARKER_BORDER,
    COLOR_NOTE_DOT,
    COLOR_SELECTED,
    COLOR_TEXT,
)
from board.rendering.render_context import RenderContext
from board.rendering.token_layout import MarkerMetrics

SELECTION_RING_WIDTH = 3
DRAG_SCALE = 1.1


def draw_marker(
    screen: pygame.Surface,
    center: tuple[int, int],
    metrics: MarkerMetrics,
    number: int,
    label: str,
    ctx: RenderContext,
    selected: bool = False,
    dragging: bool = False,
    has_note: bool = False,
    ghost: bool = False,
):
    """
    Draw a round token marker with its number, and the name label below.

    Args:
        screen: Pygame surface to draw on
        center: Marker center in screen pixels
        metrics: Size table entry to use
        number: Shirt number drawn inside the circle
        label: Already truncated name label
        ctx: Render context (fonts, team colors)
        selected: Draw the selection ring
        dragging: Draw slightly enlarged
        has_note: Draw the note indicator dot
        ghost: Draw translucent (bench token being dragged away)
    """
    fill, text_color = ctx.team_colors
    if selected:
        fill, text_color = COLOR_SELECTED, COLOR_TEXT

    diameter = metrics.diameter
    if dragging:
        diameter = int(diameter * DRAG_SCALE)
    radius = diameter // 2

    target = screen
    origin = center
    if ghost:
        target = pygame.Surface((diameter + 4, diameter + 4), pygame.SRCALPHA)
        origin = (target.get_width() // 2, target.get_height() // 2)

    pygame.draw.circle(target, fill, origin, radius)
    pygame.draw.circle(target, COLOR_MARKER_BORDER, origin, radius, 2)
    if selected:
        pygame.draw.circle(target, COLOR_SELECTED, origin, radius + 2, SELECTION_RING_WIDTH)

    number_surf = ctx.fonts.get(metrics.number_font, bold=True).render(str(number), True, text_color)
    target.blit(number_surf, number_surf.get_rect(center=origin))

    if has_note:
        dot = (origin[0] + int(radius * 0.75), origin[1] - int(radius * 0.75))
        pygame.draw.circle(target, COLOR_NOTE_DOT, dot, 5)
        pygame.draw.circle(target, COLOR_MARKER_BORDER, dot, 5, 1)

    if ghost:
        target.set_alpha(128)
        screen.blit(target, target.get_rect(center=center))

    if label:
        label_surf = ctx.fonts.get(metrics.name_font).render(label, True, COLOR_TEXT)
        label_rect = label_surf.get_rect(midtop=(center[0], center[1] + radius + 2))
        background = pygame.Surface(label_rect.inflate(6, 2).size, pygame.SRCALPHA)
        background.fill(COLOR_LABEL_BG)
        screen.blit(background, label_rect.inflate(6, 2))
        screen.blit(label_surf, label_rect)
