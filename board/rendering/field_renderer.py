"""
Pitch Board - Field Renderer

Renders the pitch markings, arrows (committed and in-progress), and the
tokens placed on the pitch.
"""

import math

import pygame
from pygame import Rect

from board.controllers.view_state import FieldView
from board.core.constants import (
    ARROW_COLORS,
    ARROW_HEAD_LENGTH,
    ARROW_HEAD_WIDTH,
    ARROW_WIDTH,
    COLOR_PITCH,
    COLOR_PITCH_DARK,
    COLOR_PITCH_LINES,
    PITCH_LENGTH_M,
    PITCH_WIDTH_M,
    PREVIEW_DASH_PX,
)
from board.rendering.marker_utils import draw_marker
from board.rendering.render_context import RenderContext
from board.rendering.token_layout import place_token
from lineup.core.annotations import ArrowSet
from lineup.formats.roster_data import Token


class FieldRenderer:
    """Renders the pitch surface."""

    @staticmethod
    def render(
        screen: pygame.Surface,
        view: FieldView,
        tokens: list[Token],
        arrows: ArrowSet,
        preview_arrow,
        ctx: RenderContext,
    ):
        """
        Render the pitch with its arrows and tokens.

        Args:
            screen: Surface to draw on
            view: Pitch rectangle and coordinate mapping
            tokens: Tokens on the pitch, in draw order
            arrows: Committed arrows
            preview_arrow: (start, end) of the arrow being drawn, or None
            ctx: Render context
        """
        rect = view.surface_rect
        if rect.width <= 0 or rect.height <= 0:
            return

        pygame.draw.rect(screen, COLOR_PITCH_DARK, rect, border_radius=8)
        pygame.draw.rect(screen, COLOR_PITCH, rect.inflate(-8, -8), border_radius=6)
        FieldRenderer._render_markings(screen, rect)

        if ctx.show_arrows:
            for arrow in arrows:
                color = ARROW_COLORS.get(arrow.color, ARROW_COLORS["white"])
                FieldRenderer._render_arrow(
                    screen, view.percent_to_screen(arrow.start), view.percent_to_screen(arrow.end), color
                )
        if preview_arrow is not None:
            start, end = preview_arrow
            FieldRenderer._render_arrow(
                screen,
                view.percent_to_screen(start),
                view.percent_to_screen(end),
                ARROW_COLORS["white"],
                dashed=True,
            )

        # Dragged token last so it stays on top
        ordered = sorted(tokens, key=lambda t: t.id == ctx.dragging_token_id)
        for token in ordered:
            placed = place_token(token, view, ctx.compact)
            if placed is None:
                continue
            draw_marker(
                screen,
                placed.center,
                placed.metrics,
                token.number,
                placed.label,
                ctx,
                selected=token.id == ctx.selected_token_id,
                dragging=token.id == ctx.dragging_token_id,
                has_note=bool(token.note),
            )

    @staticmethod
    def _render_markings(screen: pygame.Surface, rect: Rect):
        """Draw the pitch lines, scaled from metres to the pitch rectangle."""
        sx = rect.width / PITCH_WIDTH_M
        sy = rect.height / PITCH_LENGTH_M

        def m_rect(x, y, w, h) -> Rect:
            return Rect(rect.x + x * sx, rect.y + y * sy, w * sx, h * sy)

        def m_point(x, y) -> tuple[int, int]:
            return (round(rect.x + x * sx), round(rect.y + y * sy))

        lines = COLOR_PITCH_LINES
        pygame.draw.rect(screen, lines, rect, 2)
        pygame.draw.line(screen, lines, m_point(0, 52.5), m_point(68, 52.5), 2)

        centre = m_point(34, 52.5)
        circle = Rect(0, 0, 2 * 9.15 * sx, 2 * 9.15 * sy)
        circle.center = centre
        pygame.draw.ellipse(screen, lines, circle, 2)
        pygame.draw.circle(screen, lines, centre, 3)

        # Penalty and goal areas, top then bottom
        pygame.draw.rect(screen, lines, m_rect(13.84, 0, 40.32, 16.5), 2)
        pygame.draw.rect(screen, lines, m_rect(24.84, 0, 18.32, 5.5), 2)
        pygame.draw.circle(screen, lines, m_point(34, 11), 3)
        pygame.draw.rect(screen, lines, m_rect(13.84, 88.5, 40.32, 16.5), 2)
        pygame.draw.rect(screen, lines, m_rect(24.84, 99.5, 18.32, 5.5), 2)
        pygame.draw.circle(screen, lines, m_point(34, 94), 3)

        # Penalty arcs (the part of the 9.15m circle outside the box)
        arc_rect = Rect(0, 0, 2 * 9.15 * sx, 2 * 9.15 * sy)
        arc_rect.center = m_point(34, 11)
        pygame.draw.arc(screen, lines, arc_rect, math.radians(217), math.radians(323), 2)
        arc_rect.center = m_point(34, 94)
        pygame.draw.arc(screen, lines, arc_rect, math.radians(37), math.radians(143), 2)

    @staticmethod
    def _render_arrow(screen, start, end, color, dashed: bool = False):
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        length = math.hypot(dx, dy)
        if length < 1:
            return
        ux, uy = dx / length, dy / length

        # Shaft stops at the base of the head
        base = (end[0] - ux * ARROW_HEAD_LENGTH, end[1] - uy * ARROW_HEAD_LENGTH)
        if dashed:
            step = PREVIEW_DASH_PX * 2
            for offset in range(0, int(max(0, length - ARROW_HEAD_LENGTH)), step):
                seg_end = min(offset + PREVIEW_DASH_PX, length - ARROW_HEAD_LENGTH)
                pygame.draw.line(
                    screen,
                    color,
                    (start[0] + ux * offset, start[1] + uy * offset),
                    (start[0] + ux * seg_end, start[1] + uy * seg_end),
                    ARROW_WIDTH,
                )
        else:
            pygame.draw.line(screen, color, start, base, ARROW_WIDTH)

        half = ARROW_HEAD_WIDTH / 2
        left = (base[0] - uy * half, base[1] + ux * half)
        right = (base[0] + uy * half, base[1] - ux * half)
        pygame.draw.polygon(screen, color, [end, left, right])
