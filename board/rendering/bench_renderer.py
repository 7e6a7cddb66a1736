"""
Pitch Board - Bench Renderer

Lays out and renders the substitutes' bench below the pitch. The bench is a
single row of slots that scrolls horizontally once it outgrows its width.
"""

import pygame
from pygame import Rect

from board.core.constants import (
    COLOR_BENCH,
    COLOR_BENCH_SCROLL_THUMB,
    COLOR_BENCH_SCROLL_TRACK,
    COLOR_BENCH_TARGET,
    COLOR_BENCH_TARGET_RING,
    COLOR_TEXT_DIM,
)
from board.rendering.marker_utils import draw_marker
from board.rendering.render_context import RenderContext
from board.rendering.token_layout import BENCH_MARKER_SIZES, fit_label, short_label
from lineup.formats.roster_data import Token

HEADER_HEIGHT = 18
SLOT_GAP = 10
PADDING = 8
SLOT_INSET = 8  # extra left margin before the first slot
SCROLLBAR_HEIGHT = 4


class BenchRenderer:
    """Renders the bench zone."""

    @staticmethod
    def slot_pitch(compact: bool) -> int:
        """Horizontal distance between neighbouring slot centres."""
        return BENCH_MARKER_SIZES[bool(compact)].diameter + SLOT_GAP + 16

    @staticmethod
    def max_scroll(bench_rect: Rect, count: int, compact: bool) -> int:
        """
        Largest useful scroll offset: the one that brings the last slot fully
        inside the bench. Zero when every slot already fits.
        """
        if count <= 0:
            return 0
        size = BENCH_MARKER_SIZES[bool(compact)].diameter
        content = PADDING + SLOT_INSET + (count - 1) * BenchRenderer.slot_pitch(compact) + size
        return max(0, content + PADDING - bench_rect.width)

    @staticmethod
    def clamp_scroll(bench_rect: Rect, count: int, compact: bool, scroll: int) -> int:
        return max(0, min(int(scroll), BenchRenderer.max_scroll(bench_rect, count, compact)))

    @staticmethod
    def scroll_to_reveal(bench_rect: Rect, index: int, count: int, compact: bool, scroll: int) -> int:
        """Smallest change to `scroll` that shows slot `index` in full."""
        rect = BenchRenderer.slot_rects(bench_rect, count, compact)[index]
        left = bench_rect.x + PADDING
        right = bench_rect.right - PADDING
        scroll = BenchRenderer.clamp_scroll(bench_rect, count, compact, scroll)
        if rect.x - scroll < left:
            scroll = rect.x - left
        elif rect.right - scroll > right:
            scroll = rect.right - right
        return BenchRenderer.clamp_scroll(bench_rect, count, compact, scroll)

    @staticmethod
    def slot_rects(bench_rect: Rect, count: int, compact: bool, scroll: int = 0) -> list[Rect]:
        """
        Compute the marker rectangle of each bench slot, left to right.

        The row is shifted left by `scroll` (clamped to the valid range).
        Slots outside the bench are still returned; callers skip them with
        `is_visible`.
        """
        size = BENCH_MARKER_SIZES[bool(compact)].diameter
        pitch = BenchRenderer.slot_pitch(compact)
        offset = BenchRenderer.clamp_scroll(bench_rect, count, compact, scroll)
        top = bench_rect.y + HEADER_HEIGHT + PADDING // 2
        return [
            Rect(bench_rect.x + PADDING + SLOT_INSET + i * pitch - offset, top, size, size)
            for i in range(count)
        ]

    @staticmethod
    def is_visible(bench_rect: Rect, slot: Rect) -> bool:
        return slot.left >= bench_rect.left and slot.right <= bench_rect.right

    @staticmethod
    def token_at(
        bench_rect: Rect,
        tokens: list[Token],
        compact: bool,
        pos: tuple[int, int],
        scroll: int = 0,
    ) -> Token | None:
        """Find the bench token whose marker contains a screen position."""
        slots = BenchRenderer.slot_rects(bench_rect, len(tokens), compact, scroll)
        for token, rect in zip(tokens, slots):
            if BenchRenderer.is_visible(bench_rect, rect) and rect.collidepoint(pos):
                return token
        return None

    @staticmethod
    def render(
        screen: pygame.Surface,
        bench_rect: Rect,
        tokens: list[Token],
        ctx: RenderContext,
        is_drop_target: bool = False,
    ):
        """
        Render the bench and its tokens.

        Args:
            screen: Surface to draw on
            bench_rect: Bench zone rectangle
            tokens: Bench tokens in slot order
            ctx: Render context (ctx.bench_scroll shifts the slot row)
            is_drop_target: Highlight the bench while a pitch token is dragged
        """
        if bench_rect.width <= 0 or bench_rect.height <= 0:
            return

        color = COLOR_BENCH_TARGET if is_drop_target else COLOR_BENCH
        pygame.draw.rect(screen, color, bench_rect, border_radius=8)
        if is_drop_target:
            pygame.draw.rect(screen, COLOR_BENCH_TARGET_RING, bench_rect, 2, border_radius=8)

        header = ctx.fonts.get(11, bold=True).render(f"BENCH ({len(tokens)})", True, COLOR_TEXT_DIM)
        screen.blit(header, (bench_rect.x + PADDING, bench_rect.y + 4))

        if not tokens:
            empty = ctx.fonts.get(12).render("Bench empty", True, COLOR_TEXT_DIM)
            screen.blit(empty, empty.get_rect(center=bench_rect.center))
            return

        metrics = BENCH_MARKER_SIZES[bool(ctx.compact)]
        slots = BenchRenderer.slot_rects(bench_rect, len(tokens), ctx.compact, ctx.bench_scroll)
        for token, rect in zip(tokens, slots):
            if not BenchRenderer.is_visible(bench_rect, rect):
                continue
            draw_marker(
                screen,
                rect.center,
                metrics,
                token.number,
                fit_label(short_label(token.name), metrics.label_chars),
                ctx,
                has_note=bool(token.note),
                ghost=token.id == ctx.dragging_token_id,
            )

        BenchRenderer._render_scrollbar(screen, bench_rect, len(tokens), ctx)

        # Dragged bench token follows the pointer until it is dropped,
        # even when its slot is scrolled out of view
        dragged = next((t for t in tokens if t.id == ctx.dragging_token_id), None)
        if dragged is not None and ctx.pointer_pos is not None:
            label = fit_label(short_label(dragged.name), metrics.label_chars)
            draw_marker(screen, ctx.pointer_pos, metrics, dragged.number, label, ctx, dragging=True)

    @staticmethod
    def _render_scrollbar(screen: pygame.Surface, bench_rect: Rect, count: int, ctx: RenderContext):
        max_scroll = BenchRenderer.max_scroll(bench_rect, count, ctx.compact)
        if max_scroll == 0:
            return
        track = Rect(
            bench_rect.x + PADDING,
            bench_rect.bottom - PADDING // 2 - SCROLLBAR_HEIGHT,
            bench_rect.width - 2 * PADDING,
            SCROLLBAR_HEIGHT,
        )
        visible = bench_rect.width / (bench_rect.width + max_scroll)
        thumb_width = max(SCROLLBAR_HEIGHT * 4, int(track.width * visible))
        scroll = BenchRenderer.clamp_scroll(bench_rect, count, ctx.compact, ctx.bench_scroll)
        thumb_x = track.x + int((track.width - thumb_width) * scroll / max_scroll)
        pygame.draw.rect(screen, COLOR_BENCH_SCROLL_TRACK, track, border_radius=2)
        thumb = Rect(thumb_x, track.y, thumb_width, track.height)
        pygame.draw.rect(screen, COLOR_BENCH_SCROLL_THUMB, thumb, border_radius=2)
