"""
Pitch Board - Interaction Engine

Owns the single active manipulation (dragging a token or drawing an
arrow), tracks it across the pitch and the bench, and on release decides
what the gesture meant: a move, a transfer between zones, a swap, a new
arrow, a click, or nothing at all.

Roster lists are only changed here, after the gesture ends. The one
exception is the live position of a pitch token being dragged, which is
restored if the gesture is aborted or turns out to be a click.
"""

import logging
import math
from dataclasses import replace
from typing import Callable, Optional

from pygame import Rect

from board.controllers.board_events import (
    ArrowAdded,
    ArrowRemoved,
    BoardEvent,
    PositionChanged,
    Swapped,
    TokenActivated,
    TokenAdded,
    Transferred,
)
from board.controllers.manipulation import IDLE, DrawingArrow, Idle, Manipulation, MovingToken
from board.controllers.pointer_capture import PointerCapture
from board.controllers.view_state import FieldView
from board.controllers.zone_bounds import ZoneBoundsTracker
from board.core.constants import (
    CLICK_THRESHOLD_PX,
    HIT_TOLERANCE,
    MIN_ARROW_LENGTH,
    MODE_DRAW,
    MODE_MOVE,
    MODES,
)
from lineup.core.annotations import DEFAULT_ARROW_COLOR, ArrowSet
from lineup.core.hit_testing import find_nearest
from lineup.formats.roster_data import (
    BENCH,
    DEFAULT_POSITION,
    SURFACE,
    TeamRoster,
    Token,
    ZoneName,
)

logger = logging.getLogger(__name__)


class InteractionEngine:
    """Drag/drop and arrow-drawing state machine for one side's board."""

    def __init__(
        self,
        roster: TeamRoster,
        arrows: ArrowSet,
        zones: ZoneBoundsTracker,
        capture: Optional[PointerCapture] = None,
        on_events: Optional[Callable[[list[BoardEvent]], None]] = None,
        hit_tolerance: tuple[float, float] = (HIT_TOLERANCE, HIT_TOLERANCE),
        click_threshold: int = CLICK_THRESHOLD_PX,
        min_arrow_length: float = MIN_ARROW_LENGTH,
        arrow_color: str = DEFAULT_ARROW_COLOR,
    ):
        """
        Initialize the engine.

        Args:
            roster: Tokens of the side being edited
            arrows: Arrow annotations shown on the pitch
            zones: Live pitch/bench rectangles
            capture: Window-wide pointer routing shared with the event handler
            on_events: Receives each batch of committed changes
            hit_tolerance: (x, y) percent box used to detect drop-onto-token
            click_threshold: Pixel displacement below which a drag is a click
            min_arrow_length: Arrows must be strictly longer than this (percent)
            arrow_color: Color given to new arrows
        """
        self.roster = roster
        self.arrows = arrows
        self.zones = zones
        self.capture = capture if capture is not None else PointerCapture()
        self.on_events = on_events
        self.hit_tolerance = hit_tolerance
        self.click_threshold = click_threshold
        self.min_arrow_length = min_arrow_length
        self.arrow_color = arrow_color

        self.mode: str = MODE_MOVE
        self.manipulation: Manipulation = IDLE
        self.view = FieldView(Rect(0, 0, 0, 0))

        # Live feedback only; the drop decision re-classifies the release point
        self.hover_zone: Optional[ZoneName] = None
        self.pointer_pos: Optional[tuple[int, int]] = None

    # --- State queries ---

    @property
    def is_idle(self) -> bool:
        return isinstance(self.manipulation, Idle)

    @property
    def dragging_token_id(self) -> Optional[int]:
        if isinstance(self.manipulation, MovingToken):
            return self.manipulation.token_id
        return None

    @property
    def is_over_surface(self) -> bool:
        return self.hover_zone == SURFACE

    @property
    def preview_arrow(self) -> Optional[tuple[tuple[float, float], tuple[float, float]]]:
        if isinstance(self.manipulation, DrawingArrow):
            return (self.manipulation.start, self.manipulation.end)
        return None

    # --- Configuration (only between gestures) ---

    def set_mode(self, mode: str) -> bool:
        """Switch between move and draw mode. Ignored mid-gesture."""
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode}")
        if not self.is_idle:
            return False
        self.mode = mode
        return True

    def bind(self, roster: TeamRoster, arrows: Optional[ArrowSet] = None) -> bool:
        """Point the engine at another roster (e.g. the other side). Ignored mid-gesture."""
        if not self.is_idle:
            return False
        self.roster = roster
        if arrows is not None:
            self.arrows = arrows
        return True

    # --- Gesture start ---

    def pointer_down_on_token(self, token_id: int, pos: tuple[int, int]) -> bool:
        """
        Begin dragging a token from whichever zone holds it.

        Returns:
            True if a drag started
        """
        if self.mode != MODE_MOVE or not self.is_idle:
            return False

        zone = self.roster.zone_of(token_id)
        if zone is None:
            logger.warning("Pointer down on unknown token %s", token_id)
            return False

        token = self.roster.get(token_id)
        self.manipulation = MovingToken(
            token_id=token_id,
            source_zone=zone,
            start_pointer=(int(pos[0]), int(pos[1])),
            original_position=token.position,
        )
        self.hover_zone = zone
        self.pointer_pos = (int(pos[0]), int(pos[1]))
        self.capture.acquire(self)
        logger.debug("Drag start: token %s from %s", token_id, zone)
        return True

    def pointer_down_on_surface(self, pos: tuple[int, int]) -> bool:
        """
        Begin drawing an arrow at an empty spot on the pitch.

        Returns:
            True if drawing started
        """
        if self.mode != MODE_DRAW or not self.is_idle:
            return False

        self._measure_surface()
        start = self.view.screen_to_percent(pos)
        self.manipulation = DrawingArrow(start=start, end=start)
        self.pointer_pos = (int(pos[0]), int(pos[1]))
        self.capture.acquire(self)
        logger.debug("Arrow start at (%.1f, %.1f)", start[0], start[1])
        return True

    # --- Gesture progress ---

    def pointer_move(self, pos: tuple[int, int]):
        """Update live feedback for the current gesture."""
        manipulation = self.manipulation
        if isinstance(manipulation, Idle):
            return

        self.pointer_pos = (int(pos[0]), int(pos[1]))
        self._measure_surface()

        if isinstance(manipulation, MovingToken):
            self.hover_zone = self.zones.classify(pos)
            if manipulation.source_zone == SURFACE:
                self.roster.set_position(
                    manipulation.token_id,
                    self.view.screen_to_percent_clamped(pos),
                    mark_modified=False,
                )
        else:
            self.manipulation = replace(manipulation, end=self.view.screen_to_percent(pos))

    # --- Gesture end ---

    def pointer_up(self, pos: tuple[int, int]) -> list[BoardEvent]:
        """
        Finish the current gesture and commit its outcome.

        Returns:
            The committed events (empty if the gesture changed nothing)
        """
        manipulation = self.manipulation
        if isinstance(manipulation, Idle):
            return []

        try:
            if isinstance(manipulation, MovingToken):
                events = self._finish_move(manipulation, pos)
            else:
                events = self._finish_arrow(manipulation, pos)
        finally:
            self._end_gesture()

        self._emit(events)
        return events

    def cancel(self) -> bool:
        """
        Abandon the current gesture without committing anything.

        A dragged pitch token goes back to where it started; an arrow being
        drawn is discarded.

        Returns:
            True if a gesture was cancelled
        """
        manipulation = self.manipulation
        if isinstance(manipulation, Idle):
            return False

        try:
            if isinstance(manipulation, MovingToken):
                self._restore(manipulation)
        finally:
            self._end_gesture()
        logger.debug("Gesture cancelled")
        return True

    # PointerListener protocol, used while the capture is held

    def on_pointer_move(self, pos: tuple[int, int]) -> None:
        self.pointer_move(pos)

    def on_pointer_up(self, pos: tuple[int, int]) -> None:
        self.pointer_up(pos)

    def on_pointer_cancel(self) -> None:
        self.cancel()

    def _finish_move(self, moving: MovingToken, pos: tuple[int, int]) -> list[BoardEvent]:
        source = moving.source_zone
        target = self.zones.classify(pos)
        token_id = moving.token_id

        # A zone change always wins over a click
        if source == BENCH and target == SURFACE:
            self._measure_surface()
            drop = self.view.screen_to_percent(pos)
            hit = find_nearest(drop, self.roster.surface, *self.hit_tolerance)
            if hit is not None:
                self.roster.swap(token_id, hit.id)
                logger.debug("Swap: bench %s <-> pitch %s", token_id, hit.id)
                return [Swapped(token_id, hit.id)]
            self.roster.place_on_surface(token_id, drop)
            logger.debug("Transfer bench -> pitch: %s at (%.1f, %.1f)", token_id, *drop)
            return [Transferred(token_id, BENCH, SURFACE, drop)]

        if source == SURFACE and target == BENCH:
            self.roster.move_to_bench(token_id)
            logger.debug("Transfer pitch -> bench: %s", token_id)
            return [Transferred(token_id, SURFACE, BENCH)]

        if self._is_click(moving, pos):
            self._restore(moving)
            if source == SURFACE:
                logger.debug("Click on token %s", token_id)
                return [TokenActivated(token_id)]
            return []

        if target == source:
            if source == SURFACE:
                self._measure_surface()
                position = self.view.screen_to_percent_clamped(pos)
                if position == moving.original_position:
                    self._restore(moving)
                    return []
                self.roster.set_position(token_id, position)
                return [PositionChanged(token_id, self.roster.get(token_id).position)]
            return []

        self._restore(moving)
        logger.debug("Drop outside both zones, token %s reverted", token_id)
        return []

    def _finish_arrow(self, drawing: DrawingArrow, pos: tuple[int, int]) -> list[BoardEvent]:
        self._measure_surface()
        end = self.view.screen_to_percent(pos)
        if math.dist(drawing.start, end) <= self.min_arrow_length:
            logger.debug("Arrow discarded, too short")
            return []

        # Persisted coordinates stay on the pitch
        start = _clamp_percent(drawing.start)
        end = _clamp_percent(end)
        arrow_id = self.arrows.add(start, end, self.arrow_color)
        return [ArrowAdded(self.arrows.get(arrow_id))]

    def _is_click(self, moving: MovingToken, pos: tuple[int, int]) -> bool:
        dx = abs(pos[0] - moving.start_pointer[0])
        dy = abs(pos[1] - moving.start_pointer[1])
        return dx < self.click_threshold and dy < self.click_threshold

    def _restore(self, moving: MovingToken):
        if moving.source_zone == SURFACE and moving.original_position is not None:
            self.roster.set_position(
                moving.token_id, moving.original_position, mark_modified=False
            )

    def _end_gesture(self):
        self.manipulation = IDLE
        self.hover_zone = None
        self.pointer_pos = None
        self.capture.release(self)

    def _measure_surface(self):
        self.view.update_rect(self.zones.rect_for(SURFACE))

    # --- Commands (only between gestures) ---

    def remove_arrow(self, arrow_id: str) -> list[BoardEvent]:
        """Delete an arrow. Only allowed in draw mode; unknown ids change nothing."""
        if self.mode != MODE_DRAW or not self.is_idle:
            return []
        if not self.arrows.remove(arrow_id):
            return []
        events: list[BoardEvent] = [ArrowRemoved(arrow_id)]
        self._emit(events)
        return events

    def clear_arrows(self) -> list[BoardEvent]:
        if not self.is_idle:
            return []
        events: list[BoardEvent] = [ArrowRemoved(arrow_id) for arrow_id in self.arrows.clear()]
        self._emit(events)
        return events

    def promote(self, token_id: int) -> list[BoardEvent]:
        """Send a bench token to the centre of the pitch."""
        if not self.is_idle or self.roster.zone_of(token_id) != BENCH:
            return []
        self.roster.place_on_surface(token_id, DEFAULT_POSITION)
        events: list[BoardEvent] = [Transferred(token_id, BENCH, SURFACE, DEFAULT_POSITION)]
        self._emit(events)
        return events

    def add_token(
        self, name: str, zone: ZoneName, number: Optional[int] = None, note: str = ""
    ) -> Optional[Token]:
        """Create a user-made token in a zone."""
        if not self.is_idle:
            return None
        token = Token(
            id=self.roster.next_id(),
            number=number if number is not None else self.roster.next_number(),
            name=name,
            note=note,
            is_manual=True,
        )
        self.roster.add_token(token, zone)
        self._emit([TokenAdded(token, zone)])
        return token

    def _emit(self, events: list[BoardEvent]):
        for event in events:
            logger.debug("Commit: %s", event)
        if events and self.on_events is not None:
            self.on_events(events)


def _clamp_percent(point: tuple[float, float]) -> tuple[float, float]:
    return (max(0.0, min(100.0, point[0])), max(0.0, min(100.0, point[1])))
