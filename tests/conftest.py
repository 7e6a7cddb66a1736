"""Shared pytest fixtures for board tests."""

import os
from unittest.mock import Mock

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
from pygame import Rect  # noqa: E402

from board.controllers.board_state import BoardState  # noqa: E402
from board.controllers.interaction_engine import InteractionEngine  # noqa: E402
from board.controllers.pointer_capture import PointerCapture  # noqa: E402
from board.controllers.view_state import FieldView  # noqa: E402
from board.controllers.zone_bounds import ZoneBoundsTracker  # noqa: E402
from lineup.core.annotations import ArrowSet  # noqa: E402
from lineup.formats.roster_data import TeamRoster, Token  # noqa: E402


@pytest.fixture
def mock_pygame():
    """Initialize pygame for tests."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def surface_rect():
    """500x500 pitch: one percent is exactly five pixels."""
    return Rect(100, 50, 500, 500)


@pytest.fixture
def bench_rect():
    return Rect(100, 600, 500, 100)


@pytest.fixture
def zones(surface_rect, bench_rect):
    return ZoneBoundsTracker(surface_rect, bench_rect)


@pytest.fixture
def to_screen(surface_rect):
    """Percent -> screen pixel conversion for the test pitch."""
    return FieldView(surface_rect).percent_to_screen


@pytest.fixture
def roster():
    """
    Small roster:
        pitch: 3 "Carl Cole" at (50, 50), 4 "Dan Drew" at (80, 20)
        bench: 1 "Al Ames", 5 "Ed Earl"
    """
    return TeamRoster(
        "Home",
        surface=[
            Token(3, 8, "Carl Cole", (50.0, 50.0)),
            Token(4, 9, "Dan Drew", (80.0, 20.0), note="Left foot"),
        ],
        bench=[
            Token(1, 12, "Al Ames"),
            Token(5, 14, "Ed Earl"),
        ],
    )


@pytest.fixture
def arrows():
    return ArrowSet()


@pytest.fixture
def capture():
    return PointerCapture()


@pytest.fixture
def on_events():
    return Mock()


@pytest.fixture
def engine(roster, arrows, zones, capture, on_events):
    return InteractionEngine(roster, arrows, zones, capture=capture, on_events=on_events)


@pytest.fixture
def board_state():
    return BoardState()
