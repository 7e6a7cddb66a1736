"""Unit tests for EventHandler pointer routing, touch input and shortcuts."""

from unittest.mock import Mock, patch

import pygame
import pytest

from board.controllers.event_handler import EventHandler
from board.rendering.bench_renderer import BenchRenderer
from board.tools.base_tool import ToolContext
from board.tools.tool_manager import create_default_tools
from board.ui.widgets import Button
from lineup.formats.roster_data import BENCH, SURFACE, Token

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 800


class MockEvent:
    """Mock pygame event."""

    def __init__(self, type, **kwargs):
        self.type = type
        for k, v in kwargs.items():
            setattr(self, k, v)


@pytest.fixture
def at(to_screen):
    """Integer screen position of a pitch percentage point."""

    def convert(point):
        x, y = to_screen(point)
        return (round(x), round(y))

    return convert


@pytest.fixture
def tool_context(engine, board_state, zones):
    return ToolContext(engine, board_state, zones)


@pytest.fixture
def tool_manager(tool_context):
    manager = create_default_tools()
    manager.set_active_tool("move", tool_context)
    return manager


@pytest.fixture
def load_button():
    return Button(pygame.Rect(10, 5, 60, 30), "Load", Mock())


@pytest.fixture
def event_handler(mock_pygame, board_state, capture, tool_manager, tool_context, load_button):
    """Create EventHandler with mock callbacks."""
    handler = EventHandler(
        state=board_state,
        capture=capture,
        tool_manager=tool_manager,
        tool_context=tool_context,
        buttons=[load_button],
        screen_width=SCREEN_WIDTH,
        screen_height=SCREEN_HEIGHT,
        on_load=Mock(),
        on_save=Mock(),
        on_toggle_side=Mock(),
        on_resize=Mock(),
    )
    with patch("pygame.key.get_mods", return_value=0):
        yield handler


def mouse_down(pos, button=1):
    return MockEvent(pygame.MOUSEBUTTONDOWN, pos=pos, button=button)


def mouse_move(pos):
    return MockEvent(pygame.MOUSEMOTION, pos=pos, rel=(0, 0), buttons=(1, 0, 0))


def mouse_up(pos, button=1):
    return MockEvent(pygame.MOUSEBUTTONUP, pos=pos, button=button)


def finger(type, finger_id, pos):
    return MockEvent(
        type, finger_id=finger_id, x=pos[0] / SCREEN_WIDTH, y=pos[1] / SCREEN_HEIGHT
    )


class TestMouseGestures:
    """A mouse drag reaches the engine through the pointer capture."""

    def test_drag_pitch_token_to_bench(self, event_handler, engine, roster, on_events, at):
        start = at((50, 50))
        event_handler.handle_events([mouse_down(start)])
        assert engine.dragging_token_id == 3

        event_handler.handle_events([mouse_move((300, 650)), mouse_up((300, 650))])

        assert roster.zone_of(3) == BENCH
        assert engine.is_idle
        on_events.assert_called_once()

    def test_motion_outside_zones_still_tracked(self, event_handler, engine, roster, at):
        event_handler.handle_events([mouse_down(at((50, 50)))])
        event_handler.handle_events([mouse_move((900, 300))])

        assert roster.get(3).position[0] == 98.0

    def test_down_ignored_while_captured(self, event_handler, engine, at):
        event_handler.handle_events([mouse_down(at((50, 50)))])
        event_handler.handle_events([mouse_down(at((80, 20)))])

        assert engine.dragging_token_id == 3

    def test_right_button_up_does_not_finish(self, event_handler, engine, at):
        event_handler.handle_events([mouse_down(at((50, 50)))])
        event_handler.handle_events([mouse_up(at((60, 60)), button=3)])

        assert not engine.is_idle

    def test_toolbar_click_not_forwarded(self, event_handler, engine, load_button):
        event_handler.handle_events([mouse_down((20, 10))])

        load_button.callback.assert_called_once()
        assert engine.is_idle

    def test_touch_emulated_mouse_ignored(self, event_handler, engine, at):
        event = MockEvent(pygame.MOUSEBUTTONDOWN, pos=at((50, 50)), button=1, touch=True)
        event_handler.handle_events([event])

        assert engine.is_idle


class TestTouch:
    """Finger events are normalized to window pixels."""

    def test_finger_drag_bench_to_pitch(self, event_handler, engine, roster, at):
        drop = at((30, 30))
        event_handler.handle_events([finger(pygame.FINGERDOWN, 7, (132, 638))])
        assert engine.dragging_token_id == 1

        event_handler.handle_events(
            [finger(pygame.FINGERMOTION, 7, drop), finger(pygame.FINGERUP, 7, drop)]
        )

        assert roster.zone_of(1) == SURFACE
        assert roster.get(1).position == pytest.approx((30, 30), abs=0.3)
        assert event_handler.active_finger is None

    def test_second_finger_ignored(self, event_handler, engine, roster, at):
        event_handler.handle_events([finger(pygame.FINGERDOWN, 1, at((50, 50)))])
        event_handler.handle_events(
            [
                finger(pygame.FINGERDOWN, 2, at((80, 20))),
                finger(pygame.FINGERMOTION, 2, (300, 650)),
                finger(pygame.FINGERUP, 2, (300, 650)),
            ]
        )

        assert engine.dragging_token_id == 3
        assert roster.zone_of(3) == SURFACE
        assert event_handler.active_finger == 1

    def test_finger_on_toolbar_button(self, event_handler, engine, load_button):
        event_handler.handle_events([finger(pygame.FINGERDOWN, 1, (20, 10))])

        load_button.callback.assert_called_once()
        assert engine.is_idle


class TestCancellation:
    """Window events abort the gesture without committing."""

    @pytest.mark.parametrize("event_type", ["WINDOWFOCUSLOST", "WINDOWLEAVE"])
    def test_window_event_cancels(self, event_handler, engine, roster, on_events, at, event_type):
        event_handler.handle_events(
            [mouse_down(at((50, 50))), mouse_move(at((70, 70)))]
        )
        event_handler.handle_events([MockEvent(getattr(pygame, event_type))])

        assert engine.is_idle
        assert roster.get(3).position == (50.0, 50.0)
        on_events.assert_not_called()

    def test_escape_cancels_gesture(self, event_handler, engine, capture, at):
        event_handler.handle_events([mouse_down(at((50, 50)))])
        event_handler.handle_events([MockEvent(pygame.KEYDOWN, key=pygame.K_ESCAPE)])

        assert engine.is_idle
        assert not capture.active

    def test_quit_cancels_and_stops(self, event_handler, engine, at):
        event_handler.handle_events([mouse_down(at((50, 50)))])

        assert event_handler.handle_events([MockEvent(pygame.QUIT)]) is False
        assert engine.is_idle

    def test_cancel_when_idle(self, event_handler):
        assert event_handler.cancel_gesture() is False


class TestShortcuts:
    def test_ctrl_s_saves(self, event_handler):
        with patch("pygame.key.get_mods", return_value=pygame.KMOD_CTRL):
            event_handler.handle_events([MockEvent(pygame.KEYDOWN, key=pygame.K_s)])

        event_handler.on_save.assert_called_once()

    def test_ctrl_o_loads(self, event_handler):
        with patch("pygame.key.get_mods", return_value=pygame.KMOD_CTRL):
            event_handler.handle_events([MockEvent(pygame.KEYDOWN, key=pygame.K_o)])

        event_handler.on_load.assert_called_once()

    def test_tab_toggles_side(self, event_handler):
        event_handler.handle_events([MockEvent(pygame.KEYDOWN, key=pygame.K_TAB)])

        event_handler.on_toggle_side.assert_called_once()

    def test_a_toggles_arrows(self, event_handler, board_state):
        event_handler.handle_events([MockEvent(pygame.KEYDOWN, key=pygame.K_a)])

        assert not board_state.show_arrows

    def test_tool_hotkey(self, event_handler, engine):
        event_handler.handle_events([MockEvent(pygame.KEYDOWN, key=pygame.K_d)])

        assert event_handler.tool_manager.get_active_tool_name() == "draw"
        assert engine.mode == "draw"

    def test_unhandled_key_goes_to_tool(self, event_handler, board_state):
        board_state.select_token(3)
        event_handler.handle_events([MockEvent(pygame.KEYDOWN, key=pygame.K_ESCAPE)])

        assert board_state.selected_token_id is None

    def test_wheel_over_bench_scrolls_it(self, event_handler, roster, board_state):
        for token_id in range(10, 18):
            roster.add_token(Token(token_id, token_id, f"Sub {token_id}"), BENCH)
        wheel_down = MockEvent(pygame.MOUSEWHEEL, x=0, y=-1)

        with patch("pygame.mouse.get_pos", return_value=(300, 650)):
            event_handler.handle_events([wheel_down])
        assert board_state.bench_scroll == BenchRenderer.slot_pitch(False)

        with patch("pygame.mouse.get_pos", return_value=(300, 300)):
            event_handler.handle_events([MockEvent(pygame.MOUSEWHEEL, x=0, y=1)])
        assert board_state.bench_scroll == BenchRenderer.slot_pitch(False)

    def test_resize(self, event_handler):
        event_handler.handle_events([MockEvent(pygame.VIDEORESIZE, w=640, h=480)])

        event_handler.on_resize.assert_called_once_with(640, 480)

    def test_tool_message_reaches_status(self, event_handler, roster):
        event_handler.handle_events([mouse_down((132, 638), button=3)])

        assert "Al Ames" in event_handler.state.status_message
        assert roster.zone_of(1) == SURFACE
