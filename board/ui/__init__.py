"""
Pitch Board - UI Module

UI components including widgets, the toolbar, and file dialogs.
"""

from .dialogs import ask_open_board_path, ask_save_board_path
from .toolbar import Toolbar, ToolbarCallbacks
from .widgets import Button

__all__ = [
    "Button",
    "Toolbar",
    "ToolbarCallbacks",
    "ask_open_board_path",
    "ask_save_board_path",
]
