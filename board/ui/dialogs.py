"""
Pitch Board - File Dialogs

Open/save dialogs for board files, using plyer with a tkinter fallback.
"""

import logging

from plyer import filechooser

logger = logging.getLogger(__name__)

BOARD_FILETYPES = [("Board files", "*.json"), ("All files", "*.*")]


def _ask_tkinter(save: bool, title: str) -> str | None:
    """Tkinter fallback when no plyer backend is available."""
    try:
        import tkinter as tk
        from tkinter import filedialog
    except ImportError:
        logger.warning("No file dialog backend available (plyer failed, tkinter missing)")
        return None

    root = tk.Tk()
    root.withdraw()
    try:
        if save:
            path = filedialog.asksaveasfilename(
                title=title, defaultextension=".json", filetypes=BOARD_FILETYPES
            )
        else:
            path = filedialog.askopenfilename(title=title, filetypes=BOARD_FILETYPES)
    finally:
        root.destroy()
    return path or None


def ask_open_board_path(title: str = "Open Board") -> str | None:
    """
    Ask the user for a board file to open.

    Returns:
        Selected file path, or None if canceled
    """
    try:
        result = filechooser.open_file(title=title, filters=BOARD_FILETYPES)
    except (OSError, NotImplementedError):
        return _ask_tkinter(False, title)
    return result[0] if result else None


def ask_save_board_path(title: str = "Save Board") -> str | None:
    """
    Ask the user where to save the board; ".json" is appended if missing.

    Returns:
        Selected file path, or None if canceled
    """
    try:
        result = filechooser.save_file(title=title, filters=BOARD_FILETYPES)
    except (OSError, NotImplementedError):
        return _ask_tkinter(True, title)
    if not result:
        return None
    path = result[0]
    if not path.endswith(".json"):
        path += ".json"
    return path
