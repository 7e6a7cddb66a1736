"""
Pitch Board - Board Package

A Pygame-based tactics board: drag players between the pitch and the
bench, swap them, and sketch movement arrows.
"""

from .application import BoardApplication
from .main import main

__all__ = ["BoardApplication", "main"]
