"""
Pitch Board - Core Module

Layout, interaction and color constants.
"""

from . import constants

__all__ = ["constants"]
