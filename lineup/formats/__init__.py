"""
Pitch Board - Lineup Formats

Token and roster data model plus JSON persistence.
"""

from .roster_data import (
    BENCH,
    SIDES,
    SURFACE,
    BoardData,
    RosterFormatError,
    TeamRoster,
    Token,
)

__all__ = [
    "BENCH",
    "SIDES",
    "SURFACE",
    "BoardData",
    "RosterFormatError",
    "TeamRoster",
    "Token",
]
