"""
Core game components.

This module provides the board state and the rules engine of the game of fifteen.
"""

from fifteen.core.engine import PuzzleEngine
from fifteen.core.game_state import (
    DIM_MAX,
    DIM_MIN,
    GameState,
    InvalidDimension,
    Position,
)

__all__ = [
    "PuzzleEngine",
    "GameState",
    "InvalidDimension",
    "Position",
    "DIM_MIN",
    "DIM_MAX",
]
