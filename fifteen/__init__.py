"""
fifteen: the Game of Fifteen on an N x N board.

The rules engine lives in :mod:`fifteen.core`; rendering, move logging and
the interactive session are thin layers on top of it.
"""

from fifteen.core import (
    DIM_MAX,
    DIM_MIN,
    GameState,
    InvalidDimension,
    Position,
    PuzzleEngine,
)
from fifteen.movelog import LogMismatch, MoveLog, read_log, replay_log
from fifteen.render import BoardRenderer
from fifteen.session import GameSession, SessionConfig

__version__ = "0.1.0"

__all__ = [
    # Core
    "PuzzleEngine",
    "GameState",
    "InvalidDimension",
    "Position",
    "DIM_MIN",
    "DIM_MAX",
    # Collaborators
    "BoardRenderer",
    "MoveLog",
    "LogMismatch",
    "read_log",
    "replay_log",
    "GameSession",
    "SessionConfig",
]
