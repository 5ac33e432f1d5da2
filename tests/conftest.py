import pytest

from fifteen.core.engine import PuzzleEngine
from fifteen.core.game_state import GameState


@pytest.fixture
def engine():
    """Provide a fresh rules engine."""
    return PuzzleEngine()


@pytest.fixture
def nearly_won_state():
    """3x3 board one move (tile 8) away from the goal."""
    return GameState.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])


class ScriptedInput:
    """Input source that replays a fixed list of tiles."""

    def __init__(self, tiles):
        self.tiles = list(tiles)
        self.calls = 0

    def read_tile(self) -> int:
        self.calls += 1
        return self.tiles.pop(0)


@pytest.fixture
def scripted_input():
    return ScriptedInput
