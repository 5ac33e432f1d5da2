from __future__ import annotations

from typing import Optional, Sequence

import chex
import numpy as np

TYPE = np.uint8

DIM_MIN = 3
DIM_MAX = 9

Position = tuple[int, int]


class InvalidDimension(ValueError):
    """Raised when a board dimension falls outside ``[DIM_MIN, DIM_MAX]``."""

    def __init__(self, size):
        self.size = size
        super().__init__(
            f"Board must be between {DIM_MIN} x {DIM_MIN} and {DIM_MAX} x {DIM_MAX}, "
            f"inclusive (got {size!r})."
        )


def check_dimension(size) -> int:
    """Return ``size`` as an int, or raise :class:`InvalidDimension`."""
    if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
        raise InvalidDimension(size)
    if not DIM_MIN <= size <= DIM_MAX:
        raise InvalidDimension(size)
    return int(size)


@chex.dataclass(eq=False)
class GameState:
    """Board of a single game of fifteen.

    The board is an ``(size, size)`` array where ``0`` marks the blank cell and
    every other value in ``[1, size² - 1]`` appears exactly once.  A state is
    owned by one session and only mutated by :class:`~fifteen.core.engine.PuzzleEngine`.

    Attributes:
        board: ``uint8`` array of shape ``(size, size)``.
        size: Edge length of the board.
    """

    board: chex.Array
    size: int

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "GameState":
        """Build a state from nested rows, validating shape and tile set.

        Raises:
            InvalidDimension: If the number of rows is outside the supported range.
            ValueError: If the rows are ragged or the tiles are not a permutation
                of ``0 .. size² - 1``.
        """
        size = check_dimension(len(rows))
        if any(len(row) != size for row in rows):
            raise ValueError(f"Board rows must all have length {size}")

        board = np.asarray(rows, dtype=np.int64)
        chex.assert_shape(board, (size, size))
        expected = np.arange(size * size)
        if not np.array_equal(np.sort(board, axis=None), expected):
            raise ValueError(
                f"Board must contain each of 0..{size * size - 1} exactly once"
            )
        return cls(board=board.astype(TYPE), size=size)

    def __eq__(self, other):
        if not isinstance(other, GameState):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.board, other.board))

    def rows(self) -> tuple[tuple[int, ...], ...]:
        """Immutable snapshot of the board, row by row."""
        return tuple(tuple(int(v) for v in row) for row in self.board)

    def copy(self) -> "GameState":
        return GameState(board=self.board.copy(), size=self.size)

    def tile_at(self, position: Position) -> Optional[int]:
        row, col = position
        if not (0 <= row < self.size and 0 <= col < self.size):
            return None
        return int(self.board[row, col])
