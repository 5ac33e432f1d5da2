from typing import Optional

import jax
import jax.numpy as jnp
import numpy as np

from fifteen.core.game_state import (
    DIM_MAX,
    DIM_MIN,
    TYPE,
    GameState,
    Position,
    check_dimension,
)

# Orthogonal neighbours only: up, down, left, right.
NEIGHBOUR_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@jax.jit
def _solvable(board: jnp.ndarray) -> jnp.ndarray:
    """Inversion-parity test relative to the row-major goal, blank excluded."""
    size = board.shape[0]
    flat = board.reshape(-1).astype(jnp.int32)
    nonzero = flat != 0
    later = jnp.triu(jnp.ones((size * size, size * size), dtype=bool), k=1)
    inversions = (flat[:, None] > flat[None, :]) & nonzero[:, None] & nonzero[None, :] & later
    inv_count = jnp.sum(inversions)
    if size % 2 == 1:
        return inv_count % 2 == 0
    blank_row = jnp.argmax(flat == 0) // size
    return jnp.logical_xor(blank_row % 2 == 0, inv_count % 2 == 0)


class PuzzleEngine:
    """Rules of the N×N game of fifteen.

    The engine holds no board of its own: every operation receives the
    :class:`GameState` it works on.  ``apply_move`` is the only mutating
    operation and either performs the whole move or leaves the board untouched.

    Attributes:
        DIM_MIN: Smallest supported edge length.
        DIM_MAX: Largest supported edge length.
    """

    DIM_MIN = DIM_MIN
    DIM_MAX = DIM_MAX

    def initialize(self, n: int) -> GameState:
        """Build the starting layout for an ``n`` × ``n`` game.

        Tiles are laid out in descending row-major order with the blank in the
        bottom-right corner.  For even ``n`` that layout is an unsolvable
        permutation, so the two tiles left of the blank are swapped.

        Raises:
            InvalidDimension: If ``n`` is outside ``[DIM_MIN, DIM_MAX]``.
        """
        size = check_dimension(n)
        board = np.arange(size * size - 1, -1, -1, dtype=TYPE).reshape(size, size)
        if size % 2 == 0:
            last = size - 1
            board[last, size - 2], board[last, size - 3] = (
                board[last, size - 3],
                board[last, size - 2],
            )
        return GameState(board=board, size=size)

    def goal(self, n: int) -> GameState:
        size = check_dimension(n)
        return GameState(board=self._goal_board(size), size=size)

    def apply_move(self, state: GameState, tile: int) -> bool:
        """Slide ``tile`` into the blank if it is orthogonally adjacent to it.

        Args:
            state: Game state to mutate.
            tile: Value of the tile to move.

        Returns:
            ``True`` if the tile moved, ``False`` if the move is illegal (the
            tile is absent, out of range or not next to the blank).  An illegal
            move leaves the board unchanged.
        """
        position = self.find_tile(state, tile)
        if position is None:
            return False
        blank = self.blank_position(state)

        row, col = position
        blank_row, blank_col = blank
        if abs(row - blank_row) + abs(col - blank_col) != 1:
            return False

        state.board[blank_row, blank_col] = state.board[row, col]
        state.board[row, col] = 0
        return True

    def is_won(self, state: GameState) -> bool:
        """``True`` iff the board reads ``1, 2, ..., size² - 1, 0`` row by row."""
        return bool(np.array_equal(state.board, self._goal_board(state.size)))

    def is_solvable(self, state: GameState) -> bool:
        return bool(_solvable(jnp.asarray(state.board)))

    def blank_position(self, state: GameState) -> Position:
        position = self._locate(state, 0)
        if position is None:
            raise ValueError("Board has no blank cell")
        return position

    def find_tile(self, state: GameState, tile: int) -> Optional[Position]:
        """Position of ``tile`` on the board, or ``None`` if it is not a tile value."""
        if not 1 <= tile <= state.size * state.size - 1:
            return None
        return self._locate(state, tile)

    def movable_tiles(self, state: GameState) -> tuple[int, ...]:
        """Tiles that can legally move, i.e. the blank's orthogonal neighbours."""
        blank_row, blank_col = self.blank_position(state)
        tiles = []
        for d_row, d_col in NEIGHBOUR_OFFSETS:
            value = state.tile_at((blank_row + d_row, blank_col + d_col))
            if value is not None:
                tiles.append(value)
        return tuple(sorted(tiles))

    def _locate(self, state: GameState, value: int) -> Optional[Position]:
        matches = np.argwhere(state.board == value)
        if len(matches) == 0:
            return None
        row, col = matches[0]
        return int(row), int(col)

    @staticmethod
    def _goal_board(size: int) -> np.ndarray:
        return np.array([*range(1, size * size), 0], dtype=TYPE).reshape(size, size)
