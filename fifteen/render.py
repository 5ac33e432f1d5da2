from typing import Optional

from termcolor import colored

from fifteen.core.engine import PuzzleEngine
from fifteen.core.game_state import GameState

BLANK_PLACEHOLDER = "_"


class BoardRenderer:
    """Render a :class:`GameState` as a box-drawn text grid.

    Every cell is a right-aligned field as wide as the largest tile, and the
    blank is drawn as ``_`` instead of ``0``.  With colour on, tiles next to
    the blank are highlighted in yellow and tiles already on their goal cell
    in green.
    """

    def __init__(self, engine: Optional[PuzzleEngine] = None, color: bool = True):
        self.engine = engine or PuzzleEngine()
        self.color = color
        self._formats: dict[tuple[int, int], str] = {}

    @staticmethod
    def cell_width(size: int) -> int:
        return len(str(size * size - 1))

    def render(self, state: GameState) -> str:
        size = state.size
        width = self.cell_width(size)
        form = self._get_visualize_format(size, width)
        movable = set(self.engine.movable_tiles(state)) if self.color else set()

        cells = []
        for row in range(size):
            for col in range(size):
                value = int(state.board[row, col])
                cells.append(self._format_cell(value, row * size + col + 1, width, movable))
        return form.format(*cells)

    def _format_cell(self, value: int, goal_value: int, width: int, movable: set) -> str:
        if value == 0:
            return BLANK_PLACEHOLDER.rjust(width)
        text = f"{value:>{width}d}"
        if not self.color:
            return text
        if value in movable:
            return colored(text, "light_yellow", force_color=True)
        if value == goal_value:
            return colored(text, "green", force_color=True)
        return text

    def _get_visualize_format(self, size: int, width: int) -> str:
        key = (size, width)
        if key not in self._formats:
            bar = "━" * (width + 2)
            cell = " {:s} "
            lines = ["┏" + "┳".join([bar] * size) + "┓"]
            for i in range(size):
                lines.append("┃" + "┃".join([cell] * size) + "┃")
                if i != size - 1:
                    lines.append("┣" + "╋".join([bar] * size) + "┫")
            lines.append("┗" + "┻".join([bar] * size) + "┛")
            self._formats[key] = "\n".join(lines)
        return self._formats[key]
