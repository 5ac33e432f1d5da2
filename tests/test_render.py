import pytest
from termcolor import colored

from fifteen.core.game_state import GameState
from fifteen.render import BoardRenderer


@pytest.fixture
def plain():
    """Provide a renderer with colour disabled."""
    return BoardRenderer(color=False)


class TestBoardRenderer:
    """Test suite for the text board renderer."""

    def test_three_by_three(self, engine, plain):
        """Test the full 3x3 starting board drawing."""
        text = plain.render(engine.initialize(3))
        assert text == "\n".join(
            [
                "┏━━━┳━━━┳━━━┓",
                "┃ 8 ┃ 7 ┃ 6 ┃",
                "┣━━━╋━━━╋━━━┫",
                "┃ 5 ┃ 4 ┃ 3 ┃",
                "┣━━━╋━━━╋━━━┫",
                "┃ 2 ┃ 1 ┃ _ ┃",
                "┗━━━┻━━━┻━━━┛",
            ]
        )

    def test_blank_is_not_drawn_as_zero(self, engine, plain):
        """Test the blank renders as a placeholder, never as 0."""
        text = plain.render(engine.initialize(3))
        assert "0" not in text
        assert "_" in text

    def test_cells_are_right_aligned(self, engine, plain):
        """Test numbers are right-aligned in two-digit fields."""
        lines = plain.render(engine.initialize(4)).splitlines()
        assert lines[1] == "┃ 15 ┃ 14 ┃ 13 ┃ 12 ┃"
        assert lines[-2] == "┃  3 ┃  1 ┃  2 ┃  _ ┃"

    @pytest.mark.parametrize("size,width", [(3, 1), (4, 2), (9, 2)])
    def test_cell_width(self, size, width):
        assert BoardRenderer.cell_width(size) == width

    @pytest.mark.parametrize("size", range(3, 10))
    def test_all_rows_have_equal_length(self, engine, plain, size):
        """Test every line of the grid has the same width."""
        lines = plain.render(engine.initialize(size)).splitlines()
        assert len(lines) == 2 * size + 1
        assert len({len(line) for line in lines}) == 1

    def test_render_follows_moves(self, engine, plain):
        """Test the drawing reflects a move."""
        state = engine.initialize(3)
        engine.apply_move(state, 1)
        assert plain.render(state).splitlines()[5] == "┃ 2 ┃ _ ┃ 1 ┃"

    def test_movable_tiles_are_highlighted(self, engine):
        """Test tiles next to the blank are drawn in yellow."""
        text = BoardRenderer(engine, color=True).render(engine.initialize(3))
        assert colored("1", "light_yellow", force_color=True) in text
        assert colored("3", "light_yellow", force_color=True) in text
        assert colored("8", "light_yellow", force_color=True) not in text

    def test_placed_tiles_are_green(self, engine):
        """Test tiles on their goal cell are drawn in green."""
        state = GameState.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
        text = BoardRenderer(engine, color=True).render(state)
        assert colored("1", "green", force_color=True) in text
        assert colored("8", "light_yellow", force_color=True) in text
        assert colored("8", "green", force_color=True) not in text
