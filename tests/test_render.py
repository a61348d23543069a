"""
Terminal renderers, palette cycling and the matplotlib board renderer.
"""
import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import matplotlib.patches as patches
import pytest

from core.board import Board
from render.board_figure import EMPTY_FACECOLOR, BoardFigureRenderer
from render.palette import DEFAULT_PALETTE, palette_entry
from render.terminal import UNCONNECTED_MARKER, render_flow, render_flows, render_grid


def test_palette_has_eight_read_only_entries():
    assert len(DEFAULT_PALETTE) == 8
    with pytest.raises(AttributeError):
        DEFAULT_PALETTE[0].background = 41


@pytest.mark.parametrize("value, name", [(1, "red"), (7, "white"), (8, "black"), (9, "red")])
def test_palette_cycles_by_value_mod_eight(value, name):
    assert palette_entry(value).name == name


def test_render_grid_from_nested_lists():
    text = render_grid([[0, 3, 0]], use_color=False)
    assert text == "\n+---+---+---+\n|   | 3 |   |\n+---+---+---+\n"


def test_render_grid_paints_each_cell():
    text = render_grid([[2]])
    assert DEFAULT_PALETTE[2].paint(" 2 ") in text


def test_render_flow_marks_broken_chain():
    assert render_flow([(0, 0), (0, 1)], True) == "(0,0)->(0,1)"
    assert render_flow([(0, 0), (2, 2)], False) == f"(0,0)->{UNCONNECTED_MARKER}(2,2)"
    assert render_flows([([(1, 1), (1, 2)], True), ([(0, 0), (0, 2)], False)]) == (
        "(1,1)->(1,2)\n(0,0)->[???]->(0,2)\n"
    )


class TestBoardFigureRenderer:

    @pytest.fixture
    def board(self, plain_config):
        return Board.from_text("2,3\n0,0 0,2\n1,0 1,1\n", plain_config)

    def test_render_board_draws_every_cell_and_terminal(self, board):
        fig, ax = plt.subplots()
        try:
            renderer = BoardFigureRenderer()
            assert renderer.render_board(board, ax) is ax

            rects = [p for p in ax.patches if isinstance(p, patches.Rectangle)]
            rings = [p for p in ax.patches if isinstance(p, patches.Circle)]
            assert len(rects) == board.lines() * board.cols()
            assert len(rings) == 2 * board.flow_count()
            assert len(ax.lines) == board.flow_count()
            assert sorted(t.get_text() for t in ax.texts) == ["1", "1", "2", "2"]
        finally:
            plt.close(fig)

    def test_empty_cells_are_white(self):
        renderer = BoardFigureRenderer()
        assert renderer.facecolor(0) == EMPTY_FACECOLOR
        assert renderer.facecolor(1) == DEFAULT_PALETTE[1].rgb

    def test_row_zero_is_drawn_on_top(self, board):
        fig, ax = plt.subplots()
        try:
            BoardFigureRenderer(cell_size=2.0).render_board(board, ax)
            bottom, top = ax.get_ylim()
            assert bottom > top
        finally:
            plt.close(fig)

    def test_save_writes_image(self, board, tmp_path):
        out = tmp_path / "board.png"
        BoardFigureRenderer().save(board, str(out))
        assert out.exists() and out.stat().st_size > 0
