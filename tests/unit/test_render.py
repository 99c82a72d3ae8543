"""
Unit tests for text rendering.
"""
from minesweeper import Board, render_ascii, render_board
from minesweeper.render import BANNERS, TITLE, render_rows


class TestRender:
    """Test glyphs, cursor and banners."""

    def test_hidden_board(self, row_board: Board) -> None:
        """Fresh board shows only hidden glyphs."""
        rows = render_rows(row_board.snapshot())
        assert rows == ["▓▓▓▓▓"] * 3

    def test_glyphs(self, row_board: Board) -> None:
        """Numbers, zeros and marks have their glyphs."""
        row_board.cycle_mark(4, 0)
        row_board.cycle_mark(4, 2)
        row_board.cycle_mark(4, 2)
        row_board.reveal_cell(0, 0)
        rows = render_rows(row_board.snapshot())
        assert rows == ["░░░1✓", "░░░22", "░░░1?"]

    def test_mine_glyph(self, row_board: Board) -> None:
        """A revealed mine is drawn as x."""
        row_board.reveal_cell(4, 2)
        assert render_rows(row_board.snapshot())[2] == "▓▓▓▓x"

    def test_cursor_brackets(self, row_board: Board) -> None:
        """Cursor cell is wrapped in brackets."""
        row_board.move_cursor(1, 0)
        rows = render_rows(row_board.snapshot(), show_cursor=True)
        assert rows[0] == " ▓ [▓] ▓  ▓  ▓ "

    def test_screen_has_title_and_no_banner_while_playing(
        self, row_board: Board
    ) -> None:
        """Playing screens have no banner."""
        screen = render_board(row_board.snapshot())
        assert screen.splitlines()[0] == TITLE
        for banner in BANNERS.values():
            assert banner not in screen

    def test_lose_banner(self, row_board: Board) -> None:
        """Losing shows the game over banner."""
        row_board.reveal_cell(4, 0)
        assert render_board(row_board.snapshot()).endswith(
            "Game Over! (Press r to restart, q to quit)"
        )

    def test_win_banner(self, small_board: Board) -> None:
        """Winning shows the congratulations banner."""
        small_board.cycle_mark(1, 1)
        small_board.reveal_cell(0, 0)
        small_board.check_win_condition()
        assert "Congratulations! You win the game!" in render_board(
            small_board.snapshot()
        )

    def test_ascii(self, row_board: Board) -> None:
        """ASCII rendering uses plain characters."""
        row_board.cycle_mark(4, 0)
        row_board.reveal_cell(3, 1)
        assert render_ascii(row_board.snapshot()).splitlines() == [
            ". . . . F",
            ". . . 2 .",
            ". . . . .",
        ]
