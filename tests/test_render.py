"""Tests for terminal rendering."""

import io

from terminal_snake.engine import GameOverReason
from terminal_snake.render import CURSOR_HOME, TerminalRenderer, render_board


class TestRenderBoard:
    def test_glyphs(self):
        board = render_board(2, [(0, 0)], (0, 1), (1, 0))
        assert board == "🐍🍎\n💀⬜"

    def test_rows_and_columns(self):
        board = render_board(4, [], None, None)
        rows = board.split("\n")
        assert len(rows) == 4
        assert all(row == "⬜" * 4 for row in rows)


class TestTerminalRenderer:
    def test_draw_frame(self):
        out = io.StringIO()
        TerminalRenderer(out).draw(
            3, [(0, 0), (0, 1)], (2, 2), (1, 1), score=20,
        )
        text = out.getvalue()
        assert text.startswith(CURSOR_HOME)
        assert "🐍🐍⬜" in text
        assert "length of snake: 2\n" in text
        assert "Score: 20\n" in text

    def test_draw_paused(self):
        out = io.StringIO()
        TerminalRenderer(out).draw_paused()
        assert "Game is Paused! Press 'p' to resume." in out.getvalue()

    def test_game_over_with_scores(self):
        out = io.StringIO()
        TerminalRenderer(out).draw_game_over(
            GameOverReason.POISON_EATEN, [30, 20],
        )
        lines = out.getvalue().splitlines()
        assert "Game Over - You ate poisonous food!" in lines[0]
        assert lines[1:] == ["--- Top 10 High Scores ---", "30", "20"]

    def test_game_over_without_scores(self):
        out = io.StringIO()
        TerminalRenderer(out).draw_game_over(GameOverReason.SELF_COLLISION, None)
        assert "Top 10" not in out.getvalue()
        assert "Game Over" in out.getvalue()

    def test_board_full_banner(self):
        out = io.StringIO()
        TerminalRenderer(out).draw_game_over(GameOverReason.BOARD_FULL, [10])
        lines = out.getvalue().splitlines()
        assert "Board full - you win!" in lines[0]
        assert lines[1:] == ["--- Top 10 High Scores ---", "10"]
