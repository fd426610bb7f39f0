"""Emoji board rendering for ANSI terminals."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from terminal_snake.engine import GameOverReason
from terminal_snake.grid import CellType, Position, paint_board

GLYPHS: dict[CellType, str] = {
    CellType.EMPTY: "⬜",
    CellType.SNAKE: "🐍",
    CellType.FOOD: "🍎",
    CellType.POISON: "💀",
}

CURSOR_HOME = "\033[H"
CLEAR_SCREEN = "\033[2J\033[H"

_GAME_OVER_BANNERS: dict[GameOverReason, str] = {
    GameOverReason.SELF_COLLISION: "Game Over",
    GameOverReason.POISON_EATEN: "Game Over - You ate poisonous food!",
    GameOverReason.BOARD_FULL: "Board full - you win!",
}


def render_board(
    grid_size: int,
    snake: Iterable[Position],
    food: Position | None,
    poison: Position | None,
) -> str:
    """Return the board as one line of glyphs per row."""
    cells = paint_board(grid_size, snake, food, poison)
    return "\n".join(
        "".join(GLYPHS[CellType(code)] for code in row) for row in cells.tolist()
    )


class TerminalRenderer:
    """Draws frames in place by homing the cursor before each one."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdout

    def clear(self) -> None:
        self._write(CLEAR_SCREEN)

    def draw(
        self,
        grid_size: int,
        snake_cells: Sequence[Position],
        food: Position | None,
        poison: Position | None,
        *,
        score: int,
    ) -> None:
        board = render_board(grid_size, snake_cells, food, poison)
        self._write(
            f"{CURSOR_HOME}{board}\n"
            f"length of snake: {len(snake_cells)}\n"
            f"Score: {score}\n"
        )

    def draw_paused(self) -> None:
        self._write(f"{CURSOR_HOME}Game is Paused! Press 'p' to resume.\n")

    def draw_game_over(
        self, reason: GameOverReason, high_scores: Sequence[int] | None,
    ) -> None:
        lines = [_GAME_OVER_BANNERS[reason]]
        if high_scores is not None:
            lines.append("--- Top 10 High Scores ---")
            lines.extend(str(s) for s in high_scores)
        self.clear()
        self._write("\n".join(lines) + "\n")

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()
