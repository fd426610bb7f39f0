"""Toroidal grid math and board painting."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from terminal_snake.snake import Direction

Position = tuple[int, int]


class CellType(enum.IntEnum):
    """Integer codes stored in a painted board."""

    EMPTY = 0
    SNAKE = 1
    FOOD = 2
    POISON = 3


def next_position(
    current: Position, direction: Direction, grid_size: int,
) -> Position:
    """Return the cell one step from *current*, wrapping at every edge.

    Coordinates use (row, col) ordering; the grid is *grid_size* square.
    """
    dr, dc = direction.value
    row, col = current
    return (row + dr) % grid_size, (col + dc) % grid_size


def paint_board(
    grid_size: int,
    snake: Iterable[Position],
    food: Position | None,
    poison: Position | None,
) -> np.ndarray:
    """Paint snake, poison and food onto a fresh ``int8`` board.

    Later layers overwrite earlier ones, so food shows over poison and
    poison over the snake.
    """
    cells = np.full((grid_size, grid_size), CellType.EMPTY, dtype=np.int8)
    for row, col in snake:
        cells[row, col] = CellType.SNAKE
    if poison is not None:
        cells[poison] = CellType.POISON
    if food is not None:
        cells[food] = CellType.FOOD
    return cells
