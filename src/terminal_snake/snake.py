"""Snake body and movement directions."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator

from terminal_snake.grid import Position


class Direction(enum.Enum):
    """Cardinal movement directions with (row_delta, col_delta) values."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def opposite(self) -> Direction:
        """The direction that would cause an instant 180° reversal."""
        return _OPPOSITES[self]


_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (row, col) segments.

    The tail is ``body[0]``; the head is ``body[-1]``. New heads are
    appended on the right and the tail leaves from the left.
    """

    def __init__(self, segments: Iterable[Position]) -> None:
        self.body: deque[Position] = deque(segments)
        if not self.body:
            raise ValueError("Snake length must be at least 1.")

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.body[-1]

    @property
    def tail(self) -> Position:
        """Return the tail coordinate."""
        return self.body[0]

    def advance(self, new_head: Position, grow: bool = False) -> Position | None:
        """Move the head to *new_head*.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.append(new_head)
        if grow:
            return None
        return self.body.popleft()

    def occupies(self, cell: Position) -> bool:
        """Check whether the snake occupies a given cell."""
        return cell in self.body

    def __len__(self) -> int:
        return len(self.body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self.body)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {"body": [list(seg) for seg in self.body]}
