"""Food and poison spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Collection

import numpy as np

from terminal_snake.grid import Position

logger = logging.getLogger(__name__)


class GridFullError(RuntimeError):
    """Raised when every cell of the grid is excluded from spawning."""


def spawn_free(
    grid_size: int,
    occupied: Collection[Position],
    forbidden: Position | None,
    rng: np.random.Generator,
) -> Position:
    """Pick a uniformly random cell outside *occupied* and not *forbidden*.

    Candidates are drawn by rejection sampling. Raises
    :class:`GridFullError` up front when no cell is left to draw.
    """
    excluded = set(occupied)
    if forbidden is not None:
        excluded.add(forbidden)
    on_grid = sum(
        1 for row, col in excluded
        if 0 <= row < grid_size and 0 <= col < grid_size
    )
    if on_grid >= grid_size * grid_size:
        raise GridFullError(
            f"No free cell left on the {grid_size}x{grid_size} grid."
        )

    while True:
        row, col = rng.integers(0, grid_size, size=2).tolist()
        if (row, col) not in excluded:
            return row, col


class FoodSpawner:
    """Places food and poison on the grid.

    Uses a seeded NumPy RNG for deterministic, reproducible placement.
    """

    def __init__(
        self,
        grid_size: int,
        rng: np.random.Generator | None = None,
    ) -> None:
        if grid_size < 1:
            raise ValueError("grid_size must be at least 1.")
        self.grid_size = grid_size
        self.rng = rng if rng is not None else np.random.default_rng()

    def spawn_free(
        self, occupied: Collection[Position], forbidden: Position | None,
    ) -> Position:
        """Return a free cell; see :func:`spawn_free`."""
        pos = spawn_free(self.grid_size, occupied, forbidden, self.rng)
        logger.debug("Spawned item at %s.", pos)
        return pos
