"""Step-based game state composing grid math, snake and food logic."""

from __future__ import annotations

import enum
import logging
import threading
from typing import Protocol

import numpy as np

from terminal_snake.config import GameConfig
from terminal_snake.food import FoodSpawner, GridFullError
from terminal_snake.grid import Position, next_position
from terminal_snake.keys import InputEvent
from terminal_snake.scores import ScoreStoreError
from terminal_snake.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameStatus(enum.Enum):
    """Lifecycle states for a game session."""

    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    QUIT = "quit"


class GameOverReason(enum.Enum):
    """Why a session reached :attr:`GameStatus.GAME_OVER`."""

    SELF_COLLISION = "self_collision"
    POISON_EATEN = "poison_eaten"
    BOARD_FULL = "board_full"


class ScoreRecorder(Protocol):
    def record(self, score: int) -> list[int]: ...


_MOVES: dict[InputEvent, Direction] = {
    InputEvent.MOVE_UP: Direction.UP,
    InputEvent.MOVE_DOWN: Direction.DOWN,
    InputEvent.MOVE_LEFT: Direction.LEFT,
    InputEvent.MOVE_RIGHT: Direction.RIGHT,
}


class GameState:
    """Single-snake, step-based game on a toroidal grid.

    The state owns the snake, food, poison and score. Each call to
    :meth:`step` advances the game by one tick and returns the updated
    state dictionary.

    Direction, pause and quit may be changed from another activity while
    the game runs; those controls are guarded by a lock and the last
    write before a tick starts is the one that tick sees.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        score_store: ScoreRecorder | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.grid_size = self.config.grid_size
        self.score_store = score_store
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

        self.snake = Snake([(0, 0)])
        self.spawner = FoodSpawner(self.grid_size, rng=self.rng)
        self.food: Position | None = None
        self.poison: Position | None = None
        self.food = self.spawner.spawn_free(self.snake.body, self.poison)
        self.poison = self.spawner.spawn_free(self.snake.body, self.food)

        self.score = 0
        self.tick = 0
        self.tick_ms = self.config.tick_ms
        self.reason: GameOverReason | None = None
        self.high_scores: list[int] | None = None
        self.record_error: ScoreStoreError | None = None

        self._controls = threading.Lock()
        self._direction = Direction.RIGHT
        self._status = GameStatus.RUNNING

    # --- controls shared with the input listener ---

    @property
    def direction(self) -> Direction:
        with self._controls:
            return self._direction

    @property
    def status(self) -> GameStatus:
        with self._controls:
            return self._status

    @property
    def paused(self) -> bool:
        return self.status == GameStatus.PAUSED

    @property
    def finished(self) -> bool:
        return self.status in (GameStatus.GAME_OVER, GameStatus.QUIT)

    def set_direction(self, direction: Direction) -> bool:
        """Turn the snake, ignoring 180° reversals.

        Returns True if the new direction was applied.
        """
        with self._controls:
            if direction == self._direction.opposite:
                return False
            self._direction = direction
            return True

    def toggle_pause(self) -> None:
        """Flip between running and paused; no effect once finished."""
        with self._controls:
            if self._status == GameStatus.RUNNING:
                self._status = GameStatus.PAUSED
            elif self._status == GameStatus.PAUSED:
                self._status = GameStatus.RUNNING

    def quit(self) -> None:
        """End the session at the player's request without recording."""
        with self._controls:
            if self._status not in (GameStatus.RUNNING, GameStatus.PAUSED):
                return
            self._status = GameStatus.QUIT
        logger.info("Player quit at tick %d with score %d.", self.tick, self.score)

    def apply(self, event: InputEvent) -> None:
        """Route an input event to the matching control."""
        if event is InputEvent.TOGGLE_PAUSE:
            self.toggle_pause()
        elif event is InputEvent.QUIT:
            self.quit()
        else:
            self.set_direction(_MOVES[event])

    # --- simulation ---

    def step(self) -> dict:
        """Advance the game by one tick.

        Returns the full game state as a serializable dict. Paused and
        finished games are returned unchanged.
        """
        with self._controls:
            status = self._status
            direction = self._direction
        if status != GameStatus.RUNNING:
            return self.get_state()

        head = next_position(self.snake.head, direction, self.grid_size)

        if self.snake.occupies(head):
            self._game_over(GameOverReason.SELF_COLLISION)
        elif head == self.poison:
            self._game_over(GameOverReason.POISON_EATEN)
        elif head == self.food:
            self.snake.advance(head, grow=True)
            self.score += self.config.food_reward
            self.tick_ms = max(
                self.config.min_tick_ms, self.tick_ms - self.config.tick_step_ms,
            )
            logger.debug(
                "Food eaten at %s; score %d, tick %d ms.",
                head, self.score, self.tick_ms,
            )
            try:
                self.food = self.spawner.spawn_free(self.snake.body, self.poison)
            except GridFullError:
                self.food = None
                self._game_over(GameOverReason.BOARD_FULL)
        else:
            self.snake.advance(head)

        self.tick += 1
        return self.get_state()

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        return {
            "tick": self.tick,
            "grid_size": self.grid_size,
            "score": self.score,
            "tick_ms": self.tick_ms,
            "status": self.status.value,
            "reason": self.reason.value if self.reason else None,
            "direction": self.direction.name.lower(),
            "snake": self.snake.to_dict(),
            "food": list(self.food) if self.food else None,
            "poison": list(self.poison) if self.poison else None,
            "high_scores": self.high_scores,
        }

    def _game_over(self, reason: GameOverReason) -> None:
        """End the game and record the final score exactly once."""
        with self._controls:
            if self._status not in (GameStatus.RUNNING, GameStatus.PAUSED):
                return
            self._status = GameStatus.GAME_OVER
        self.reason = reason
        logger.info(
            "Game over (%s) at tick %d with score %d.",
            reason.value, self.tick, self.score,
        )
        if self.score_store is None:
            return
        try:
            self.high_scores = self.score_store.record(self.score)
        except ScoreStoreError as exc:
            self.record_error = exc
            logger.error("Failed to record score %d: %s", self.score, exc)
