"""Terminal Snake — wraparound snake game for the terminal."""

from terminal_snake.config import GameConfig
from terminal_snake.engine import GameOverReason, GameState, GameStatus
from terminal_snake.food import FoodSpawner, GridFullError, spawn_free
from terminal_snake.grid import CellType, next_position
from terminal_snake.scores import ScoreStore, ScoreStoreError
from terminal_snake.snake import Direction, Snake

__all__ = [
    "CellType",
    "Direction",
    "FoodSpawner",
    "GameConfig",
    "GameOverReason",
    "GameState",
    "GameStatus",
    "GridFullError",
    "ScoreStore",
    "ScoreStoreError",
    "Snake",
    "next_position",
    "spawn_free",
]
