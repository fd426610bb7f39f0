"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Rules and plumbing for one game session.

    Tick values are in milliseconds. Supports JSON serialization so a
    setup can be replayed with the same seed.
    """

    # Rules
    grid_size: int = 10
    tick_ms: int = 500
    min_tick_ms: int = 50
    tick_step_ms: int = 10
    food_reward: int = 10

    # Plumbing
    high_score_path: str = "high_scores.txt"
    high_score_limit: int = 10
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 2:
            raise ValueError("grid_size must be at least 2.")
        if self.min_tick_ms < 1:
            raise ValueError("min_tick_ms must be at least 1.")
        if self.tick_ms < self.min_tick_ms:
            raise ValueError("tick_ms must not be below min_tick_ms.")
        if self.tick_step_ms < 0:
            raise ValueError("tick_step_ms must be >= 0.")
        if self.food_reward < 0:
            raise ValueError("food_reward must be >= 0.")
        if self.high_score_limit < 1:
            raise ValueError("high_score_limit must be at least 1.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
