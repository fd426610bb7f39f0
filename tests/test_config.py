"""Tests for the game configuration dataclass."""

import json

import pytest

from terminal_snake.config import GameConfig


class TestGameConfig:
    def test_defaults(self):
        cfg = GameConfig()
        assert cfg.grid_size == 10
        assert cfg.tick_ms == 500
        assert cfg.min_tick_ms == 50
        assert cfg.tick_step_ms == 10
        assert cfg.food_reward == 10
        assert cfg.high_score_path == "high_scores.txt"
        assert cfg.high_score_limit == 10
        assert cfg.seed is None

    def test_invalid_grid_size(self):
        with pytest.raises(ValueError, match="grid_size"):
            GameConfig(grid_size=1)

    def test_tick_below_floor(self):
        with pytest.raises(ValueError, match="tick_ms"):
            GameConfig(tick_ms=40, min_tick_ms=50)

    def test_invalid_limit(self):
        with pytest.raises(ValueError, match="high_score_limit"):
            GameConfig(high_score_limit=0)

    def test_save_and_load(self, tmp_path):
        cfg = GameConfig(grid_size=15, tick_ms=300, seed=3)
        path = tmp_path / "sub" / "config.json"
        cfg.save(path)
        assert json.loads(path.read_text())["grid_size"] == 15
        assert GameConfig.load(path) == cfg
