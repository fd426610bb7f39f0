"""Tests for the async game session driver."""

import asyncio

import numpy as np
import pytest

from terminal_snake.config import GameConfig
from terminal_snake.engine import GameOverReason, GameState, GameStatus
from terminal_snake.keys import InputEvent
from terminal_snake.session import GameSession


class FakeRenderer:
    def __init__(self) -> None:
        self.frames: list[tuple] = []
        self.paused_frames = 0
        self.game_over: tuple | None = None

    def clear(self) -> None:
        pass

    def draw(self, grid_size, snake_cells, food, poison, *, score):
        self.frames.append((list(snake_cells), food, poison, score))

    def draw_paused(self) -> None:
        self.paused_frames += 1

    def draw_game_over(self, reason, high_scores) -> None:
        self.game_over = (reason, high_scores)


class FakeStore:
    def __init__(self) -> None:
        self.calls: list[int] = []

    def record(self, score: int) -> list[int]:
        self.calls.append(score)
        return [score]


async def _no_input():
    await asyncio.Event().wait()
    yield InputEvent.QUIT


async def _events(*items, delay=0.0):
    for item in items:
        yield item
        await asyncio.sleep(delay)


def _make_state(store=None, tick_ms=1) -> GameState:
    state = GameState(
        GameConfig(grid_size=5, tick_ms=tick_ms, min_tick_ms=1),
        score_store=store,
        rng=np.random.default_rng(0),
    )
    state.food = (4, 4)
    state.poison = (3, 4)
    return state


class TestSessionGameOver:
    @pytest.mark.asyncio
    async def test_poison_ends_session_and_records(self):
        store = FakeStore()
        state = _make_state(store)
        state.poison = (0, 2)
        renderer = FakeRenderer()

        result = await asyncio.wait_for(
            GameSession(state, renderer, _no_input()).run(), timeout=5,
        )

        assert result is state
        assert state.reason == GameOverReason.POISON_EATEN
        assert store.calls == [0]
        assert renderer.game_over == (GameOverReason.POISON_EATEN, [0])
        # Initial frame plus one after the safe first move.
        assert [f[0] for f in renderer.frames] == [[(0, 0)], [(0, 1)]]

    @pytest.mark.asyncio
    async def test_input_steers_snake(self):
        store = FakeStore()
        state = _make_state(store)
        state.poison = (1, 0)
        state.food = (0, 1)
        renderer = FakeRenderer()

        # Turn down before the first tick fires; the snake meets the poison.
        await asyncio.wait_for(
            GameSession(
                state, renderer, _events(InputEvent.MOVE_DOWN, delay=10),
            ).run(),
            timeout=5,
        )

        assert state.reason == GameOverReason.POISON_EATEN
        assert store.calls == [0]


class TestSessionControls:
    @pytest.mark.asyncio
    async def test_quit_ends_without_recording(self):
        store = FakeStore()
        state = _make_state(store, tick_ms=1000)
        renderer = FakeRenderer()

        await asyncio.wait_for(
            GameSession(state, renderer, _events(InputEvent.QUIT)).run(),
            timeout=5,
        )

        assert state.status == GameStatus.QUIT
        assert store.calls == []
        assert renderer.game_over is None
        assert state.tick == 0

    @pytest.mark.asyncio
    async def test_pause_stops_ticks(self):
        state = _make_state()
        renderer = FakeRenderer()

        await asyncio.wait_for(
            GameSession(
                state,
                renderer,
                _events(InputEvent.TOGGLE_PAUSE, InputEvent.QUIT, delay=0.3),
            ).run(),
            timeout=5,
        )

        assert state.status == GameStatus.QUIT
        assert state.tick == 0
        assert list(state.snake) == [(0, 0)]
        assert renderer.paused_frames >= 1

    @pytest.mark.asyncio
    async def test_game_continues_after_input_closes(self):
        state = _make_state()
        state.poison = (0, 3)
        renderer = FakeRenderer()

        await asyncio.wait_for(
            GameSession(state, renderer, _events()).run(), timeout=5,
        )

        assert state.reason == GameOverReason.POISON_EATEN
        assert state.tick == 3
