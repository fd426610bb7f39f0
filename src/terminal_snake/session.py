"""Async tick loop and input listener driving one game session."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterable

from terminal_snake.engine import GameState
from terminal_snake.keys import InputEvent
from terminal_snake.render import TerminalRenderer

logger = logging.getLogger(__name__)

# Seconds between checks for a resume while the game is paused.
PAUSE_POLL_INTERVAL = 0.1


class GameSession:
    """Runs a :class:`GameState` until it ends.

    The tick loop and the input listener are separate tasks sharing the
    one state instance; when either finishes the other is cancelled.
    """

    def __init__(
        self,
        state: GameState,
        renderer: TerminalRenderer,
        input_source: AsyncIterable[InputEvent],
    ) -> None:
        self.state = state
        self.renderer = renderer
        self.input_source = input_source

    async def run(self) -> GameState:
        """Play until game over or quit and return the final state."""
        self.renderer.clear()
        tasks = {
            asyncio.create_task(self._tick_loop(), name="tick-loop"),
            asyncio.create_task(self._input_loop(), name="input-loop"),
        }
        try:
            done, pending = await asyncio.wait(
                tasks, return_when=asyncio.FIRST_COMPLETED,
            )
        finally:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        for task in done:
            task.result()

        state = self.state
        if state.reason is not None:
            self.renderer.draw_game_over(state.reason, state.high_scores)
        return state

    async def _tick_loop(self) -> None:
        """Sleep for the current interval, step, redraw; repeat."""
        state = self.state
        self._draw()
        while not state.finished:
            if state.paused:
                self.renderer.draw_paused()
                await asyncio.sleep(PAUSE_POLL_INTERVAL)
                continue
            await asyncio.sleep(state.tick_ms / 1000.0)
            state.step()
            if not state.finished:
                self._draw()
        logger.info("Tick loop finished with status %s.", state.status.value)

    async def _input_loop(self) -> None:
        """Apply input events to the state until the player quits."""
        async for event in self.input_source:
            self.state.apply(event)
            if event is InputEvent.QUIT:
                return
        # Input closed; keep the game going until it ends on its own.
        await asyncio.Event().wait()

    def _draw(self) -> None:
        state = self.state
        self.renderer.draw(
            state.grid_size,
            list(state.snake),
            state.food,
            state.poison,
            score=state.score,
        )
