"""Async terminal key reader for POSIX terminals and the Windows console."""

from __future__ import annotations

import asyncio
import logging
import os
import sys
from collections.abc import AsyncIterator
from typing import TextIO

from terminal_snake.keys import InputEvent, parse_key

logger = logging.getLogger(__name__)

# Seconds between console polls where the loop cannot watch the fd.
CONSOLE_POLL_INTERVAL = 0.05


class TerminalInput:
    """Async source of :class:`InputEvent` read from a terminal.

    Use as a context manager: on a POSIX TTY the stream is switched to
    cbreak mode without echo and restored on exit. Iterating with
    ``async for`` never blocks the event loop. On POSIX reads are driven
    by ``add_reader``; on Windows the console is polled with ``msvcrt``.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._fd = self.stream.fileno()
        self._saved_attrs: list | None = None

    def __enter__(self) -> TerminalInput:
        if sys.platform != "win32" and os.isatty(self._fd):
            import termios
            import tty

            self._saved_attrs = termios.tcgetattr(self._fd)
            tty.setcbreak(self._fd)
            attrs = termios.tcgetattr(self._fd)
            attrs[3] &= ~termios.ECHO
            termios.tcsetattr(self._fd, termios.TCSANOW, attrs)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._saved_attrs is not None:
            import termios

            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None

    def __aiter__(self) -> AsyncIterator[InputEvent]:
        if sys.platform == "win32":
            return self._poll_console()
        return self._watch_fd()

    async def _watch_fd(self) -> AsyncIterator[InputEvent]:
        loop = asyncio.get_running_loop()
        chunks: asyncio.Queue[bytes] = asyncio.Queue()
        loop.add_reader(
            self._fd, lambda: chunks.put_nowait(os.read(self._fd, 32)),
        )
        try:
            while True:
                chunk = await chunks.get()
                if not chunk:
                    logger.info("Input stream closed.")
                    return
                for event in _events(chunk.decode(errors="ignore")):
                    yield event
        finally:
            loop.remove_reader(self._fd)

    async def _poll_console(self) -> AsyncIterator[InputEvent]:
        import msvcrt

        while True:
            while msvcrt.kbhit():
                for event in _events(msvcrt.getwch()):
                    yield event
            await asyncio.sleep(CONSOLE_POLL_INTERVAL)


def _events(keys: str) -> list[InputEvent]:
    """Map each key to an event, dropping unknown keys."""
    return [event for event in map(parse_key, keys) if event is not None]
