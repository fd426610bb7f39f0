"""Keymap from raw keys to player input events."""

from __future__ import annotations

import enum


class InputEvent(enum.Enum):
    """Player intents delivered to a running game."""

    MOVE_UP = "up"
    MOVE_DOWN = "down"
    MOVE_LEFT = "left"
    MOVE_RIGHT = "right"
    TOGGLE_PAUSE = "pause"
    QUIT = "quit"


KEYMAP: dict[str, InputEvent] = {
    "w": InputEvent.MOVE_UP,
    "s": InputEvent.MOVE_DOWN,
    "a": InputEvent.MOVE_LEFT,
    "d": InputEvent.MOVE_RIGHT,
    "p": InputEvent.TOGGLE_PAUSE,
    "q": InputEvent.QUIT,
}


def parse_key(key: str) -> InputEvent | None:
    """Map a raw key to an event; unknown keys map to ``None``."""
    return KEYMAP.get(key)
