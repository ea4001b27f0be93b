"""Key and button bindings that translate raw input into game events."""

from __future__ import annotations

from snake_arcade.events import (
    Event,
    RequestDirection,
    Reset,
    TogglePlayOrStart,
    TurnRelative,
)
from snake_arcade.snake import Direction, Turn

_KEY_BINDINGS: dict[str, Event] = {
    "ArrowUp": RequestDirection(Direction.UP),
    "ArrowDown": RequestDirection(Direction.DOWN),
    "ArrowLeft": RequestDirection(Direction.LEFT),
    "ArrowRight": RequestDirection(Direction.RIGHT),
    "w": RequestDirection(Direction.UP),
    "s": RequestDirection(Direction.DOWN),
    "a": RequestDirection(Direction.LEFT),
    "d": RequestDirection(Direction.RIGHT),
    "Escape": Reset(),
    " ": TogglePlayOrStart(),
}

# Handheld layout: d-pad for absolute moves, A/B rotate, SELECT/START.
_BUTTON_BINDINGS: dict[str, Event] = {
    "up": RequestDirection(Direction.UP),
    "down": RequestDirection(Direction.DOWN),
    "left": RequestDirection(Direction.LEFT),
    "right": RequestDirection(Direction.RIGHT),
    "a": TurnRelative(Turn.RIGHT),
    "b": TurnRelative(Turn.LEFT),
    "select": Reset(),
    "start": TogglePlayOrStart(),
}


def event_for_key(key: str) -> Event | None:
    """Map a keyboard key name to its event, or None if unbound.

    Letter keys match in either case.
    """
    event = _KEY_BINDINGS.get(key)
    if event is None and len(key) == 1:
        event = _KEY_BINDINGS.get(key.lower())
    return event


def event_for_button(button: str) -> Event | None:
    """Map an on-screen button name to its event, or None if unbound."""
    return _BUTTON_BINDINGS.get(button.lower())
