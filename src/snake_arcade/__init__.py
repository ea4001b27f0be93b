"""Snake Arcade — deterministic snake game core and timer driver."""

from snake_arcade.driver import AsyncioTimer, Driver
from snake_arcade.engine import Transition, apply
from snake_arcade.events import (
    CountdownStep,
    Cue,
    EndCountdown,
    RequestDirection,
    Reset,
    Tick,
    TogglePlayOrStart,
    TurnRelative,
)
from snake_arcade.food import Food, FoodKind
from snake_arcade.snake import Direction, Turn
from snake_arcade.state import GameState, Overlay, initial_state

__all__ = [
    "AsyncioTimer",
    "CountdownStep",
    "Cue",
    "Direction",
    "Driver",
    "EndCountdown",
    "Food",
    "FoodKind",
    "GameState",
    "Overlay",
    "RequestDirection",
    "Reset",
    "Tick",
    "TogglePlayOrStart",
    "Transition",
    "Turn",
    "TurnRelative",
    "apply",
    "initial_state",
]
