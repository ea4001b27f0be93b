"""Immutable game state and its derived views."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from snake_arcade.food import INITIAL_FOOD, Food
from snake_arcade.grid import Position, occupancy
from snake_arcade.rules import INITIAL_TICK_MS, STARTING_LIVES
from snake_arcade.snake import Direction, Snake, build_snake

# An int while counting down, "Go" on the final step, None otherwise.
Countdown = int | str | None


class Overlay(enum.Enum):
    """Which overlay screen a renderer should draw over the board."""

    NONE = "none"
    IDLE = "idle"
    COUNTDOWN = "countdown"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameState:
    """Complete snapshot of one game.

    Instances are never mutated; every transition builds a new one with
    :func:`dataclasses.replace`. ``snake`` is head-first.
    """

    snake: Snake
    direction: Direction = Direction.UP
    pending_direction: Direction = Direction.UP
    food: Food = INITIAL_FOOD
    is_over: bool = False
    is_paused: bool = False
    has_started: bool = False
    score: int = 0
    best_score: int = 0
    tick_interval_ms: float = INITIAL_TICK_MS
    countdown: Countdown = None
    lives: int = STARTING_LIVES
    foods_eaten: int = 0

    @property
    def head(self) -> Position:
        return self.snake[0]

    @property
    def is_running(self) -> bool:
        """True when ticks advance the snake."""
        return (
            self.has_started
            and not self.is_paused
            and not self.is_over
            and self.countdown is None
        )

    @property
    def overlay(self) -> Overlay:
        if self.countdown is not None:
            return Overlay.COUNTDOWN
        if self.is_over:
            return Overlay.GAME_OVER
        if not self.has_started:
            return Overlay.IDLE
        if self.is_paused:
            return Overlay.PAUSED
        return Overlay.NONE

    def to_dict(self) -> dict:
        """Return a JSON-serializable snapshot for renderers."""
        return {
            "snake": [list(seg) for seg in self.snake],
            "direction": self.direction.name,
            "pending_direction": self.pending_direction.name,
            "food": self.food.to_dict(),
            "is_over": self.is_over,
            "is_paused": self.is_paused,
            "has_started": self.has_started,
            "score": self.score,
            "best_score": self.best_score,
            "tick_interval_ms": self.tick_interval_ms,
            "countdown": self.countdown,
            "lives": self.lives,
            "foods_eaten": self.foods_eaten,
            "overlay": self.overlay.value,
            "grid": occupancy(
                self.snake, self.food.position, self.food.kind.cell_type,
            ).tolist(),
        }


def initial_state(best_score: int = 0, food: Food = INITIAL_FOOD) -> GameState:
    """Build the idle pre-start state."""
    return GameState(snake=build_snake(), food=food, best_score=best_score)
