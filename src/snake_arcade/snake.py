"""Directions, relative turns, and snake geometry helpers."""

from __future__ import annotations

import enum

from snake_arcade.grid import Position
from snake_arcade.rules import INITIAL_SNAKE_LENGTH, START_POSITION

Snake = tuple[Position, ...]


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    ``y`` grows downward, so UP decreases it.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)


class Turn(enum.Enum):
    """Relative 90° rotation requests."""

    LEFT = "left"
    RIGHT = "right"


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}

# Clockwise cycle; a right turn moves one step forward in it.
_CLOCKWISE: tuple[Direction, ...] = (
    Direction.UP,
    Direction.RIGHT,
    Direction.DOWN,
    Direction.LEFT,
)


def opposite(direction: Direction) -> Direction:
    """Return the direction pointing straight back."""
    return _OPPOSITES[direction]


def is_reverse(requested: Direction, current: Direction) -> bool:
    """Return True if *requested* points straight back along *current*."""
    return opposite(current) == requested


def rotate(direction: Direction, turn: Turn) -> Direction:
    """Rotate *direction* by 90° to the given side."""
    offset = 1 if turn == Turn.RIGHT else -1
    index = _CLOCKWISE.index(direction)
    return _CLOCKWISE[(index + offset) % len(_CLOCKWISE)]


def step(pos: Position, direction: Direction) -> Position:
    """Return the cell one step from *pos* in *direction*."""
    dx, dy = direction.value
    return pos[0] + dx, pos[1] + dy


def build_snake(
    head: Position = START_POSITION, length: int = INITIAL_SNAKE_LENGTH,
) -> Snake:
    """Build a straight vertical snake facing up, body trailing downward."""
    if length < 1:
        raise ValueError("Snake length must be at least 1.")
    x, y = head
    return tuple((x, y + i) for i in range(length))
