"""Board geometry and occupancy for the fixed-size grid."""

from __future__ import annotations

import enum
from collections.abc import Iterable

import numpy as np

from snake_arcade.rules import GRID_HEIGHT, GRID_WIDTH

Position = tuple[int, int]


class CellType(enum.IntEnum):
    """Integer codes stored in the occupancy array."""

    EMPTY = 0
    SNAKE = 1
    APPLE = 2
    HEART = 3


class GridFullError(RuntimeError):
    """Raised when a free cell is requested but the snake covers the board."""


def in_bounds(pos: Position) -> bool:
    """Check whether an ``(x, y)`` coordinate lies within the grid."""
    x, y = pos
    return 0 <= x < GRID_WIDTH and 0 <= y < GRID_HEIGHT


def random_cell(rng: np.random.Generator) -> Position:
    """Draw a uniformly random cell."""
    return int(rng.integers(GRID_WIDTH)), int(rng.integers(GRID_HEIGHT))


def is_full(occupied: Iterable[Position]) -> bool:
    """Check whether the on-board cells of *occupied* cover the whole grid."""
    on_board = {cell for cell in occupied if in_bounds(cell)}
    return len(on_board) >= GRID_WIDTH * GRID_HEIGHT


def random_free_cell(
    occupied: Iterable[Position], rng: np.random.Generator,
) -> Position:
    """Sample cells until one is found outside *occupied*.

    Rejection sampling terminates almost surely while a free cell exists;
    a completely covered board raises :class:`GridFullError` up front.
    """
    taken = set(occupied)
    if is_full(taken):
        raise GridFullError("No free cell left on the board.")
    while True:
        cell = random_cell(rng)
        if cell not in taken:
            return cell


def occupancy(
    snake: Iterable[Position],
    food: Position | None = None,
    food_cell: CellType = CellType.APPLE,
) -> np.ndarray:
    """Return a ``(height, width)`` array of :class:`CellType` codes.

    Indexing is ``cells[y, x]`` to match NumPy row-major order.
    """
    cells = np.zeros((GRID_HEIGHT, GRID_WIDTH), dtype=np.int8)
    if food is not None:
        cells[food[1], food[0]] = food_cell
    for x, y in snake:
        if in_bounds((x, y)):
            cells[y, x] = CellType.SNAKE
    return cells
