"""Food kinds, heart cadence, and random food placement."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from snake_arcade.grid import CellType, Position, random_free_cell
from snake_arcade.rules import HEART_CADENCE, INITIAL_FOOD_POSITION
from snake_arcade.snake import Snake

logger = logging.getLogger(__name__)


class FoodKind(enum.Enum):
    """What the food on the board gives when eaten."""

    APPLE = "apple"
    HEART = "heart"

    @property
    def cell_type(self) -> CellType:
        return CellType.HEART if self is FoodKind.HEART else CellType.APPLE


@dataclass(frozen=True)
class Food:
    """A single piece of food on the board."""

    position: Position
    kind: FoodKind = FoodKind.APPLE

    def to_dict(self) -> dict:
        return {"position": list(self.position), "kind": self.kind.value}


INITIAL_FOOD = Food(INITIAL_FOOD_POSITION, FoodKind.APPLE)


def next_food_kind(foods_eaten: int) -> FoodKind:
    """Pick the kind of the food that follows *foods_eaten* meals.

    The food placed after ``n`` meals is the ``n + 1``-th on the board, so
    every tenth one is a heart.
    """
    if (foods_eaten + 1) % HEART_CADENCE == 0:
        return FoodKind.HEART
    return FoodKind.APPLE


def spawn_food(
    snake: Snake,
    kind: FoodKind = FoodKind.APPLE,
    rng: np.random.Generator | None = None,
) -> Food:
    """Place food of *kind* on a uniformly random cell off the snake."""
    rng = rng if rng is not None else np.random.default_rng()
    position = random_free_cell(snake, rng)
    logger.debug("Spawned %s at %s.", kind.value, position)
    return Food(position, kind)
