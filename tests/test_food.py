"""Tests for food kinds and placement."""

import numpy as np

from snake_arcade.food import Food, FoodKind, next_food_kind, spawn_food
from snake_arcade.snake import build_snake


class TestNextFoodKind:
    def test_apple_by_default(self):
        assert next_food_kind(0) == FoodKind.APPLE
        assert next_food_kind(5) == FoodKind.APPLE

    def test_every_tenth_food_is_heart(self):
        hearts = [n for n in range(40) if next_food_kind(n) == FoodKind.HEART]
        # The food following n meals is the (n + 1)-th on the board.
        assert [n + 1 for n in hearts] == [10, 20, 30, 40]


class TestSpawnFood:
    def test_never_on_snake(self):
        snake = build_snake((10, 10), 15)
        rng = np.random.default_rng(3)
        for _ in range(100):
            food = spawn_food(snake, rng=rng)
            assert food.position not in snake

    def test_kind_is_kept(self):
        food = spawn_food(build_snake(), FoodKind.HEART, np.random.default_rng(0))
        assert food.kind == FoodKind.HEART

    def test_deterministic(self):
        a = spawn_food(build_snake(), rng=np.random.default_rng(9))
        b = spawn_food(build_snake(), rng=np.random.default_rng(9))
        assert a == b


class TestFoodSerialization:
    def test_to_dict(self):
        assert Food((1, 2), FoodKind.HEART).to_dict() == {
            "position": [1, 2],
            "kind": "heart",
        }
