"""Tests for direction and snake geometry helpers."""

import pytest

from snake_arcade.snake import (
    Direction,
    Turn,
    build_snake,
    is_reverse,
    opposite,
    rotate,
    step,
)


class TestDirections:
    def test_opposites(self):
        assert opposite(Direction.UP) == Direction.DOWN
        assert opposite(Direction.LEFT) == Direction.RIGHT

    def test_is_reverse(self):
        assert is_reverse(Direction.DOWN, Direction.UP)
        assert is_reverse(Direction.RIGHT, Direction.LEFT)
        assert not is_reverse(Direction.LEFT, Direction.UP)
        assert not is_reverse(Direction.UP, Direction.UP)

    def test_is_reverse_matches_opposite(self):
        for current in Direction:
            for requested in Direction:
                expected = requested == opposite(current)
                assert is_reverse(requested, current) is expected

    def test_step_up_decreases_y(self):
        assert step((10, 10), Direction.UP) == (10, 9)
        assert step((10, 10), Direction.RIGHT) == (11, 10)


class TestRotate:
    def test_right_is_clockwise(self):
        assert rotate(Direction.UP, Turn.RIGHT) == Direction.RIGHT
        assert rotate(Direction.RIGHT, Turn.RIGHT) == Direction.DOWN
        assert rotate(Direction.DOWN, Turn.RIGHT) == Direction.LEFT
        assert rotate(Direction.LEFT, Turn.RIGHT) == Direction.UP

    def test_left_is_counter_clockwise(self):
        assert rotate(Direction.UP, Turn.LEFT) == Direction.LEFT
        assert rotate(Direction.LEFT, Turn.LEFT) == Direction.DOWN

    def test_rotation_never_reverses(self):
        for d in Direction:
            for t in Turn:
                assert not is_reverse(rotate(d, t), d)


class TestBuildSnake:
    def test_default(self):
        assert build_snake() == ((10, 10), (10, 11), (10, 12))

    def test_custom_length(self):
        snake = build_snake((10, 10), 5)
        assert len(snake) == 5
        assert snake[-1] == (10, 14)

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            build_snake(length=0)
