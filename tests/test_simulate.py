"""Tests for the headless autopilot simulation."""

from dataclasses import replace

import numpy as np
import pytest

from snake_arcade.food import Food
from snake_arcade.simulate import (
    choose_direction,
    finish_countdown,
    play_game,
    simulate,
)
from snake_arcade.snake import Direction, is_reverse
from snake_arcade.state import initial_state


def _running(**changes):
    return replace(initial_state(), **{"has_started": True, **changes})


class TestChooseDirection:
    def test_heads_for_food(self):
        assert choose_direction(_running(food=Food((3, 10)))) == Direction.LEFT
        assert choose_direction(_running(food=Food((10, 2)))) == Direction.UP

    def test_never_reverses(self):
        # Food straight behind the head.
        state = _running(food=Food((10, 15)))
        assert not is_reverse(choose_direction(state), state.direction)

    def test_avoids_wall(self):
        state = _running(snake=((10, 0), (10, 1), (10, 2)), food=Food((10, 5)))
        assert choose_direction(state) in (Direction.LEFT, Direction.RIGHT)

    def test_trapped_keeps_pending(self):
        state = _running(
            snake=((0, 0), (1, 0), (1, 1), (0, 1), (0, 2)),
            direction=Direction.UP,
            pending_direction=Direction.UP,
            food=Food((5, 5)),
        )
        assert choose_direction(state) == Direction.UP


class TestPlayGame:
    def test_finish_countdown(self):
        state = finish_countdown(replace(initial_state(), countdown=3))
        assert state.countdown is None
        assert state.has_started

    def test_runs_until_over_or_limit(self):
        state, ticks = play_game(np.random.default_rng(1), max_ticks=3_000)
        assert state.is_over or ticks == 3_000
        assert state.score >= 0

    def test_tick_limit(self):
        _, ticks = play_game(np.random.default_rng(1), max_ticks=10)
        assert ticks <= 10

    def test_deterministic(self):
        a = play_game(np.random.default_rng(8), max_ticks=500)
        b = play_game(np.random.default_rng(8), max_ticks=500)
        assert a == b


class TestSimulate:
    def test_result(self):
        result = simulate(games=3, max_ticks=300, seed=0, best_score=2)
        assert result.games == 3
        assert len(result.scores) == 3
        assert result.best_score >= max([2, *result.scores])
        assert "Simulated 3 game(s)" in result.summary()

    def test_rejects_zero_games(self):
        with pytest.raises(ValueError, match="at least 1"):
            simulate(games=0)
