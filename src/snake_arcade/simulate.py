"""Headless simulation: whole games played by an autopilot."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import numpy as np

from snake_arcade.engine import apply
from snake_arcade.events import (
    CountdownStep,
    EndCountdown,
    RequestDirection,
    Tick,
    TogglePlayOrStart,
)
from snake_arcade.grid import in_bounds
from snake_arcade.rules import COUNTDOWN_GO
from snake_arcade.snake import Direction, is_reverse, step
from snake_arcade.state import GameState, initial_state

logger = logging.getLogger(__name__)


def choose_direction(state: GameState) -> Direction:
    """Greedy autopilot: head for the food along a safe cell.

    Moves that shorten the Manhattan distance to the food come first, then
    the remaining directions. Reversals are never proposed. When every move
    is fatal the pending direction is kept.
    """
    hx, hy = state.head
    fx, fy = state.food.position
    prefs: list[Direction] = []
    if fx < hx:
        prefs.append(Direction.LEFT)
    elif fx > hx:
        prefs.append(Direction.RIGHT)
    if fy < hy:
        prefs.append(Direction.UP)
    elif fy > hy:
        prefs.append(Direction.DOWN)
    for d in Direction:
        if d not in prefs:
            prefs.append(d)

    for d in prefs:
        if is_reverse(d, state.direction):
            continue
        nxt = step(state.head, d)
        if in_bounds(nxt) and nxt not in state.snake:
            return d
    return state.pending_direction


def finish_countdown(state: GameState) -> GameState:
    """Run the countdown to completion without waiting on timers."""
    while state.countdown is not None:
        if state.countdown == COUNTDOWN_GO:
            state = apply(state, EndCountdown()).state
        else:
            state = apply(state, CountdownStep()).state
    return state


def play_game(
    rng: np.random.Generator,
    best_score: int = 0,
    max_ticks: int = 5_000,
) -> tuple[GameState, int]:
    """Play one game from the idle screen until game over or *max_ticks*.

    Returns the final state and the number of ticks taken.
    """
    state = initial_state(best_score=best_score)
    state = apply(state, TogglePlayOrStart(), rng).state
    ticks = 0
    while not state.is_over and ticks < max_ticks:
        if state.countdown is not None:
            state = finish_countdown(state)
            continue
        turn = RequestDirection(choose_direction(state))
        state = apply(state, turn, rng).state
        state = apply(state, Tick(), rng).state
        ticks += 1
    return state, ticks


@dataclass
class SimulationResult:
    """Aggregate results from a batch of headless games."""

    games: int
    total_ticks: int
    wall_time_seconds: float
    scores: list[int] = field(default_factory=list)
    best_score: int = 0

    @property
    def mean_score(self) -> float:
        return float(np.mean(self.scores)) if self.scores else 0.0

    def summary(self) -> str:
        return (
            f"Simulated {self.games} game(s), {self.total_ticks} ticks in "
            f"{self.wall_time_seconds:.2f}s | "
            f"mean score {self.mean_score:.1f}, "
            f"max score {max(self.scores, default=0)}, "
            f"best score {self.best_score}"
        )


def simulate(
    *,
    games: int = 10,
    max_ticks: int = 5_000,
    seed: int | None = None,
    best_score: int = 0,
) -> SimulationResult:
    """Play *games* autopilot games back to back, carrying the best score."""
    if games < 1:
        raise ValueError("games must be at least 1.")
    rng = np.random.default_rng(seed)
    scores: list[int] = []
    total_ticks = 0
    start = time.perf_counter()

    for _ in range(games):
        state, ticks = play_game(
            rng, best_score=best_score, max_ticks=max_ticks,
        )
        best_score = max(best_score, state.best_score, state.score)
        scores.append(state.score)
        total_ticks += ticks

    result = SimulationResult(
        games=games,
        total_ticks=total_ticks,
        wall_time_seconds=time.perf_counter() - start,
        scores=scores,
        best_score=best_score,
    )
    logger.info(result.summary())
    return result
