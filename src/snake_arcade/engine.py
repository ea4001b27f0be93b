"""Pure reducer turning a game state and an event into the next state."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace

import numpy as np

from snake_arcade.events import (
    CountdownStep,
    Cue,
    Effect,
    EndCountdown,
    Event,
    InitAudio,
    PersistBestScore,
    PlayCue,
    RequestDirection,
    Reset,
    Tick,
    TogglePlayOrStart,
    TurnRelative,
)
from snake_arcade.food import FoodKind, next_food_kind, spawn_food
from snake_arcade.grid import in_bounds, is_full
from snake_arcade.rules import (
    COUNTDOWN_GO,
    COUNTDOWN_START,
    FLOOR_TICK_MS,
    INITIAL_SNAKE_LENGTH,
    INITIAL_TICK_MS,
    MAX_LIVES,
    SLOW_DOWN_FACTOR,
    SPEED_UP_FACTOR,
    START_POSITION,
)
from snake_arcade.snake import (
    Direction,
    Snake,
    build_snake,
    is_reverse,
    rotate,
    step,
)
from snake_arcade.state import GameState, initial_state

logger = logging.getLogger(__name__)

_Rng = np.random.Generator | None


@dataclass(frozen=True)
class Transition:
    """The state produced by one event plus the effects it requests."""

    state: GameState
    effects: tuple[Effect, ...] = ()


def apply(
    state: GameState,
    event: Event,
    rng: _Rng = None,
) -> Transition:
    """Apply *event* to *state*.

    Never raises for an event; anything the reducer does not handle leaves
    the state untouched. *rng* is only consulted when food is placed.
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        return Transition(state)
    return handler(state, event, rng)


def _request_direction(
    state: GameState, event: RequestDirection, rng: _Rng,
) -> Transition:
    """Queue an absolute direction unless it reverses the snake."""
    if state.is_over or is_reverse(event.direction, state.direction):
        return Transition(state)
    return Transition(replace(state, pending_direction=event.direction))


def _turn_relative(
    state: GameState, event: TurnRelative, rng: _Rng,
) -> Transition:
    """Rotate the queued direction; turns within one tick compound."""
    if state.is_over:
        return Transition(state)
    turned = rotate(state.pending_direction, event.turn)
    return Transition(replace(state, pending_direction=turned))


def _toggle_play(
    state: GameState, event: TogglePlayOrStart, rng: _Rng,
) -> Transition:
    """Begin a countdown into a fresh run, or flip pause on a live one."""
    effects: tuple[Effect, ...] = (InitAudio(),)
    if state.is_over or not state.has_started:
        if state.countdown is not None:
            return Transition(state, effects)
        fresh = initial_state(
            best_score=state.best_score,
            food=spawn_food(build_snake(), FoodKind.APPLE, rng),
        )
        logger.info("New run starting (best score %d).", state.best_score)
        return Transition(replace(fresh, countdown=COUNTDOWN_START), effects)
    return Transition(replace(state, is_paused=not state.is_paused), effects)


def _reset(
    state: GameState, event: Reset, rng: _Rng,
) -> Transition:
    """Back to the idle screen; only the best score survives."""
    fresh = initial_state(
        best_score=state.best_score,
        food=spawn_food(build_snake(), FoodKind.APPLE, rng),
    )
    return Transition(fresh)


def _countdown_step(
    state: GameState, event: CountdownStep, rng: _Rng,
) -> Transition:
    countdown = state.countdown
    # "Go" is ended by EndCountdown, not stepped.
    if not isinstance(countdown, int):
        return Transition(state)
    following = countdown - 1 if countdown > 1 else COUNTDOWN_GO
    return Transition(replace(state, countdown=following))


def _end_countdown(
    state: GameState, event: EndCountdown, rng: _Rng,
) -> Transition:
    if state.countdown != COUNTDOWN_GO:
        return Transition(state)
    return Transition(
        replace(state, countdown=None, has_started=True, is_paused=False),
    )


def _tick(
    state: GameState, event: Tick, rng: _Rng,
) -> Transition:
    """Advance the snake one cell: move, feed, or collide."""
    if not state.is_running:
        return Transition(state)

    moving = state.pending_direction
    new_head = step(state.head, moving)

    if not in_bounds(new_head) or new_head in state.snake:
        return _collide(state, moving)

    grown = (new_head,) + state.snake
    if new_head != state.food.position:
        return Transition(
            replace(state, snake=grown[:-1], direction=moving),
            (PlayCue(Cue.MOVE),),
        )

    lives = state.lives
    if state.food.kind is FoodKind.HEART:
        lives = min(MAX_LIVES, lives + 1)
    foods_eaten = state.foods_eaten + 1
    if is_full(grown):
        return _clear_board(state, grown, moving, lives, foods_eaten)
    food = spawn_food(grown, next_food_kind(foods_eaten), rng)
    return Transition(
        replace(
            state,
            snake=grown,
            direction=moving,
            score=state.score + 1,
            lives=lives,
            foods_eaten=foods_eaten,
            food=food,
            tick_interval_ms=max(
                FLOOR_TICK_MS, state.tick_interval_ms * SPEED_UP_FACTOR,
            ),
        ),
        (PlayCue(Cue.EAT),),
    )


def _clear_board(
    state: GameState,
    grown: Snake,
    moving: Direction,
    lives: int,
    foods_eaten: int,
) -> Transition:
    """End the run after the last free cell is eaten.

    No cell is left for new food, so the eaten food stays under the head
    and the run finishes as a terminal state.
    """
    score = state.score + 1
    best_score = max(score, state.best_score)
    logger.info("Board cleared with score %d.", score)
    return Transition(
        replace(
            state,
            snake=grown,
            direction=moving,
            score=score,
            best_score=best_score,
            lives=lives,
            foods_eaten=foods_eaten,
            is_over=True,
        ),
        (PlayCue(Cue.EAT), PersistBestScore(best_score)),
    )


def _collide(state: GameState, attempted: Direction) -> Transition:
    """Spend a life, or end the run when none are left."""
    best_score = max(state.score, state.best_score)
    effects: tuple[Effect, ...] = (
        PlayCue(Cue.CRASH),
        PersistBestScore(best_score),
    )

    if state.lives > 1:
        length = max(INITIAL_SNAKE_LENGTH, len(state.snake) - 1)
        logger.info(
            "Life lost with score %d; %d remaining.",
            state.score, state.lives - 1,
        )
        return Transition(
            replace(
                state,
                lives=state.lives - 1,
                snake=build_snake(START_POSITION, length),
                direction=Direction.UP,
                pending_direction=Direction.UP,
                tick_interval_ms=min(
                    INITIAL_TICK_MS, state.tick_interval_ms * SLOW_DOWN_FACTOR,
                ),
                countdown=COUNTDOWN_START,
                best_score=best_score,
            ),
            effects,
        )

    logger.info("Game over with score %d.", state.score)
    return Transition(
        replace(
            state,
            lives=0,
            is_over=True,
            best_score=best_score,
            direction=attempted,
        ),
        effects,
    )


_HANDLERS: dict[type, Callable[..., Transition]] = {
    RequestDirection: _request_direction,
    TurnRelative: _turn_relative,
    TogglePlayOrStart: _toggle_play,
    Reset: _reset,
    CountdownStep: _countdown_step,
    EndCountdown: _end_countdown,
    Tick: _tick,
}
