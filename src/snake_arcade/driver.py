"""Timer-driven game loop: feeds ticks and countdown steps into the reducer."""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from collections.abc import Callable
from typing import Protocol

import numpy as np

from snake_arcade.audio import AudioSink, NullAudio
from snake_arcade.config import AppConfig
from snake_arcade.engine import apply
from snake_arcade.events import (
    CountdownStep,
    Effect,
    EndCountdown,
    Event,
    InitAudio,
    PersistBestScore,
    PlayCue,
    Tick,
)
from snake_arcade.rules import COUNTDOWN_GO, COUNTDOWN_STEP_MS
from snake_arcade.state import Countdown, GameState, initial_state
from snake_arcade.storage import BestScoreStore

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class Timer(Protocol):
    """A cancellable repeating timer."""

    def start(self, delay_ms: float, callback: Callable[[], None]) -> None: ...

    def cancel(self) -> None: ...


class AsyncioTimer:
    """Repeating timer running as a task on the current event loop.

    Starting an armed timer replaces the previous schedule. Cancelling from
    inside the callback is allowed; the task exits at its next sleep.
    """

    def __init__(self) -> None:
        self._task: asyncio.Task | None = None

    @property
    def active(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, delay_ms: float, callback: Callable[[], None]) -> None:
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(
            self._run(delay_ms / 1000.0, callback),
        )

    def cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    @staticmethod
    async def _run(interval: float, callback: Callable[[], None]) -> None:
        try:
            while True:
                await asyncio.sleep(interval)
                callback()
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception("Timer callback failed; timer stopped.")


class Driver:
    """Owns the live game state and the two timers that advance it.

    Every event goes through :meth:`dispatch`, which applies it, re-arms the
    timers from the resulting state, runs the requested effects, and then
    notifies listeners. Events dispatched while another is being handled are
    queued and processed in order.
    """

    def __init__(
        self,
        state: GameState | None = None,
        *,
        audio: AudioSink | None = None,
        store: BestScoreStore | None = None,
        rng: np.random.Generator | None = None,
        countdown_step_ms: float = COUNTDOWN_STEP_MS,
        timer_factory: Callable[[], Timer] = AsyncioTimer,
    ) -> None:
        self.audio = audio if audio is not None else NullAudio()
        self.store = store
        self.rng = rng if rng is not None else np.random.default_rng()
        self.countdown_step_ms = countdown_step_ms
        if state is None:
            best_score = store.load() if store is not None else 0
            state = initial_state(best_score=best_score)
        self._state = state
        self._listeners: list[Listener] = []
        self._queue: deque[Event] = deque()
        self._dispatching = False

        self._countdown_timer = timer_factory()
        self._game_timer = timer_factory()
        self._armed_countdown: Countdown = None
        self._armed_interval: float | None = None

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        *,
        audio: AudioSink | None = None,
        timer_factory: Callable[[], Timer] = AsyncioTimer,
    ) -> Driver:
        """Build a driver wired to the store, seed and countdown step."""
        return cls(
            audio=audio,
            store=BestScoreStore(config.storage_path),
            rng=np.random.default_rng(config.seed),
            countdown_step_ms=config.countdown_step_ms,
            timer_factory=timer_factory,
        )

    @property
    def state(self) -> GameState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a state listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def start(self) -> None:
        """Arm whichever timers the current state calls for."""
        self._sync_timers()

    def close(self) -> None:
        """Cancel both timers."""
        self._countdown_timer.cancel()
        self._game_timer.cancel()
        self._armed_countdown = None
        self._armed_interval = None

    def dispatch(self, event: Event) -> None:
        self._queue.append(event)
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._queue:
                self._handle(self._queue.popleft())
        finally:
            self._dispatching = False

    def _handle(self, event: Event) -> None:
        transition = apply(self._state, event, self.rng)
        self._state = transition.state
        self._sync_timers()
        for effect in transition.effects:
            self._perform(effect)
        for listener in list(self._listeners):
            try:
                listener(self._state)
            except Exception:
                logger.exception("State listener %r failed.", listener)

    def _perform(self, effect: Effect) -> None:
        try:
            if isinstance(effect, InitAudio):
                self.audio.init()
            elif isinstance(effect, PlayCue):
                self.audio.play_cue(effect.cue)
            elif isinstance(effect, PersistBestScore):
                if self.store is not None:
                    self.store.save(effect.score)
        except Exception:
            logger.warning(
                "Effect %r failed; ignoring.", effect, exc_info=True,
            )

    def _sync_timers(self) -> None:
        state = self._state

        if state.countdown is None:
            if self._armed_countdown is not None:
                self._countdown_timer.cancel()
                self._armed_countdown = None
        elif state.countdown != self._armed_countdown:
            logger.debug("Countdown timer armed for %r.", state.countdown)
            self._countdown_timer.start(
                self.countdown_step_ms, self._on_countdown,
            )
            self._armed_countdown = state.countdown

        if state.is_running:
            if state.tick_interval_ms != self._armed_interval:
                logger.debug(
                    "Game timer armed at %.1f ms.", state.tick_interval_ms,
                )
                self._game_timer.start(state.tick_interval_ms, self._on_tick)
                self._armed_interval = state.tick_interval_ms
        elif self._armed_interval is not None:
            self._game_timer.cancel()
            self._armed_interval = None

    def _on_countdown(self) -> None:
        if self._state.countdown == COUNTDOWN_GO:
            self.dispatch(EndCountdown())
        else:
            self.dispatch(CountdownStep())

    def _on_tick(self) -> None:
        self.dispatch(Tick())
