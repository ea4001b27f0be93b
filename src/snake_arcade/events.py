"""Input events for the reducer and the effects it asks the driver to run."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from snake_arcade.snake import Direction, Turn


class Cue(enum.Enum):
    """Sound cues requested from the audio collaborator."""

    MOVE = "move"
    EAT = "eat"
    CRASH = "crash"


# --- events ---

@dataclass(frozen=True)
class RequestDirection:
    """Absolute direction input (arrow keys, d-pad)."""

    direction: Direction


@dataclass(frozen=True)
class TurnRelative:
    """Rotational input relative to the pending direction."""

    turn: Turn


@dataclass(frozen=True)
class TogglePlayOrStart:
    """Start a new run, or pause/resume the current one."""


@dataclass(frozen=True)
class Reset:
    """Return to the idle screen, keeping only the best score."""


@dataclass(frozen=True)
class CountdownStep:
    """One second of the 3-2-1-Go countdown has elapsed."""


@dataclass(frozen=True)
class EndCountdown:
    """The "Go" step has elapsed; play resumes."""


@dataclass(frozen=True)
class Tick:
    """Advance the snake by one cell."""


Event = (
    RequestDirection
    | TurnRelative
    | TogglePlayOrStart
    | Reset
    | CountdownStep
    | EndCountdown
    | Tick
)


# --- effects ---

@dataclass(frozen=True)
class InitAudio:
    """Bring up the audio backend; safe to repeat."""


@dataclass(frozen=True)
class PlayCue:
    cue: Cue


@dataclass(frozen=True)
class PersistBestScore:
    score: int


Effect = InitAudio | PlayCue | PersistBestScore
