"""Audio collaborator interface and the built-in sinks."""

from __future__ import annotations

import logging
from typing import Protocol

from snake_arcade.events import Cue

logger = logging.getLogger(__name__)


class AudioSink(Protocol):
    """Anything that can play the game's sound cues."""

    def init(self) -> None: ...

    def play_cue(self, cue: Cue) -> None: ...


class NullAudio:
    """Silent sink used when no audio backend is available."""

    def init(self) -> None:
        pass

    def play_cue(self, cue: Cue) -> None:
        pass


class CueLog:
    """Sink that records cues instead of playing them.

    Cues played before :meth:`init` are dropped, as a real backend would
    not have an output device yet.
    """

    def __init__(self) -> None:
        self.initialized = False
        self.cues: list[Cue] = []

    def init(self) -> None:
        if not self.initialized:
            logger.debug("Cue log initialized.")
        self.initialized = True

    def play_cue(self, cue: Cue) -> None:
        if self.initialized:
            self.cues.append(cue)

    def count(self, cue: Cue) -> int:
        return self.cues.count(cue)
