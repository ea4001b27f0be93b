"""Tests for the built-in audio sinks."""

from snake_arcade.audio import CueLog, NullAudio
from snake_arcade.events import Cue


class TestCueLog:
    def test_drops_cues_before_init(self):
        log = CueLog()
        log.play_cue(Cue.MOVE)
        assert log.cues == []

    def test_records_after_init(self):
        log = CueLog()
        log.init()
        log.init()
        log.play_cue(Cue.EAT)
        log.play_cue(Cue.CRASH)
        log.play_cue(Cue.EAT)
        assert log.cues == [Cue.EAT, Cue.CRASH, Cue.EAT]
        assert log.count(Cue.EAT) == 2


class TestNullAudio:
    def test_accepts_everything(self):
        audio = NullAudio()
        audio.init()
        for cue in Cue:
            audio.play_cue(cue)
