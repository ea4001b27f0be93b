"""Tests for runtime configuration."""

import pytest

from snake_arcade.config import AppConfig


class TestAppConfig:
    def test_defaults(self):
        cfg = AppConfig()
        assert cfg.countdown_step_ms == 1000
        assert cfg.seed is None
        assert cfg.log_level == "INFO"

    def test_round_trip(self, tmp_path):
        cfg = AppConfig(storage_path=str(tmp_path / "s.json"), seed=7)
        path = tmp_path / "cfg" / "config.json"
        cfg.save(path)
        assert AppConfig.load(path) == cfg

    def test_partial_file_keeps_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text('{"seed": 3}')
        cfg = AppConfig.load(path)
        assert cfg.seed == 3
        assert cfg.countdown_step_ms == 1000

    def test_invalid_countdown_step(self):
        with pytest.raises(ValueError, match="countdown_step_ms"):
            AppConfig(countdown_step_ms=0)

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="log_level"):
            AppConfig(log_level="LOUD")
