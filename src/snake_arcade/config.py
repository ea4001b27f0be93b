"""Runtime configuration for the game driver and CLI."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_arcade.rules import COUNTDOWN_STEP_MS

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class AppConfig:
    """Settings that do not change the game rules.

    Supports JSON serialization so a setup can be reproduced.
    """

    storage_path: str = "~/.snake_arcade/store.json"
    seed: int | None = None
    countdown_step_ms: int = COUNTDOWN_STEP_MS
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.countdown_step_ms <= 0:
            raise ValueError("countdown_step_ms must be positive.")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log_level {self.log_level!r}.")

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> AppConfig:
        """Load config from a JSON file; missing keys keep their defaults."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
