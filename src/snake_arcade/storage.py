"""Durable best-score storage backed by a small JSON key-value file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)

BEST_SCORE_KEY = "snakeHighScore"


class BestScoreStore:
    """Keeps the best score under :data:`BEST_SCORE_KEY` in a JSON file.

    Storage failures never propagate: an unreadable file loads as 0 and a
    failed write is logged and dropped, so gameplay continues either way.
    Other keys already present in the file are preserved.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def load(self) -> int:
        """Return the stored best score, or 0 if none is usable."""
        value = self._read().get(BEST_SCORE_KEY)
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            if value is not None:
                logger.warning(
                    "Ignoring invalid best score %r in %s.", value, self.path,
                )
            return 0
        return value

    def save(self, score: int) -> None:
        data = self._read()
        data[BEST_SCORE_KEY] = int(score)
        if self._write(data):
            logger.info("Best score %d saved to %s.", score, self.path)

    def clear(self) -> None:
        data = self._read()
        if data.pop(BEST_SCORE_KEY, None) is not None:
            self._write(data)

    def _read(self) -> dict:
        try:
            raw = json.loads(self.path.read_text())
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError):
            logger.warning("Could not read score store %s.", self.path)
            return {}
        return raw if isinstance(raw, dict) else {}

    def _write(self, data: dict) -> bool:
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(data, indent=2))
            tmp.replace(self.path)
        except OSError:
            logger.warning("Could not write score store %s.", self.path)
            return False
        return True
