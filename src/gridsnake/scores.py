# scores.py
"""
Best-score stores.

The game only needs ``get()`` at startup and ``set(value)`` when a round
beats the stored value. ``JsonScoreStore`` keeps it in a small JSON file;
``MemoryScoreStore`` is for headless runs and tests.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Protocol, Union

from .errors import ScoreStoreError

logger = logging.getLogger(__name__)

SCORE_KEY = "best_score"


class ScoreStore(Protocol):
    def get(self) -> int: ...

    def set(self, value: int) -> None: ...


class MemoryScoreStore:
    def __init__(self, value: int = 0) -> None:
        self.value = value

    def get(self) -> int:
        return self.value

    def set(self, value: int) -> None:
        self.value = value


class JsonScoreStore:
    """Best score persisted as ``{"best_score": N}``; missing or broken files read as 0."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def get(self) -> int:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return 0
        except (OSError, ValueError) as e:
            logger.warning("Could not read best score from %s: %s", self.path, e)
            return 0

        value = data.get(SCORE_KEY, 0) if isinstance(data, dict) else data
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            logger.warning("Ignoring invalid best score %r in %s", value, self.path)
            return 0
        return value

    def set(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_suffix(self.path.suffix + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                json.dump({SCORE_KEY: int(value)}, f)
            tmp.replace(self.path)
        except OSError as e:
            raise ScoreStoreError(f"Could not save best score to {self.path}: {e}") from e
        logger.debug("Saved best score %d to %s", value, self.path)
