# lifecycle.py
import logging
from enum import Enum
from typing import Optional

from .errors import LifecycleError

logger = logging.getLogger(__name__)


class RoundStatus(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class CollisionCause(Enum):
    WALL = "wall"
    SELF = "self"


class Lifecycle:
    """
    Round status machine:

        NOT_STARTED -> RUNNING <-> PAUSED
                       RUNNING  -> GAME_OVER

    ``reset()`` returns to NOT_STARTED from anywhere. Only RUNNING ticks.
    """

    def __init__(self) -> None:
        self.status = RoundStatus.NOT_STARTED
        self.cause: Optional[CollisionCause] = None

    @property
    def running(self) -> bool:
        return self.status is RoundStatus.RUNNING

    @property
    def over(self) -> bool:
        return self.status is RoundStatus.GAME_OVER

    def start(self) -> None:
        if self.status is not RoundStatus.NOT_STARTED:
            raise LifecycleError(f"Cannot start a round that is {self.status.value}")
        self.status = RoundStatus.RUNNING
        logger.info("Round started")

    def toggle_pause(self) -> bool:
        """Flip RUNNING/PAUSED. Returns False (no-op) before the start and after game over."""
        if self.status is RoundStatus.RUNNING:
            self.status = RoundStatus.PAUSED
        elif self.status is RoundStatus.PAUSED:
            self.status = RoundStatus.RUNNING
        else:
            return False
        logger.debug("Round %s", self.status.value)
        return True

    def resume(self) -> bool:
        if self.status is not RoundStatus.PAUSED:
            return False
        self.status = RoundStatus.RUNNING
        logger.debug("Round resumed")
        return True

    def end(self, cause: CollisionCause) -> None:
        if self.status is not RoundStatus.RUNNING:
            raise LifecycleError(f"Cannot end a round that is {self.status.value}")
        self.status = RoundStatus.GAME_OVER
        self.cause = cause

    def reset(self) -> None:
        self.status = RoundStatus.NOT_STARTED
        self.cause = None
