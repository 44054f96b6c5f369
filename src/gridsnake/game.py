# game.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from functools import partial
from typing import Callable, List, Optional, Tuple

from .config import CFG, GRID_DIM, START_HEAD, Config, Heading, tick_interval_ms
from .direction import DirectionResolver
from .errors import ScoreStoreError
from .food import place_food
from .grid import Coordinate, is_in_bounds
from .lifecycle import CollisionCause, Lifecycle, RoundStatus
from .scheduler import TickScheduler, TimerHandle
from .scores import MemoryScoreStore, ScoreStore

logger = logging.getLogger(__name__)


class InputEvent(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAUSE = "pause"


EVENT_HEADINGS = {
    InputEvent.UP: Heading.UP,
    InputEvent.DOWN: Heading.DOWN,
    InputEvent.LEFT: Heading.LEFT,
    InputEvent.RIGHT: Heading.RIGHT,
}


# ---------- Snapshot ----------
@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Coordinate, ...]   # head at index 0
    food: Coordinate
    score: int
    best_score: int
    status: RoundStatus
    collision_cause: Optional[CollisionCause]
    heading: Heading
    tick_interval_ms: int


Listener = Callable[[Snapshot], None]


def initial_snake(length: int) -> List[Coordinate]:
    """Head at the grid center; longer snakes trail downward (facing UP)."""
    hx, hy = START_HEAD
    return [Coordinate(hx, hy + i) for i in range(length)]


# ---------- Engine ----------
class SnakeGame:
    """
    The round simulation: snake body, food, score and status.

    Ticks are driven by a ``TickScheduler``. The game keeps exactly one
    timer armed while RUNNING and re-arms it after each tick with the
    interval for the current score, so a speed-up applies from the very
    next tick. Pausing, game over and reset cancel the timer.
    """

    def __init__(
        self,
        config: Config = CFG,
        scheduler: Optional[TickScheduler] = None,
        best_scores: Optional[ScoreStore] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.scheduler = scheduler if scheduler is not None else TickScheduler()
        self.best_scores = best_scores if best_scores is not None else MemoryScoreStore()
        self.rng = rng if rng is not None else random.Random(config.seed)

        self.lifecycle = Lifecycle()
        self.resolver = DirectionResolver(self.lifecycle, config.initial_snake_length)
        self.best_score = self.best_scores.get()

        self._listeners: List[Listener] = []
        self._timer: Optional[TimerHandle] = None
        self._generation = 0
        self._new_round()

    # ----- state -----
    @property
    def status(self) -> RoundStatus:
        return self.lifecycle.status

    @property
    def collision_cause(self) -> Optional[CollisionCause]:
        return self.lifecycle.cause

    @property
    def heading(self) -> Heading:
        return self.resolver.heading

    @property
    def tick_interval_ms(self) -> int:
        return tick_interval_ms(self.score)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=tuple(self.snake),
            food=self.food,
            score=self.score,
            best_score=self.best_score,
            status=self.status,
            collision_cause=self.collision_cause,
            heading=self.heading,
            tick_interval_ms=self.tick_interval_ms,
        )

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    # ----- input -----
    def handle_input(self, event: InputEvent) -> bool:
        """Apply one key-press. Returns whether the turn or pause toggle was accepted."""
        if event is InputEvent.PAUSE:
            return self.toggle_pause()
        return self.request_turn(EVENT_HEADINGS[event])

    def request_turn(self, heading: Heading) -> bool:
        """
        Queue a turn for the next tick. The first accepted turn starts the
        round; a turn while paused also resumes it.
        """
        if self.resolver.turn_locked or self.lifecycle.over:
            return False

        changed = self.lifecycle.resume()
        accepted = self.resolver.request_turn(heading)
        if accepted and self.status is RoundStatus.NOT_STARTED:
            self.lifecycle.start()
            changed = True

        if changed:
            self._arm()
            self._emit()
        return accepted

    def toggle_pause(self) -> bool:
        if not self.lifecycle.toggle_pause():
            return False
        if self.lifecycle.running:
            self._arm()
        else:
            self._disarm()
        self._emit()
        return True

    def reset(self) -> None:
        self._disarm()
        self.lifecycle.reset()
        self.resolver.reset()
        self._new_round()
        logger.info("Round reset (best score %d)", self.best_score)
        self._emit()

    # ----- simulation -----
    def tick(self) -> Optional[Snapshot]:
        """Advance one step. Returns the new snapshot, or None when not RUNNING."""
        if not self.lifecycle.running:
            return None

        self.resolver.begin_tick()
        new_head = self.snake[0].shifted(self.heading)

        if not is_in_bounds(new_head, GRID_DIM):
            return self._game_over(CollisionCause.WALL)

        # Tail included: it has not moved out of the way yet.
        if new_head in self.snake:
            return self._game_over(CollisionCause.SELF)

        self.snake.insert(0, new_head)
        if new_head == self.food:
            self.score += 1
            self.food = place_food(
                self.rng, GRID_DIM, self.snake, self.config.avoid_snake_food
            )
            self._update_best()
        else:
            self.snake.pop()

        logger.debug("Tick: head=%s score=%d", new_head, self.score)
        return self._emit()

    # ----- internals -----
    def _new_round(self) -> None:
        self.snake: List[Coordinate] = initial_snake(self.config.initial_snake_length)
        self.score = 0
        if self.config.initial_food is not None:
            self.food = Coordinate(*self.config.initial_food)
        else:
            self.food = place_food(
                self.rng, GRID_DIM, self.snake, self.config.avoid_snake_food
            )

    def _game_over(self, cause: CollisionCause) -> Snapshot:
        self.lifecycle.end(cause)
        self._disarm()
        logger.info("Game over: %s collision, score %d", cause.value, self.score)
        return self._emit()

    def _update_best(self) -> None:
        if self.score <= self.best_score:
            return
        self.best_score = self.score
        logger.info("New best score: %d", self.best_score)
        try:
            self.best_scores.set(self.best_score)
        except ScoreStoreError as e:
            logger.error("%s", e)

    def _arm(self) -> None:
        self._disarm()
        if self.lifecycle.running:
            self._generation += 1
            self._timer = self.scheduler.call_later(
                self.tick_interval_ms, partial(self._on_timer, self._generation)
            )

    def _disarm(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self, generation: int) -> None:
        # A timer from before a pause or reset must not touch the new state.
        if generation != self._generation or self._timer is None:
            return
        self._timer = None
        self.tick()
        self._arm()

    def _emit(self) -> Snapshot:
        snap = self.snapshot()
        for listener in list(self._listeners):
            listener(snap)
        return snap
