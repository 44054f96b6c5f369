# src/gridsnake/rl/env.py
from __future__ import annotations
from dataclasses import dataclass
import random

import numpy as np  # type: ignore

from gridsnake.config import Config, GRID_DIM, Heading
from gridsnake.game import SnakeGame
from gridsnake.grid import Coordinate, is_in_bounds
from gridsnake.lifecycle import RoundStatus
from gridsnake.scheduler import TickScheduler

# -----------------------------------------------------------------------------
# Actions: integers -> headings
# -----------------------------------------------------------------------------
ACTIONS = {
    0: Heading.UP,
    1: Heading.DOWN,
    2: Heading.LEFT,
    3: Heading.RIGHT,
}

# -----------------------------------------------------------------------------
# Small geometry helpers
# -----------------------------------------------------------------------------
def left_of(heading: Heading) -> Heading:
    """Rotate a heading 90° CCW (screen coordinates, y grows downward)."""
    return Heading((heading.dy, -heading.dx))

def right_of(heading: Heading) -> Heading:
    """Rotate a heading 90° CW."""
    return Heading((-heading.dy, heading.dx))

def would_hit(game: SnakeGame, heading: Heading) -> bool:
    """
    Returns True if moving the head 1 cell in 'heading' would end the
    round on a wall or the snake's body.
    """
    nxt = game.snake[0].shifted(heading)
    if not is_in_bounds(nxt, GRID_DIM):
        return True
    return nxt in game.snake

def manhattan(a: Coordinate, b: Coordinate) -> int:
    """Manhattan (L1) distance on the grid."""
    return abs(a.x - b.x) + abs(a.y - b.y)

# -----------------------------------------------------------------------------
# Observation function
# -----------------------------------------------------------------------------
def observe(game: SnakeGame) -> np.ndarray:
    """
    Return a compact 9-D observation vector.

    Features:
      0: hx_n  - head x normalized in [0, 1]
      1: hy_n  - head y normalized in [0, 1]
      2: fx_n  - food x normalized in [0, 1]
      3: fy_n  - food y normalized in [0, 1]
      4: dx    - current heading x component in {-1, 0, 1}
      5: dy    - current heading y component in {-1, 0, 1}
      6: danger_ahead  - 1.0 if the next cell forward would be fatal
      7: danger_left   - 1.0 if the next cell to the left would be fatal
      8: danger_right  - 1.0 if the next cell to the right would be fatal

    Before the first move the heading is (0, 0) and all danger flags are 0.
    """
    head = game.snake[0]
    denom = max(GRID_DIM - 1, 1)
    heading = game.heading

    if heading is Heading.STOPPED:
        dangers = (0.0, 0.0, 0.0)
    else:
        dangers = (
            float(would_hit(game, heading)),
            float(would_hit(game, left_of(heading))),
            float(would_hit(game, right_of(heading))),
        )

    return np.array(
        [
            head.x / denom, head.y / denom,
            game.food.x / denom, game.food.y / denom,
            float(heading.dx), float(heading.dy),
            *dangers,
        ],
        dtype=np.float32,
    )

# -----------------------------------------------------------------------------
# Headless environment
# -----------------------------------------------------------------------------
@dataclass
class SnakeEnv:
    """
    Minimal Gym-like environment over a real ``SnakeGame``.

    Each ``step`` feeds the action in as a key-press and then moves the
    game's clock forward by one tick interval, so exactly one tick fires.

    Rewards:
      + eat_reward  when food is eaten
      + shaping_coef * (d_before - d_after) per step (closer -> positive)
      + step_penalty per step (tiny negative to discourage dithering)
      + death_reward on death
    """
    step_penalty: float = -0.001
    eat_reward: float   = 1.0
    death_reward: float = -1.0
    shaping_coef: float = 0.01
    seed_value: int     = 0
    initial_snake_length: int = 1

    def __post_init__(self):
        # Food draws (game) and policy draws (np_rng), both owned by this env
        self.rng = random.Random(self.seed_value)
        self.np_rng = np.random.default_rng(self.seed_value)
        self.game: SnakeGame | None = None
        self.scheduler: TickScheduler | None = None

    # Gym-like API -------------------------------------------------------------
    def reset(self, seed: int | None = None) -> np.ndarray:
        """Start a new episode. Returns the initial observation."""
        if seed is not None:
            self.rng.seed(seed)
            self.np_rng = np.random.default_rng(seed)

        self.scheduler = TickScheduler()
        cfg = Config(initial_snake_length=self.initial_snake_length)
        self.game = SnakeGame(cfg, self.scheduler, rng=self.rng)
        return observe(self.game)

    def step(self, action: int):
        """
        Apply an action (0..3), advance exactly one tick, and return:
          (obs, reward, terminated, info)
        A 180° action is ignored by the game and the snake keeps going.
        """
        assert self.game is not None, "Call reset() first."
        assert action in ACTIONS, f"Invalid action {action}"
        game = self.game

        d_before = manhattan(game.snake[0], game.food)
        score_before = game.score

        game.request_turn(ACTIONS[action])
        if game.status is RoundStatus.NOT_STARTED:
            # Opening move refused (reverse of a long snake's implicit UP).
            game.request_turn(Heading.UP)
        self.scheduler.advance(game.tick_interval_ms)

        if game.status is RoundStatus.GAME_OVER:
            info = {"reason": "death", "cause": game.collision_cause.value, "score": game.score}
            return observe(game), self.death_reward, True, info

        reward = self.step_penalty
        if game.score > score_before:
            reward += self.eat_reward
        reward += self.shaping_coef * (d_before - manhattan(game.snake[0], game.food))

        return observe(game), reward, False, {"score": game.score}

    def close(self) -> None:
        self.game = None
        self.scheduler = None

    @property
    def action_space_n(self) -> int:
        return len(ACTIONS)

    @property
    def observation_space_shape(self):
        # 9 features defined in observe()
        return (9,)
