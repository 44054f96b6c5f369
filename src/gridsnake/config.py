# config.py
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Tuple

from .errors import ConfigError

# ----- Canvas & grid -----
CANVAS_SIZE = 400
GRID_SIZE = 20                      # pixels per cell
GRID_DIM = CANVAS_SIZE // GRID_SIZE  # cells per side
HEADER_HEIGHT = 36

# ----- Speed (ms) -----
BASE_INTERVAL_MS = 150
MIN_INTERVAL_MS = 50
SPEEDUP_MS_PER_POINT = 2

# ----- Start positions -----
START_HEAD = (GRID_DIM // 2, GRID_DIM // 2)
SNAKE_LENGTHS = (1, 3)


# ----- Headings (dx, dy) -----
class Heading(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    STOPPED = (0, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def reverse(self) -> "Heading":
        return Heading((-self.dx, -self.dy))


MOVES = (Heading.UP, Heading.DOWN, Heading.LEFT, Heading.RIGHT)

# ----- Colors -----
Color = Tuple[int, int, int]

BG = (10, 10, 18)
TEXT = (220, 220, 230)
GAME_OVER_RED = (255, 0, 0)

# theme -> (snake, glow, food)
THEMES = {
    "sci":    ((0, 242, 255), (0, 242, 255), (255, 0, 85)),
    "matrix": ((0, 255, 65), (0, 255, 65), (255, 255, 255)),
    "space":  ((255, 255, 255), (136, 136, 255), (255, 204, 0)),
}
THEME_BG = {
    "sci": (10, 10, 18),
    "matrix": (0, 8, 0),
    "space": (6, 6, 24),
}

DEFAULT_SCORES_PATH = Path.home() / ".gridsnake" / "best_score.json"


# ----- Tunables (what changes between sessions) -----
@dataclass
class Config:
    seed: Optional[int] = None
    initial_snake_length: int = 1
    # Food may spawn on the body unless this is set.
    avoid_snake_food: bool = False
    # Pin the first food of each round; None draws it at random.
    initial_food: Optional[Tuple[int, int]] = None
    theme: str = "sci"
    best_score_path: Path = DEFAULT_SCORES_PATH

    def __post_init__(self) -> None:
        if self.initial_snake_length not in SNAKE_LENGTHS:
            raise ConfigError(
                f"initial_snake_length must be one of {SNAKE_LENGTHS}, "
                f"got {self.initial_snake_length!r}"
            )
        if self.seed is not None and not isinstance(self.seed, int):
            raise ConfigError(f"seed must be an int, got {self.seed!r}")
        if self.theme not in THEMES:
            raise ConfigError(f"Unknown theme: {self.theme!r}")
        if self.initial_food is not None:
            food = self.initial_food
            if (
                not isinstance(food, (tuple, list))
                or len(food) != 2
                or not all(isinstance(v, int) and not isinstance(v, bool) for v in food)
            ):
                raise ConfigError(f"initial_food must be an (x, y) pair of ints, got {food!r}")
            fx, fy = food
            if not (0 <= fx < GRID_DIM and 0 <= fy < GRID_DIM):
                raise ConfigError(f"initial_food {self.initial_food} is off the grid")
            self.initial_food = (fx, fy)
        self.best_score_path = Path(self.best_score_path)


def tick_interval_ms(score: int) -> int:
    """Milliseconds between ticks at ``score``: 150 at zero, 2ms faster per point, floored at 50."""
    return max(MIN_INTERVAL_MS, BASE_INTERVAL_MS - SPEEDUP_MS_PER_POINT * score)


CFG = Config()
