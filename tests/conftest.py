import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from gridsnake.config import Config  # noqa: E402
from gridsnake.game import SnakeGame  # noqa: E402
from gridsnake.scheduler import TickScheduler  # noqa: E402
from gridsnake.scores import MemoryScoreStore  # noqa: E402


@pytest.fixture
def scheduler():
    return TickScheduler()


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def make_game(scheduler, store):
    """Build a game on the shared scheduler; food pinned at (15, 15) unless given."""
    def _make(**overrides):
        overrides.setdefault("seed", 7)
        overrides.setdefault("initial_food", (15, 15))
        return SnakeGame(Config(**overrides), scheduler, store)
    return _make

