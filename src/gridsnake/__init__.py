"""Grid snake: tick-driven round simulation with a pygame front end."""

from gridsnake.config import Config, Heading, tick_interval_ms
from gridsnake.game import InputEvent, SnakeGame, Snapshot
from gridsnake.grid import Coordinate, is_in_bounds
from gridsnake.lifecycle import CollisionCause, RoundStatus

__all__ = [
    "Config",
    "Heading",
    "tick_interval_ms",
    "InputEvent",
    "SnakeGame",
    "Snapshot",
    "Coordinate",
    "is_in_bounds",
    "CollisionCause",
    "RoundStatus",
]
