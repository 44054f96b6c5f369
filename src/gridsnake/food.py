# food.py
import random
from typing import Iterable, Optional

from .config import GRID_DIM
from .grid import Coordinate


def place_food(
    rng: random.Random,
    dim: int = GRID_DIM,
    snake: Optional[Iterable[Coordinate]] = None,
    avoid_snake: bool = False,
) -> Coordinate:
    """
    Draw a food cell, x and y independently uniform over [0, dim).

    By default the draw ignores the snake, so food can land on the body.
    With ``avoid_snake`` the draw is repeated until it hits a free cell;
    a snake filling the whole grid falls back to the plain draw.
    """
    if avoid_snake and snake is not None:
        body = set(snake)
        if len(body) < dim * dim:
            while True:
                fx = rng.randrange(dim)
                fy = rng.randrange(dim)
                if (fx, fy) not in body:
                    return Coordinate(fx, fy)
    return Coordinate(rng.randrange(dim), rng.randrange(dim))
