# grid.py
from typing import NamedTuple

from .config import GRID_DIM, Heading


class Coordinate(NamedTuple):
    x: int
    y: int

    def shifted(self, heading: Heading) -> "Coordinate":
        """One cell over in ``heading``; STOPPED returns the same cell."""
        return Coordinate(self.x + heading.dx, self.y + heading.dy)


def is_in_bounds(c: Coordinate, dim: int = GRID_DIM) -> bool:
    """Check if a cell is inside the grid."""
    return 0 <= c.x < dim and 0 <= c.y < dim
