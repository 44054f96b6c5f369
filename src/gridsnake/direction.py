# direction.py
import logging

from .config import Heading
from .lifecycle import Lifecycle

logger = logging.getLogger(__name__)


def is_opposite(a: Heading, b: Heading) -> bool:
    return a is not Heading.STOPPED and a.reverse is b


class DirectionResolver:
    """
    Turns raw directional input into the heading the next tick will use.

    At most one turn is honored per tick: an accepted turn locks the
    resolver until ``begin_tick()``. A 180° turn is never accepted. A
    stopped single-segment snake may set off in any direction; a longer
    starting snake implicitly faces UP and cannot open with DOWN.
    """

    def __init__(self, lifecycle: Lifecycle, initial_snake_length: int = 1) -> None:
        self._lifecycle = lifecycle
        self._implicit = Heading.UP if initial_snake_length > 1 else Heading.STOPPED
        self.heading = Heading.STOPPED
        self.turn_locked = False

    def request_turn(self, heading: Heading) -> bool:
        if self.turn_locked or self._lifecycle.over or heading is Heading.STOPPED:
            logger.debug("Turn %s ignored (locked=%s, status=%s)",
                         heading.name, self.turn_locked, self._lifecycle.status.value)
            return False

        current = self.heading if self.heading is not Heading.STOPPED else self._implicit
        if is_opposite(current, heading):
            logger.debug("Turn %s rejected: reverses %s", heading.name, current.name)
            return False

        self.heading = heading
        self.turn_locked = True
        return True

    def begin_tick(self) -> None:
        self.turn_locked = False

    def reset(self) -> None:
        self.heading = Heading.STOPPED
        self.turn_locked = False
