# scheduler.py
from __future__ import annotations

import heapq
import itertools
from typing import Callable, List, Tuple


class TimerHandle:
    """A pending one-shot callback. ``cancel()`` is idempotent."""

    __slots__ = ("when", "callback", "cancelled")

    def __init__(self, when: int, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "pending"
        return f"<TimerHandle when={self.when} {state}>"


class TickScheduler:
    """
    Single-threaded timer queue on a millisecond clock.

    Nothing runs by itself: the owner moves the clock with ``advance()``
    (headless, tests) or ``advance_to()`` (fed from ``pygame.time.get_ticks()``)
    and every due callback runs to completion, earliest deadline first.
    Callbacks already see the new clock, so a timer re-armed from inside a
    late callback counts from now: a stalled frame fires each timer once
    instead of replaying the missed intervals.
    """

    def __init__(self, now_ms: int = 0) -> None:
        self.now_ms = now_ms
        self._queue: List[Tuple[int, int, TimerHandle]] = []
        self._seq = itertools.count()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        handle = TimerHandle(self.now_ms + max(0, delay_ms), callback)
        heapq.heappush(self._queue, (handle.when, next(self._seq), handle))
        return handle

    def advance(self, ms: int) -> int:
        """Move the clock forward ``ms``; returns how many callbacks ran."""
        return self.advance_to(self.now_ms + ms)

    def advance_to(self, now_ms: int) -> int:
        self.now_ms = max(self.now_ms, now_ms)
        ran = 0
        while self._queue and self._queue[0][0] <= self.now_ms:
            _, _, handle = heapq.heappop(self._queue)
            if handle.cancelled:
                continue
            handle.callback()
            ran += 1
        return ran

    def pending(self) -> int:
        return sum(1 for _, _, h in self._queue if not h.cancelled)
