"""Deadline-keyed timer queue advanced by the game tick.

Anything that needs "wait N seconds, then do X" (brewing coffee, performing a
task) schedules a callback here instead of sleeping. Time only moves when the
session ticks, so pausing the game pauses every timer too.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass(order=True, slots=True)
class Timer:
    deadline: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    label: str = field(default="", compare=False)
    cancelled: bool = field(default=False, compare=False)
    fired: bool = field(default=False, compare=False)

    @property
    def live(self) -> bool:
        return not (self.cancelled or self.fired)


class Scheduler:
    def __init__(self) -> None:
        self._now = 0.0
        self._heap: list[Timer] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    def pending(self) -> int:
        return sum(1 for t in self._heap if t.live)

    def schedule(self, delay: float, callback: Callable[[], None], *, label: str = "") -> Timer:
        timer = Timer(
            deadline=self._now + max(0.0, float(delay)),
            seq=next(self._seq),
            callback=callback,
            label=label,
        )
        heapq.heappush(self._heap, timer)
        return timer

    def cancel(self, timer: Timer) -> bool:
        if not timer.live:
            return False
        timer.cancelled = True
        return True

    def clear(self) -> None:
        for timer in self._heap:
            timer.cancelled = True
        self._heap.clear()

    def advance(self, delta: float) -> int:
        """Move the clock forward and run every timer that came due.

        Due timers run in deadline order, ties broken by scheduling order.
        Returns how many callbacks ran.
        """

        self._now += max(0.0, float(delta))
        ran = 0
        while self._heap and self._heap[0].deadline <= self._now:
            timer = heapq.heappop(self._heap)
            if timer.cancelled:
                continue
            timer.fired = True
            ran += 1
            try:
                timer.callback()
            except Exception:
                logger.exception("timer callback failed label=%s", timer.label)
        return ran
