"""
Cooperative timer queue driven by the frame clock
"""

import heapq
import itertools
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field

TimerCallback = Callable[[float], None]


@dataclass(order=True)
class _Timer:
    deadline: float
    sequence: int
    callback: TimerCallback = field(compare=False)


class TimerQueue:
    """
    Deferred callbacks run on the caller's thread.

    Callbacks run once the clock reaches their deadline, earliest deadline
    first and in scheduling order for equal deadlines. Each callback receives
    its own deadline, so chained timers do not drift with frame jitter.
    """

    def __init__(self, now: float = 0.0):
        self.now = now
        self._timers: list[_Timer] = []
        self._counter = itertools.count()

    def at(self, deadline: float, callback: TimerCallback) -> None:
        """Schedules a callback at an absolute time"""
        heapq.heappush(self._timers, _Timer(deadline, next(self._counter), callback))

    def after(self, delay: float, callback: TimerCallback) -> None:
        """Schedules a callback relative to the current clock"""
        self.at(self.now + max(0.0, delay), callback)

    def advance(self, now: float) -> int:
        """Moves the clock forward and runs the due callbacks, returns how many ran"""
        self.now = max(self.now, now)
        fired = 0
        while self._timers and self._timers[0].deadline <= self.now:
            timer = heapq.heappop(self._timers)
            timer.callback(timer.deadline)
            fired += 1
        return fired

    def clear(self) -> None:
        self._timers.clear()

    def __len__(self) -> int:
        return len(self._timers)
