"""
Timer scheduler - deferred callbacks drained by the frame loop
"""

import heapq
import itertools
import time
from typing import Callable, List, Tuple


class TimerScheduler:
    """
    Single-threaded timer queue.

    Nothing runs on its own: the frame loop calls run_due() once per frame and
    every callback whose deadline has passed is invoked in deadline order
    (ties keep scheduling order). Callbacks may schedule further timers; those
    run on a later run_due() call even if already due.

    Example:
        scheduler = TimerScheduler()
        scheduler.call_later(800, next_round)
        ...
        scheduler.run_due()  # once per frame
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        """
        Args:
            clock: Function returning the current time in seconds
        """
        self._clock = clock
        self._counter = itertools.count()
        self._queue: List[Tuple[float, int, Callable[[], None]]] = []
        self._cancelled = set()

    def now_ms(self) -> float:
        # Microsecond rounding keeps whole-millisecond deadlines exact
        return round(self._clock() * 1000.0, 3)

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> int:
        """
        Schedule callback to run delay_ms from now.

        Returns:
            Timer id usable with cancel()
        """
        if delay_ms < 0:
            raise ValueError(f"Delay must not be negative, got {delay_ms}")
        timer_id = next(self._counter)
        heapq.heappush(self._queue, (self.now_ms() + delay_ms, timer_id, callback))
        return timer_id

    def cancel(self, timer_id: int) -> bool:
        """
        Cancel a queued timer.

        Returns:
            True if the timer was still queued, False if it already ran or was cleared
        """
        if timer_id in self._cancelled or all(queued_id != timer_id for _, queued_id, _ in self._queue):
            return False
        self._cancelled.add(timer_id)
        return True

    def run_due(self) -> int:
        """
        Run every callback whose deadline has passed.

        Returns:
            Number of callbacks invoked
        """
        now = self.now_ms()
        due = []
        while self._queue and self._queue[0][0] <= now:
            due.append(heapq.heappop(self._queue))

        fired = 0
        for _deadline, timer_id, callback in due:
            if timer_id in self._cancelled:
                self._cancelled.discard(timer_id)
                continue
            callback()
            fired += 1
        return fired

    def pending_count(self) -> int:
        return sum(1 for _, timer_id, _ in self._queue if timer_id not in self._cancelled)

    def clear(self) -> None:
        self._queue.clear()
        self._cancelled.clear()
