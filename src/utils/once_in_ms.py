"""
Timing utility for throttling execution in the frame loop
"""

import time
from typing import Callable


class OnceInMs:
    """
    Timer for throttling code execution to at most once per interval.

    The frame loop runs every ~16ms; use this for work that should run far
    less often, such as resource usage logging.

    Example:
        self._usage_monitor = OnceInMs(60000)  # Once per minute
        ...
        if self._usage_monitor.should_execute():
            self._log_usage()
    """

    def __init__(self, interval_ms: int, clock: Callable[[], float] = time.monotonic):
        self.interval = interval_ms / 1000.0
        self._clock = clock
        self.last_execution = None

    def should_execute(self) -> bool:
        """Return True (and restart the interval) if the interval has elapsed"""
        current = self._clock()
        if self.last_execution is None or current - self.last_execution >= self.interval:
            self.last_execution = current
            return True
        return False

    def reset(self) -> None:
        """Force next should_execute() call to return True"""
        self.last_execution = None
