"""Frame timer measuring the time between successive checks."""

from __future__ import annotations

import time
from typing import Callable


class EngineTime:
    """Measure elapsed seconds between calls using a monotonic clock."""

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.perf_counter
        self._prev = self._clock()
        self.tick = 0.0
        self.delta_time = 0.0

    def reset(self) -> None:
        """Restart measurement from now."""
        self._prev = self._clock()

    def time_check(self) -> float:
        """Return the seconds since the previous check or reset."""
        current = self._clock()
        self.tick = current - self._prev
        self.delta_time = float(self.tick)
        self._prev = current
        return self.delta_time