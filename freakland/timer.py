"""Per-frame delta time, total time, frame count and smoothed FPS."""

from __future__ import annotations

import time
from typing import Callable

FIXED_DELTA_TIME = 1.0 / 60.0
_MAX_DELTA = 0.1
_SMOOTHING = 0.05


class FrameTimer:
    """Frame clock driven by a monotonic time source in seconds."""

    FIXED_DELTA_TIME = FIXED_DELTA_TIME

    def __init__(self, clock: Callable[[], float] | None = None) -> None:
        self._clock = clock or time.perf_counter
        self.delta_time = 0.0
        self.total_time = 0.0
        self.fps = 0.0
        self.frame_count = 0
        self._last = 0.0

    def init(self) -> None:
        """Start timing from now; the first delta is seeded with the fixed step."""
        self._last = self._clock()
        self.delta_time = FIXED_DELTA_TIME
        self.total_time = 0.0
        self.frame_count = 0
        self.fps = 60.0

    def begin_frame(self) -> None:
        """Measure the time since the previous frame and update statistics."""
        now = self._clock()
        elapsed = now - self._last
        self._last = now

        self.delta_time = min(elapsed, _MAX_DELTA)
        self.total_time += self.delta_time
        self.frame_count += 1

        instant = 1.0 / self.delta_time if self.delta_time > 0.0001 else 9999.0
        self.fps += _SMOOTHING * (instant - self.fps)