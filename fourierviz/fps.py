"""Frames-per-second counter that reports once a second."""

from __future__ import annotations

import time
from collections.abc import Callable


class FpsCounter:
    """Counts frames and prints the rate after each elapsed second."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._start_time = clock()
        self._frame_count = 0

    def execute(self) -> float | None:
        """Record one frame; print and return the rate once a second has passed."""
        now = self._clock()
        elapsed = now - self._start_time
        self._frame_count += 1
        if elapsed >= 1.0:
            fps = self._frame_count / elapsed
            print(f"FPS: {fps}")
            self._frame_count = 0
            self._start_time = now
            return fps
        return None