"""Frame timing: delta times and frame-rate capping."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Computes the time between frames and sleeps to hold a target frame rate.

    ``clock`` returns milliseconds; ``sleep`` takes milliseconds.
    """

    def __init__(
        self,
        clock: Callable[[], int] | None = None,
        sleep: Callable[[int], None] | None = None,
        fps: int = 60,
    ) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps!r}")
        if clock is None:
            origin = time.monotonic()

            def clock() -> int:
                return int((time.monotonic() - origin) * 1000)

        if sleep is None:

            def sleep(milliseconds: int) -> None:
                time.sleep(milliseconds / 1000)

        self._clock = clock
        self._sleep = sleep
        self.fps = fps
        self.frame_delay = 1000 // fps
        self.frame_start = 0
        self.last_frame = 0
        self.frame_time = 0

    def compute_delta_time(self) -> int:
        """Milliseconds since the previous frame started; marks a new frame start."""
        self.frame_start = self._clock()
        dt = self.frame_start - self.last_frame
        self.last_frame = self.frame_start
        return dt

    def delay_time(self) -> int:
        """Sleep out the rest of the frame if it ran fast; return the milliseconds slept."""
        self.frame_time = self._clock() - self.frame_start
        if self.frame_time < self.frame_delay:
            delay = self.frame_delay - self.frame_time
            self._sleep(delay)
            return delay
        return 0