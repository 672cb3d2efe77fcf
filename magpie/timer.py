"""A pausable stopwatch driven by a tick counter."""

from __future__ import annotations

import time
from typing import Callable


class Timer:
    """Measures elapsed time from a monotonically increasing tick source.

    ``clock`` returns the current tick count and ``frequency`` is the number
    of ticks per second.
    """

    def __init__(
        self,
        clock: Callable[[], int] = time.perf_counter_ns,
        frequency: int = 1_000_000_000,
    ) -> None:
        if frequency <= 0:
            raise ValueError("frequency must be positive")
        self._clock = clock
        self._frequency = frequency
        self._start_ticks = 0
        self._paused_ticks = 0
        self._started = False
        self._paused = False

    def start(self) -> None:
        """Start (or restart) timing from now."""
        self._started = True
        self._paused = False
        self._start_ticks = self._clock()
        self._paused_ticks = 0

    def stop(self) -> None:
        """Stop timing and forget any elapsed time."""
        self._started = False
        self._paused = False
        self._start_ticks = 0
        self._paused_ticks = 0

    def pause(self) -> None:
        """Freeze the elapsed time; does nothing unless running."""
        if not self._started or self._paused:
            return
        self._paused = True
        self._paused_ticks = self._clock() - self._start_ticks
        self._start_ticks = 0

    def resume(self) -> None:
        """Continue after a pause; does nothing unless paused."""
        if not self._started or not self._paused:
            return
        self._paused = False
        self._start_ticks = self._clock() - self._paused_ticks
        self._paused_ticks = 0

    def reset(self) -> float:
        """Return the elapsed seconds and restart if the timer was running."""
        seconds = self.elapsed_seconds()
        if self._started:
            self.start()
        return seconds

    def elapsed_seconds(self) -> float:
        """Seconds elapsed since start, excluding paused time; 0 when stopped."""
        if not self._started:
            return 0.0
        if self._paused:
            return self._paused_ticks / self._frequency
        return (self._clock() - self._start_ticks) / self._frequency

    def is_started(self) -> bool:
        return self._started

    def is_paused(self) -> bool:
        return self._paused