# scheduler.py
"""
Fixed-interval cadence for the painter.

An interval (60 s by default) is split into N equal sub-iterations. Each
sub-iteration runs the work, measures how long it took, and sleeps whatever
is left of its share. Overruns skip the sleep; lost time is not made up in
later sub-iterations, so the cadence is best-effort only.
"""

from __future__ import annotations

import time
from typing import Callable, List, Optional


class IntervalScheduler:
    def __init__(
        self,
        interval_secs: int,
        subdivisions: int,
        clock: Optional[Callable[[], float]] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        if interval_secs < 1:
            raise ValueError("interval_secs must be at least 1")
        if subdivisions < 1:
            raise ValueError("subdivisions must be at least 1")
        if interval_secs // subdivisions == 0:
            raise ValueError(
                f"subdivisions ({subdivisions}) must not exceed interval_secs ({interval_secs})"
            )
        self.interval_secs = interval_secs
        self.subdivisions = subdivisions
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep

    @property
    def sub_iteration_secs(self) -> float:
        return self.interval_secs / self.subdivisions

    def run_sub_iteration(self, work: Callable[[], None]) -> float:
        """Run one slice of work and pad it out to the nominal length. Returns wall time spent."""
        start = self._clock()
        work()
        elapsed = self._clock() - start
        remaining = self.sub_iteration_secs - elapsed
        if remaining > 0:
            self._sleep(remaining)
        return self._clock() - start

    def run_interval(self, work: Callable[[int], None]) -> List[float]:
        """Call work(i) for each sub-iteration i; returns the measured durations."""
        durations: List[float] = []
        for i in range(self.subdivisions):
            durations.append(self.run_sub_iteration(lambda: work(i)))
        return durations
