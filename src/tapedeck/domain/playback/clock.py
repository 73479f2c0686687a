"""
Wall-clock playback stopwatch.

The audio backend has no reliable position query, so elapsed playback
time is tracked here from wall-clock deltas: an accumulated duration
plus, while running, the instant the current run segment started.
"""

import time
from typing import Callable, Optional


class PlaybackClock:
    """Stopwatch with idempotent start/stop."""

    def __init__(self, now: Callable[[], float] = time.monotonic):
        self._now = now
        self._accumulated = 0.0
        self._running_since: Optional[float] = None

    @property
    def running(self) -> bool:
        return self._running_since is not None

    def start(self) -> None:
        if self._running_since is None:
            self._running_since = self._now()

    def stop(self) -> None:
        if self._running_since is not None:
            self._accumulated += self._now() - self._running_since
            self._running_since = None

    def reset(self) -> None:
        """Zero the accumulator; a running clock keeps running from now."""
        self._accumulated = 0.0
        if self._running_since is not None:
            self._running_since = self._now()

    def elapsed(self) -> float:
        """Seconds of playback so far. Pure read."""
        if self._running_since is None:
            return self._accumulated
        return self._accumulated + (self._now() - self._running_since)
