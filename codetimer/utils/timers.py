"""Lightweight monotonic stopwatch."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class Stopwatch:
    """Accumulate elapsed seconds across start/stop cycles.

    ``clock`` must be monotonic; :func:`time.perf_counter` is used by default.
    """

    clock: Callable[[], float] = time.perf_counter
    _accumulated: float = field(default=0.0, repr=False)
    _started_at: Optional[float] = field(default=None, repr=False)

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed(self) -> float:
        if self._started_at is None:
            return self._accumulated
        return self._accumulated + (self.clock() - self._started_at)

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = self.clock()

    def stop(self) -> None:
        if self._started_at is not None:
            self._accumulated += self.clock() - self._started_at
            self._started_at = None

    def reset(self) -> None:
        self._accumulated = 0.0
        self._started_at = None


__all__ = ["Stopwatch"]
