"""Duration rendering for timer log lines."""

from __future__ import annotations

from datetime import timedelta
from typing import Union

TICKS_PER_SECOND = 10_000_000
_SHORT_LIMIT_TICKS = 60 * TICKS_PER_SECOND

Duration = Union[float, timedelta]


def to_ticks(duration: Duration) -> int:
    """Round a duration to whole 100 ns ticks."""

    if isinstance(duration, timedelta):
        duration = duration.total_seconds()
    return round(duration * TICKS_PER_SECOND)


def format_duration(duration: Duration, use_short_format: bool = True) -> str:
    """Render ``duration`` for a log line.

    Sub-minute durations in short mode look like ``03.1234567``. Everything
    else falls back to ``str(timedelta)``, e.g. ``0:01:00``.
    """

    ticks = to_ticks(duration)
    if use_short_format and 0 <= ticks < _SHORT_LIMIT_TICKS:
        seconds, fraction = divmod(ticks, TICKS_PER_SECOND)
        return f"{seconds:02d}.{fraction:07d}"
    return str(timedelta(microseconds=ticks / 10))


__all__ = ["format_duration", "to_ticks", "TICKS_PER_SECOND"]
