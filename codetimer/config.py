"""Process-wide timer defaults and their resolution."""

from __future__ import annotations

import time
from dataclasses import dataclass, fields
from typing import Any, Callable, Optional, TypeVar

T = TypeVar("T")

LogAction = Callable[[str], None]


class TimerConfigurationError(RuntimeError):
    """Raised when an active timer cannot resolve an output sink."""


@dataclass
class TimerSettings:
    """Defaults copied into every timer at construction."""

    enabled: bool = True
    log_action: Optional[LogAction] = print
    use_short_format: bool = True
    clock: Callable[[], float] = time.perf_counter


_settings = TimerSettings()


def get_settings() -> TimerSettings:
    """Return the shared settings object consulted by new timers."""

    return _settings


def configure(**overrides: Any) -> TimerSettings:
    """Update fields on the shared settings object.

    Existing timers keep the values they captured when they were created.
    """

    known = {f.name for f in fields(TimerSettings)}
    unknown = sorted(set(overrides) - known)
    if unknown:
        raise TypeError(f"Unknown timer settings: {', '.join(unknown)}")
    for key, value in overrides.items():
        setattr(_settings, key, value)
    return _settings


def reset_settings() -> TimerSettings:
    """Restore the shared settings to their import-time defaults."""

    defaults = TimerSettings()
    for f in fields(TimerSettings):
        setattr(_settings, f.name, getattr(defaults, f.name))
    return _settings


def resolve(*candidates: Optional[T]) -> Optional[T]:
    """Return the first candidate that is not ``None``."""

    for candidate in candidates:
        if candidate is not None:
            return candidate
    return None


def resolve_log_action(explicit: Optional[LogAction], settings: TimerSettings) -> LogAction:
    action = resolve(explicit, settings.log_action)
    if action is None:
        raise TimerConfigurationError("Missing log action")
    return action


__all__ = [
    "LogAction",
    "TimerConfigurationError",
    "TimerSettings",
    "configure",
    "get_settings",
    "reset_settings",
    "resolve",
    "resolve_log_action",
]
