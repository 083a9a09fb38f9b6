"""Scoped execution-time logging."""

from importlib.metadata import version

from .config import (
    TimerConfigurationError,
    TimerSettings,
    configure,
    get_settings,
    reset_settings,
)
from .formatting import format_duration
from .timer import CodeTimer, timed

__all__ = [
    "CodeTimer",
    "TimerConfigurationError",
    "TimerSettings",
    "__version__",
    "configure",
    "format_duration",
    "get_settings",
    "reset_settings",
    "timed",
]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return version("codetimer")
        except Exception:  # pragma: no cover - fallback when pkg metadata missing
            return "0.1.0"
    raise AttributeError(name)
