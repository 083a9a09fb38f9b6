"""Scoped code timers."""

from __future__ import annotations

import functools
import inspect
from typing import Any, Callable, Optional, TypeVar

from loguru import logger

from .config import LogAction, TimerSettings, get_settings, resolve, resolve_log_action
from .session import TimingSession

F = TypeVar("F", bound=Callable[..., Any])


def _caller_name(depth: int = 2) -> str:
    """Name of the function ``depth`` frames above this one, or ``""``."""

    frame = inspect.currentframe()
    try:
        for _ in range(depth):
            if frame is None:
                return ""
            frame = frame.f_back
        if frame is None:
            return ""
        name = frame.f_code.co_name
    finally:
        del frame
    # <module>, <lambda> and friends carry no useful name
    return "" if name.startswith("<") else name


class CodeTimer:
    """Log the execution time of a block of code, optionally step by step.

    Use :meth:`create` rather than the constructor. A timer created while
    timing is disabled holds no session and ignores every call::

        with CodeTimer.create("Load") as timer:
            parse()
            timer.log_step("parse")
            build()
    """

    def __init__(self, session: Optional[TimingSession] = None):
        self.session = session

    @classmethod
    def create(
        cls,
        name: Optional[str] = None,
        log_action: Optional[LogAction] = None,
        use_short_format: Optional[bool] = None,
        start_immediately: bool = True,
        enabled: Optional[bool] = None,
        settings: Optional[TimerSettings] = None,
    ) -> "CodeTimer":
        """Create a timer.

        Args:
            name: Name shown in every line. Defaults to the calling function's name.
            log_action: Receives each formatted line. Defaults to ``settings.log_action``.
            use_short_format: Render sub-minute durations as ``SS.fffffff``.
                Defaults to ``settings.use_short_format``.
            start_immediately: Start the clock before returning.
            enabled: Force the timer on or off, overriding ``settings.enabled``.
            settings: Defaults to consult. Defaults to the shared settings object.
        Raises:
            TimerConfigurationError: The timer is enabled but no log action is set.
        """

        settings = settings if settings is not None else get_settings()
        active = enabled is True or (enabled is None and settings.enabled)
        if not active:
            logger.trace("Timer {!r} disabled", name)
            return cls()

        if name is None:
            name = _caller_name()
        session = TimingSession(
            name,
            resolve_log_action(log_action, settings),
            resolve(use_short_format, settings.use_short_format),
            start_immediately=start_immediately,
            clock=settings.clock,
        )
        return cls(session)

    @property
    def enabled(self) -> bool:
        return self.session is not None

    def start(self) -> None:
        """Start the timer if it was not started at creation."""

        if self.session is not None:
            self.session.start()

    def log_step(self, step_name: Optional[str] = None) -> None:
        """Log the time since the previous step, or since start for the first one.

        Without ``step_name`` the step is labelled with its sequence number.
        """

        if self.session is not None:
            self.session.log_step(step_name)

    def release(self) -> None:
        """Stop the timer and log the total time. Later calls do nothing."""

        if self.session is not None:
            self.session.finish()

    close = release

    def __enter__(self) -> "CodeTimer":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    def __repr__(self) -> str:
        if self.session is None:
            return "CodeTimer(disabled)"
        return f"CodeTimer(name={self.session.name!r}, elapsed={self.session.elapsed:.7f})"


def timed(func: Optional[F] = None, *, name: Optional[str] = None, **create_kwargs: Any):
    """Decorator running every call of the wrapped function inside a :class:`CodeTimer`.

    Works bare (``@timed``), with a name (``@timed("Load")``) or with keyword
    arguments only. Extra keyword arguments are passed to :meth:`CodeTimer.create`.
    """

    if isinstance(func, str):
        func, name = None, func

    def decorator(fn: F) -> F:
        timer_name = name if name is not None else fn.__qualname__

        if inspect.iscoroutinefunction(fn):

            @functools.wraps(fn)
            async def async_wrapper(*args, **kwargs):
                with CodeTimer.create(timer_name, **create_kwargs):
                    return await fn(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(fn)
        def wrapper(*args, **kwargs):
            with CodeTimer.create(timer_name, **create_kwargs):
                return fn(*args, **kwargs)

        return wrapper  # type: ignore[return-value]

    if func is not None:
        return decorator(func)
    return decorator


__all__ = ["CodeTimer", "timed"]
