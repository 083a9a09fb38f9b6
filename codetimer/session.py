"""Active timer state: clock, step bookkeeping and log emission."""

from __future__ import annotations

from typing import Callable, Optional

from loguru import logger

from .config import LogAction
from .formatting import format_duration
from .utils.timers import Stopwatch


class TimingSession:
    """Time a named unit of work and report it through ``log_action``.

    A session moves from created to running on :meth:`start` and to finished
    on :meth:`finish`. Once finished it ignores every further call.
    """

    def __init__(
        self,
        name: str,
        log_action: LogAction,
        use_short_format: bool,
        start_immediately: bool = True,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.name = name
        self.log_action = log_action
        self.use_short_format = use_short_format
        self.stopwatch = Stopwatch(clock) if clock is not None else Stopwatch()
        self.last_step_elapsed = 0.0
        self.step_counter = 1
        self.finished = False

        if start_immediately:
            self.start()

    @property
    def is_running(self) -> bool:
        return self.stopwatch.is_running

    @property
    def elapsed(self) -> float:
        return self.stopwatch.elapsed

    def start(self) -> None:
        if self.finished:
            logger.trace("Ignoring start on finished timer {!r}", self.name)
            return
        if self.stopwatch.is_running:
            return
        self.stopwatch.start()
        self.log_action(f"Timer {self.name}: started")

    def log_step(self, step_name: Optional[str] = None) -> None:
        if self.finished:
            logger.trace("Ignoring step {!r} on finished timer {!r}", step_name, self.name)
            return
        total = self.stopwatch.elapsed
        step = total - self.last_step_elapsed
        label = step_name if step_name is not None else str(self.step_counter)
        self.log_action(
            f"Timer {self.name}, step {label}: finished in {self._format(step)} (total: {self._format(total)})"
        )
        self.last_step_elapsed = total
        self.step_counter += 1

    def finish(self) -> None:
        if self.finished:
            logger.trace("Timer {!r} already finished", self.name)
            return
        self.stopwatch.stop()
        self.finished = True
        total = self.stopwatch.elapsed
        message = f"Timer {self.name}: finished in {self._format(total)}"
        if self.step_counter > 1:
            message += f" (last step: {self._format(total - self.last_step_elapsed)})"
        self.log_action(message)

    def _format(self, seconds: float) -> str:
        return format_duration(seconds, self.use_short_format)


__all__ = ["TimingSession"]
