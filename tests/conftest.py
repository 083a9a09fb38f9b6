from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from codetimer.config import reset_settings


class FakeClock:
    """Manually advanced clock returning seconds."""

    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def set(self, seconds: float) -> None:
        self.now = seconds


@pytest.fixture(autouse=True)
def default_settings():
    settings = reset_settings()
    yield settings
    reset_settings()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def lines():
    """Recording log action."""
    return []
