"""Shared fixtures for the totpgen test suite."""

import pytest


class FrozenClock:
    """Settable stand-in for :func:`core.clock.system_clock`."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock() -> FrozenClock:
    return FrozenClock(1234567890.0)
