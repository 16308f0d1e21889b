import logging

import pytest

from sfid.utils.snowflake import set_default_generator


class FakeClock:
    """A controllable millisecond clock.

    Each call returns ``now``; ``ticks`` is an optional list of values to
    return first, one per call, before falling back to ``now``.
    """

    def __init__(self, now: int = 1_700_000_000_000):
        self.now = now
        self.ticks = []
        self.calls = 0

    def __call__(self) -> int:
        self.calls += 1
        if self.ticks:
            self.now = self.ticks.pop(0)
        return self.now

    def advance(self, millis: int = 1) -> None:
        self.now += millis


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture(autouse=True)
def restore_logger_level():
    logger = logging.getLogger("sfid")
    level = logger.level
    yield
    logger.setLevel(level)


@pytest.fixture(autouse=True)
def reset_default_generator():
    set_default_generator(None)
    yield
    set_default_generator(None)
