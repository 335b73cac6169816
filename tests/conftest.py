import random

import pytest

from orderstamp import StampGenerator


class FakeClock:
    """Clock advancing by ``step`` every time it is read."""

    def __init__(self, now: float = 1_700_000_000_000.0, step: float = 1.0) -> None:
        self.now = now
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def generator(clock: FakeClock) -> StampGenerator:
    return StampGenerator(clock=clock, rng=random.Random(1234))
