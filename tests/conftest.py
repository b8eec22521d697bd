"""Fixtures compartidas: reloj simulado y store con ese reloj."""

import pytest

from memkv.store import Store


class FakeClock:
    """Reloj manual; ``advance`` mueve el tiempo sin dormir."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> Store:
    return Store(clock=clock)
