# tests/unit/conftest.py
import pytest

from ctimer.core.timing.timespec import NSEC_PER_SEC, Timespec


class FakeClock:
    """Simulated monotonic clock; only moves when told to."""

    def __init__(self, start: Timespec = Timespec(1000, 250_000_000)):
        self.now = start
        self.reads = 0

    def __call__(self) -> Timespec:
        self.reads += 1
        return self.now

    def advance(self, seconds: float = 0.0, ns: int = 0) -> None:
        self.now = self.now + Timespec.from_ns(int(seconds * NSEC_PER_SEC) + ns)


@pytest.fixture
def fake_clock():
    return FakeClock()
