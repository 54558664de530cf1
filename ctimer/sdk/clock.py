from __future__ import annotations
import time, ulid
from typing import Callable
from ctimer.core.timing.timespec import Timespec

# Any zero-arg callable returning a Timespec; tests pass simulated clocks.
Clock = Callable[[], Timespec]

def now_monotonic_ns() -> int: return time.monotonic_ns()
def now_monotonic() -> Timespec: return Timespec.from_ns(now_monotonic_ns())
def new_ulid() -> str: return str(ulid.new())
