from .stopwatch import Stopwatch, StopwatchError
from .timespec import (
    Timespec,
    timespec_add,
    timespec_msec,
    timespec_nsec,
    timespec_sec,
    timespec_sub,
    timespec_usec,
)

__all__ = [
    "Stopwatch",
    "StopwatchError",
    "Timespec",
    "timespec_add",
    "timespec_msec",
    "timespec_nsec",
    "timespec_sec",
    "timespec_sub",
    "timespec_usec",
]
