"""Monotonic stopwatch and seconds+nanoseconds timestamp arithmetic."""

from ctimer.core.timing import (
    Stopwatch,
    StopwatchError,
    Timespec,
    timespec_add,
    timespec_msec,
    timespec_nsec,
    timespec_sec,
    timespec_sub,
    timespec_usec,
)

__version__ = "0.2.0"

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
