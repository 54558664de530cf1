"""Seconds + nanoseconds timestamps and the arithmetic on them.

A :class:`Timespec` is either an absolute monotonic instant or a duration,
depending on how it was obtained.  The helpers below are pure: they never
touch the clock and always return a new value.

None of the conversions guard against large values.  Python integers do not
overflow, so ``timespec_nsec`` is exact for any second count; only
``timespec_sec`` is subject to float rounding.
"""

from __future__ import annotations

from dataclasses import dataclass

MSEC_PER_SEC = 1_000
USEC_PER_SEC = 1_000_000
NSEC_PER_SEC = 1_000_000_000


def _trunc_div(a: int, b: int) -> int:
    # C integer division: rounds toward zero, unlike ``//``
    q = abs(a) // b
    return q if a >= 0 else -q


@dataclass(frozen=True)
class Timespec:
    sec: int = 0
    nsec: int = 0

    @classmethod
    def zero(cls) -> "Timespec":
        return cls(0, 0)

    @classmethod
    def from_ns(cls, ns: int) -> "Timespec":
        """Build a normalized value (``0 <= nsec < 10**9``) from a nanosecond count."""
        sec, nsec = divmod(ns, NSEC_PER_SEC)
        return cls(sec, nsec)

    def __sub__(self, other: "Timespec") -> "Timespec":
        if not isinstance(other, Timespec):
            return NotImplemented
        return timespec_sub(other, self)

    def __add__(self, other: "Timespec") -> "Timespec":
        if not isinstance(other, Timespec):
            return NotImplemented
        return timespec_add(self, other)

    @property
    def seconds(self) -> float:
        return timespec_sec(self)

    @property
    def millis(self) -> int:
        return timespec_msec(self)

    @property
    def micros(self) -> int:
        return timespec_usec(self)

    @property
    def nanos(self) -> int:
        return timespec_nsec(self)


def timespec_sub(t1: Timespec, t2: Timespec) -> Timespec:
    """Return ``t2 - t1``.

    When the components disagree in sign one second is borrowed (or returned)
    so both carry the sign of the whole difference.  A ``t2`` earlier than
    ``t1`` yields a negative duration; nothing is clamped.
    """
    nsec = t2.nsec - t1.nsec
    sec = t2.sec - t1.sec
    if sec > 0 and nsec < 0:
        nsec += NSEC_PER_SEC
        sec -= 1
    elif sec < 0 and nsec > 0:
        nsec -= NSEC_PER_SEC
        sec += 1
    return Timespec(sec, nsec)


def timespec_add(t1: Timespec, t2: Timespec) -> Timespec:
    """Return ``t1 + t2``.

    Both operands are expected to be normalized, so a single carry suffices.
    """
    nsec = t1.nsec + t2.nsec
    sec = t1.sec + t2.sec
    if nsec >= NSEC_PER_SEC:
        nsec -= NSEC_PER_SEC
        sec += 1
    return Timespec(sec, nsec)


def timespec_sec(t: Timespec) -> float:
    return t.sec + t.nsec / NSEC_PER_SEC


def timespec_msec(t: Timespec) -> int:
    return t.sec * MSEC_PER_SEC + _trunc_div(t.nsec, USEC_PER_SEC)


def timespec_usec(t: Timespec) -> int:
    return t.sec * USEC_PER_SEC + _trunc_div(t.nsec, MSEC_PER_SEC)


def timespec_nsec(t: Timespec) -> int:
    return t.sec * NSEC_PER_SEC + t.nsec


__all__ = [
    "MSEC_PER_SEC",
    "USEC_PER_SEC",
    "NSEC_PER_SEC",
    "Timespec",
    "timespec_sub",
    "timespec_add",
    "timespec_sec",
    "timespec_msec",
    "timespec_usec",
    "timespec_nsec",
]
