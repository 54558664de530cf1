from dataclasses import dataclass, field
from typing import Optional

from ctimer.core.timing.timespec import (
    Timespec,
    timespec_add,
    timespec_msec,
    timespec_sec,
    timespec_sub,
)
from ctimer.sdk.clock import Clock, now_monotonic


class StopwatchError(RuntimeError):
    """Raised when a stopwatch field is read before anything was written to it."""


def _default_measure_on_stop() -> bool:
    # Imported here so the arithmetic never depends on environment parsing
    from ctimer.sdk import config as sdk_config

    return sdk_config.SDK_CONFIG.measure_on_stop


@dataclass
class Stopwatch:
    """Start/stop timestamps plus one accumulated duration.

    Not safe for concurrent use; keep one instance per thread or serialize
    access externally.
    """

    started: Optional[Timespec] = None
    stopped: Optional[Timespec] = None
    elapsed: Optional[Timespec] = None
    measure_on_stop: bool = field(default_factory=_default_measure_on_stop)
    clock: Clock = field(default=now_monotonic, repr=False, compare=False)

    def start(self) -> None:
        self.started = self.clock()

    def stop(self) -> None:
        if self.measure_on_stop and self.started is None:
            raise StopwatchError("stopwatch was never started")
        self.stopped = self.clock()
        if self.measure_on_stop:
            self.measure()

    def stop_and_measure(self) -> Timespec:
        if self.started is None:
            raise StopwatchError("stopwatch was never started")
        self.stopped = self.clock()
        return self.measure()

    def reset(self) -> None:
        self.elapsed = Timespec.zero()

    def measure(self) -> Timespec:
        """Overwrite ``elapsed`` with the latest start/stop interval."""
        self.elapsed = self._interval()
        return self.elapsed

    def lap(self) -> Timespec:
        """Add the latest start/stop interval to ``elapsed`` and return the interval."""
        if self.elapsed is None:
            raise StopwatchError("lap() needs elapsed; call reset() or measure() first")
        d = self._interval()
        self.elapsed = timespec_add(self.elapsed, d)
        return d

    def _interval(self) -> Timespec:
        if self.started is None:
            raise StopwatchError("stopwatch was never started")
        if self.stopped is None:
            raise StopwatchError("stopwatch was never stopped")
        return timespec_sub(self.started, self.stopped)

    @property
    def elapsed_sec(self) -> float:
        return timespec_sec(self._require_elapsed())

    @property
    def elapsed_ms(self) -> int:
        return timespec_msec(self._require_elapsed())

    def _require_elapsed(self) -> Timespec:
        if self.elapsed is None:
            raise StopwatchError("elapsed is unset; call reset(), measure() or lap() first")
        return self.elapsed
