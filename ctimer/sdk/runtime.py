from __future__ import annotations
from pathlib import Path
from typing import Optional
from ctimer.core.timing.stopwatch import Stopwatch
from ctimer.core.timing.timespec import Timespec
from .clock import Clock, new_ulid, now_monotonic, now_monotonic_ns
from . import config as sdk_config
from .events import BaseEvent, LapEvent, MeasureEvent, ResetEvent
from .logging import JsonlWriter


class Session:
    """A named stopwatch that records each reset/measure/lap as a JSONL event.

    Without a writer it behaves exactly like the wrapped :class:`Stopwatch`.
    """

    def __init__(
        self,
        name: str | None = None,
        writer: Optional[JsonlWriter] = None,
        measure_on_stop: Optional[bool] = None,
        clock: Optional[Clock] = None,
    ):
        self.session_id = new_ulid()
        self.name = name or self.session_id
        self.writer = writer
        self.laps = 0
        self.stopwatch = Stopwatch(
            measure_on_stop=sdk_config.SDK_CONFIG.measure_on_stop if measure_on_stop is None else measure_on_stop,
            clock=clock or now_monotonic,
        )

    @classmethod
    def from_config(cls, name: str | None = None, events_path: Optional[Path] = None, **kwargs) -> "Session":
        """Attach a writer on ``events_path``, else on ``SDK_CONFIG.events_path`` when set."""
        cfg = sdk_config.SDK_CONFIG
        path = events_path or cfg.events_path
        writer = JsonlWriter(path, flush_every=cfg.flush_every) if path is not None else None
        return cls(name=name, writer=writer, **kwargs)

    def __enter__(self) -> "Session":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def _base(self):
        return dict(event_id=new_ulid(), session_id=self.session_id, mono_ns=now_monotonic_ns())

    def _emit(self, e: BaseEvent) -> None:
        if self.writer is not None:
            self.writer.write(e)

    def start(self) -> None: self.stopwatch.start()

    def stop(self) -> None:
        self.stopwatch.stop()
        if self.stopwatch.measure_on_stop:
            self._emit(MeasureEvent(elapsed_ns=self.stopwatch.elapsed.nanos, **self._base()))

    def reset(self) -> None:
        self.stopwatch.reset()
        self.laps = 0
        self._emit(ResetEvent(**self._base()))

    def measure(self) -> Timespec:
        elapsed = self.stopwatch.measure()
        self._emit(MeasureEvent(elapsed_ns=elapsed.nanos, **self._base()))
        return elapsed

    def lap(self) -> Timespec:
        d = self.stopwatch.lap()
        self.laps += 1
        self._emit(LapEvent(lap_idx=self.laps, lap_ns=d.nanos, total_ns=self.stopwatch.elapsed.nanos, **self._base()))
        return d

    @property
    def elapsed(self) -> Optional[Timespec]:
        return self.stopwatch.elapsed

    def close(self) -> None:
        if self.writer is not None:
            self.writer.close()
