"""JSON-lines sink for stopwatch events.

One event per line, appended, so several runs can share a file.  Lines are
flushed every ``flush_every`` events and on close.
"""

from __future__ import annotations

import json
from pathlib import Path
from threading import Lock
from typing import IO, Optional

from .events import BaseEvent, event_dump


class JsonlWriter:
    def __init__(self, out_path: Path, flush_every: int = 50):
        out_path.parent.mkdir(parents=True, exist_ok=True)
        self.path = out_path
        self.flush_every = max(1, flush_every)
        self.count = 0
        self._f: Optional[IO[str]] = out_path.open("a", encoding="utf-8")
        # one process, many threads
        self._lock = Lock()

    def __enter__(self) -> "JsonlWriter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._f is None

    def write(self, event: BaseEvent) -> None:
        line = json.dumps(event_dump(event), ensure_ascii=False)
        with self._lock:
            if self._f is None:
                raise ValueError(f"event log {self.path} is closed")
            self._f.write(line + "\n")
            self.count += 1
            if self.count % self.flush_every == 0:
                self._f.flush()

    def close(self) -> None:
        with self._lock:
            f, self._f = self._f, None
        if f is not None:
            f.close()
