from __future__ import annotations
from pydantic import BaseModel, Field, field_validator
from pathlib import Path
from typing import Any, Optional
import os
import warnings

_TRUTHY = {"1", "true", "yes", "on"}
DEFAULT_FLUSH_EVERY = 50

def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY

def _env_path(name: str) -> Optional[Path]:
    raw = os.getenv(name)
    return Path(raw) if raw else None

class TimerConfig(BaseModel):
    # Read once; stopwatches copy it at construction and never look again.
    measure_on_stop: bool = Field(default_factory=lambda: _env_flag('CTIMER_MEASURE_ON_STOP'))
    events_path: Optional[Path] = Field(default_factory=lambda: _env_path('CTIMER_EVENTS_PATH'))
    flush_every: int = Field(
        default_factory=lambda: os.getenv('CTIMER_FLUSH_EVERY', str(DEFAULT_FLUSH_EVERY)),
        validate_default=True,
    )

    @field_validator("flush_every", mode="before")
    @classmethod
    def _parse_flush_every(cls, v: Any) -> int:
        try:
            n = int(v)
        except (TypeError, ValueError):
            warnings.warn(
                f"CTIMER_FLUSH_EVERY={v!r} is not an integer; using {DEFAULT_FLUSH_EVERY}",
                RuntimeWarning,
                stacklevel=2,
            )
            return DEFAULT_FLUSH_EVERY
        return max(1, n)

def load_config() -> TimerConfig:
    return TimerConfig()

SDK_CONFIG = load_config()
