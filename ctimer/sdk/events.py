from __future__ import annotations
from pydantic import BaseModel
from typing import Any, Dict, Literal
EventVersion = Literal["v1"]
class BaseEvent(BaseModel):
    v: EventVersion = "v1"
    event_id: str
    session_id: str
    mono_ns: int
    type: str
class MeasureEvent(BaseEvent):
    type: Literal["stopwatch.measure"] = "stopwatch.measure"
    elapsed_ns: int
class LapEvent(BaseEvent):
    type: Literal["stopwatch.lap"] = "stopwatch.lap"
    lap_idx: int
    lap_ns: int
    total_ns: int
class ResetEvent(BaseEvent):
    type: Literal["stopwatch.reset"] = "stopwatch.reset"

def event_dump(event: BaseEvent) -> Dict[str, Any]:
    """Return a plain ``dict`` for JSON serialisation."""
    return event.model_dump()
