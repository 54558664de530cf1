# tests/unit/test_runtime.py
import json

import pytest

from ctimer.core.timing.timespec import Timespec
from ctimer.sdk import config as config_mod
from ctimer.sdk.events import ResetEvent
from ctimer.sdk.logging import JsonlWriter
from ctimer.sdk.runtime import Session


def _read_events(path):
    return [json.loads(x) for x in path.read_text(encoding="utf-8").splitlines() if x.strip()]


def _reset_event(idx: int) -> ResetEvent:
    return ResetEvent(event_id=f"evt-{idx}", session_id="s-é", mono_ns=idx)


def test_writer_appends_and_flushes(tmp_path):
    out = tmp_path / "nested" / "events.jsonl"
    w = JsonlWriter(out, flush_every=2)
    w.write(_reset_event(1))
    w.write(_reset_event(2))
    # flushed after the second write, before close
    events = _read_events(out)
    assert [e["event_id"] for e in events] == ["evt-1", "evt-2"]
    assert events[0] == {"v": "v1", "event_id": "evt-1", "session_id": "s-é", "mono_ns": 1, "type": "stopwatch.reset"}
    w.write(_reset_event(3))
    w.close()
    w.close()  # second close is a no-op
    assert w.closed
    assert w.count == 3
    assert len(_read_events(out)) == 3

    with JsonlWriter(out) as again:
        again.write(_reset_event(4))
    assert again.closed
    assert len(_read_events(out)) == 4


def test_writer_rejects_writes_after_close(tmp_path):
    w = JsonlWriter(tmp_path / "events.jsonl")
    w.close()
    with pytest.raises(ValueError, match="closed"):
        w.write(_reset_event(1))


def test_session_without_writer_is_a_plain_stopwatch(fake_clock):
    s = Session(name="bare", measure_on_stop=False, clock=fake_clock)
    s.reset()
    s.start(); fake_clock.advance(1); s.stop()
    assert s.lap() == Timespec(1, 0)
    assert s.elapsed == Timespec(1, 0)
    assert s.name == "bare"
    s.close()


def test_session_name_defaults_to_id(fake_clock):
    s = Session(clock=fake_clock)
    assert s.name == s.session_id
    assert len(s.session_id) == 26


def test_session_emits_lap_events(tmp_path, fake_clock):
    out = tmp_path / "events.jsonl"
    s = Session(writer=JsonlWriter(out), measure_on_stop=False, clock=fake_clock)
    s.reset()
    for _ in range(3):
        s.start(); fake_clock.advance(0.5); s.stop(); s.lap()
    s.close()

    events = _read_events(out)
    assert [e["type"] for e in events] == ["stopwatch.reset"] + ["stopwatch.lap"] * 3
    laps = events[1:]
    assert [e["lap_idx"] for e in laps] == [1, 2, 3]
    assert all(e["lap_ns"] == 500_000_000 for e in laps)
    assert laps[-1]["total_ns"] == 1_500_000_000
    assert {e["session_id"] for e in events} == {s.session_id}
    assert len({e["event_id"] for e in events}) == 4
    assert all(e["v"] == "v1" for e in events)


def test_session_measure_on_stop_emits_once(tmp_path, fake_clock):
    out = tmp_path / "events.jsonl"
    s = Session(writer=JsonlWriter(out), measure_on_stop=True, clock=fake_clock)
    s.start(); fake_clock.advance(2); s.stop()
    s.close()

    (event,) = _read_events(out)
    assert event["type"] == "stopwatch.measure"
    assert event["elapsed_ns"] == 2_000_000_000
    assert s.elapsed == Timespec(2, 0)


def test_from_config_uses_events_path(monkeypatch, tmp_path, fake_clock):
    out = tmp_path / "cfg_events.jsonl"
    monkeypatch.setattr(config_mod.SDK_CONFIG, "events_path", out)
    s = Session.from_config(name="cfg", measure_on_stop=False, clock=fake_clock)
    s.start(); fake_clock.advance(1); s.stop(); s.measure()
    s.close()
    assert _read_events(out)[0]["elapsed_ns"] == 1_000_000_000


def test_from_config_without_path_has_no_writer(monkeypatch, fake_clock):
    monkeypatch.setattr(config_mod.SDK_CONFIG, "events_path", None)
    assert Session.from_config(clock=fake_clock).writer is None


def test_session_propagates_stopwatch_errors(fake_clock):
    from ctimer.core.timing.stopwatch import StopwatchError

    s = Session(measure_on_stop=False, clock=fake_clock)
    with pytest.raises(StopwatchError):
        s.measure()


def test_from_config_events_path_overrides_config(monkeypatch, tmp_path, fake_clock):
    configured = tmp_path / "configured.jsonl"
    explicit = tmp_path / "explicit.jsonl"
    monkeypatch.setattr(config_mod.SDK_CONFIG, "events_path", configured)
    monkeypatch.setattr(config_mod.SDK_CONFIG, "flush_every", 7)

    with Session.from_config(events_path=explicit, measure_on_stop=False, clock=fake_clock) as s:
        assert s.writer.path == explicit
        assert s.writer.flush_every == 7
        s.reset()

    assert s.writer.closed
    assert _read_events(explicit)[0]["type"] == "stopwatch.reset"
    assert not configured.exists()


def test_session_closes_writer_when_body_raises(tmp_path, fake_clock):
    from ctimer.core.timing.stopwatch import StopwatchError

    out = tmp_path / "events.jsonl"
    with pytest.raises(StopwatchError):
        with Session(writer=JsonlWriter(out), measure_on_stop=False, clock=fake_clock) as s:
            s.reset()
            s.lap()  # never started
    assert s.writer.closed
    assert [e["type"] for e in _read_events(out)] == ["stopwatch.reset"]
