from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

import typer

from ctimer.core.timing.timespec import Timespec
from ctimer.sdk import config as sdk_config
from ctimer.sdk.runtime import Session


app = typer.Typer(add_completion=False, no_args_is_help=True)


def _open_session(events: Optional[Path], measure_on_stop: bool) -> Session:
    session = Session.from_config(events_path=events, measure_on_stop=measure_on_stop)
    if session.writer is not None:
        typer.echo(f"[ctimer] writing events → {session.writer.path}", err=True)
    return session


def _echo_elapsed(label: str, t: Timespec) -> None:
    typer.echo(f"{label}: {t.seconds:f} s")
    typer.echo(f"{label}: {t.millis} ms")
    typer.echo(f"{label}: {t.micros} us")
    typer.echo(f"{label}: {t.nanos} ns")


@app.command()
def measure(
    seconds: float = typer.Option(1.0, "--seconds", "-s", min=0.0, help="How long to sleep while timing"),
    events: Optional[Path] = typer.Option(None, "--events", help="Append JSONL timing events to this file"),
    measure_on_stop: bool = typer.Option(
        sdk_config.SDK_CONFIG.measure_on_stop,
        "--measure-on-stop/--no-measure-on-stop",
        help="Measure inside stop(); defaults to CTIMER_MEASURE_ON_STOP",
    ),
) -> None:
    """Time a single sleep and print the elapsed time in every unit."""

    with _open_session(events, measure_on_stop) as session:
        session.start()
        time.sleep(seconds)
        session.stop()
        if not session.stopwatch.measure_on_stop:
            session.measure()
        _echo_elapsed("Elapsed time", session.elapsed)


@app.command()
def laps(
    count: int = typer.Option(5, "--count", "-n", min=1, help="Number of laps"),
    seconds: float = typer.Option(1.0, "--seconds", "-s", min=0.0, help="Sleep per lap"),
    events: Optional[Path] = typer.Option(None, "--events", help="Append JSONL timing events to this file"),
) -> None:
    """Accumulate several timed sleeps into one total."""

    with _open_session(events, measure_on_stop=False) as session:
        session.reset()
        for i in range(1, count + 1):
            session.start()
            time.sleep(seconds)
            session.stop()
            d = session.lap()
            typer.echo(f"Lap {i}: {d.seconds:f} s")
        _echo_elapsed("Total time", session.elapsed)


if __name__ == "__main__":
    app()
