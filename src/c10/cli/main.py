"""
Main CLI application using Typer.

``c10clock run`` drives the terminal clock; the remaining commands are
one-shot conversions that print either the display string or JSON.
"""

from __future__ import annotations

import json as jsonlib
import sys
from typing import Any

import typer

from c10.domain.epochs import year_to_days, year_to_seconds, year_to_ticks
from c10.domain.system_time import SystemTime
from c10.infra.exceptions import C10Error
from c10.infra.logging import configure_logging, get_logger
from c10.infra.settings import settings
from c10.runtime.clock import SystemWallClock, WallClock
from c10.runtime.pace import DriftCompensatedScheduler, period_from_hz

from .terminal import TerminalSession, sigterm_as_exit

app = typer.Typer(help="C10 decimal clock")


def _emit(ctx: typer.Context, payload: dict[str, Any], human: str, json_output: bool) -> None:
    if json_output or (ctx.obj or {}).get("json"):
        typer.echo(jsonlib.dumps(payload, indent=2))
    else:
        typer.echo(human)


def _fail(exc: Exception) -> typer.Exit:
    typer.echo(f"Error: {exc}", err=True)
    return typer.Exit(1)


def make_render(wall_clock: WallClock, session: TerminalSession):
    """Build the per-cycle action: sample, decompose, draw."""

    def render() -> None:
        session.redraw(wall_clock.now().calendar().format())

    return render


@app.command("run")
def run(
    rate: float = typer.Option(settings.update_rate_hz, "--rate", "-r", help="Updates per second"),
    window: int = typer.Option(settings.drift_window, "--window", "-w", help="Drift samples averaged for correction"),
    cycles: int = typer.Option(None, "--cycles", "-n", help="Stop after this many updates"),
    clamp: bool = typer.Option(
        settings.clamp_negative_sleep,
        "--clamp/--no-clamp",
        help="Sleep zero instead of failing when the correction exceeds the period",
    ),
):
    """Show the C10 clock in the terminal, updating at a drift-corrected cadence."""
    log = get_logger(__name__)
    if window < 1:
        raise _fail(ValueError("window must be at least 1"))
    try:
        period_ns = period_from_hz(rate)
    except ValueError as e:
        raise _fail(e)

    with sigterm_as_exit(), TerminalSession(sys.stdout) as session:
        scheduler = DriftCompensatedScheduler(
            action=make_render(SystemWallClock(), session),
            period_ns=period_ns,
            window=window,
            clamp_negative_sleep=clamp,
        )
        try:
            scheduler.run_forever(max_cycles=cycles)
        except KeyboardInterrupt:
            log.info("clock_interrupted", cycles=scheduler.cycles)
        except C10Error as e:
            log.error("clock_failed", error=str(e), cycles=scheduler.cycles)
            raise _fail(e)


@app.command("now")
def now(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Print the current C10 date and time once."""
    try:
        ts = SystemWallClock().now()
        fields = ts.calendar()
    except C10Error as e:
        raise _fail(e)
    _emit(ctx, {"ticks": ts.ticks, **fields.to_dict(), "display": fields.format()}, fields.format(), json_output)


@app.command("convert")
def convert(
    ctx: typer.Context,
    seconds: int = typer.Argument(..., help="Seconds since the Unix epoch"),
    nanos: int = typer.Option(0, "--nanos", help="Sub-second nanoseconds"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Convert a Unix timestamp to C10."""
    try:
        ts = SystemTime.from_unix(seconds, nanos)
        fields = ts.calendar()
    except (C10Error, ValueError) as e:
        raise _fail(e)
    payload = {"seconds": seconds, "nanos": nanos, "ticks": ts.ticks, **fields.to_dict(), "display": fields.format()}
    _emit(ctx, payload, fields.format(), json_output)


@app.command("epoch")
def epoch(
    ctx: typer.Context,
    year: int = typer.Argument(..., help="Calendar year"),
    json_output: bool = typer.Option(False, "--json", help="Output in JSON format"),
):
    """Show where a year starts relative to the Unix epoch."""
    try:
        payload = {
            "year": year,
            "days": year_to_days(year),
            "seconds": year_to_seconds(year),
            "ticks": year_to_ticks(year),
        }
    except C10Error as e:
        raise _fail(e)
    human = f"{year}: day {payload['days']}, second {payload['seconds']}, tick {payload['ticks']}"
    _emit(ctx, payload, human, json_output)


@app.callback()
def main(
    ctx: typer.Context,
    json: bool = typer.Option(False, "--json", help="Output in JSON format"),
    log_level: str = typer.Option(None, "--log-level", help="Override LOG_LEVEL"),
):
    """C10 - decimalized calendar and clock."""
    configure_logging(log_level)
    # Store JSON flag in context for subcommands to use
    ctx.ensure_object(dict)
    ctx.obj["json"] = json


def cli():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    cli()
