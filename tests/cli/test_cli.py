from __future__ import annotations

import io
import json
import re

from typer.testing import CliRunner

from c10.cli.main import app, make_render
from c10.cli.terminal import CLEAR_SCREEN, CURSOR_HOME, HIDE_CURSOR, SHOW_CURSOR, TerminalSession
from c10.domain.duration import INTERVAL
from c10.domain.system_time import SystemTime
from c10.runtime.clock import SteppedWallClock

runner = CliRunner()

DISPLAY = re.compile(r"^\d{4,} \d{2}\.\d{2} \d{2}:\d{2}:\d{2}$")


def test_convert_one_day_after_epoch():
    result = runner.invoke(app, ["convert", "86400"])
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "1970 01.02 00:00:00"


def test_convert_json():
    result = runner.invoke(app, ["convert", "1672531200", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["year"] == 2023
    assert payload["ticks"] == 19_358_000_000
    assert payload["display"] == "2023 01.01 00:00:00"


def test_global_json_flag():
    result = runner.invoke(app, ["--json", "convert", "43200"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)["interval"] == 50


def test_convert_rejects_bad_nanoseconds():
    result = runner.invoke(app, ["convert", "0", "--nanos", "2000000000"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_epoch():
    result = runner.invoke(app, ["epoch", "2023", "--json"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "year": 2023,
        "days": 19_358,
        "seconds": 1_672_531_200,
        "ticks": 19_358_000_000,
    }


def test_epoch_out_of_range():
    result = runner.invoke(app, ["epoch", "1969"])
    assert result.exit_code == 1
    assert "outside the supported span" in result.output


def test_now():
    result = runner.invoke(app, ["now"])
    assert result.exit_code == 0, result.output
    assert DISPLAY.match(result.stdout.strip())


def test_run_bounded_restores_cursor():
    result = runner.invoke(app, ["run", "--cycles", "3", "--rate", "200", "--clamp"])
    assert result.exit_code == 0, result.output
    out = result.stdout
    assert out.startswith(HIDE_CURSOR)
    assert out.count(CLEAR_SCREEN) == 3
    assert out.rstrip("\n").endswith(SHOW_CURSOR)
    frames = [frame.split("\n")[0] for frame in out.split(CLEAR_SCREEN)[1:]]
    assert all(DISPLAY.match(frame.removeprefix("\x1b[H")) for frame in frames)


def test_run_rejects_zero_rate():
    result = runner.invoke(app, ["run", "--rate", "0", "--cycles", "1"])
    assert result.exit_code == 1
    assert HIDE_CURSOR not in result.stdout


def test_run_rejects_empty_window():
    result = runner.invoke(app, ["run", "--window", "0", "--cycles", "1"])
    assert result.exit_code == 1


def test_render_draws_sampled_time():
    clock = SteppedWallClock(SystemTime.from_unix(1_672_531_200))
    stream = io.StringIO()
    render = make_render(clock, TerminalSession(stream))

    render()
    clock.advance(INTERVAL)
    render()

    frames = stream.getvalue().split(CLEAR_SCREEN + CURSOR_HOME)[1:]
    assert frames == ["2023 01.01 00:00:00\n", "2023 01.01 01:00:00\n"]
