import io
import time

import pytest
from rich.console import Console

from ..src.utils.ui import ConsoleUIManager, ProgressTicker


def make_console():
    buffer = io.StringIO()
    return Console(file=buffer, force_terminal=False, color_system=None, width=120), buffer


def test_ticker_prints_markers_until_stopped():
    console, buffer = make_console()
    with ProgressTicker(console, interval=0.01) as ticker:
        deadline = time.monotonic() + 2
        while ticker.ticks < 3 and time.monotonic() < deadline:
            time.sleep(0.01)
    ticks = ticker.ticks
    assert ticks >= 3
    time.sleep(0.05)
    assert ticker.ticks == ticks
    assert buffer.getvalue().count(".") == ticks


def test_progress_stops_ticker_on_failure():
    console, _ = make_console()
    ui = ConsoleUIManager(console=console, tick_interval=0.01)
    with pytest.raises(RuntimeError):
        with ui.progress() as ticker:
            raise RuntimeError("boom")
    assert ticker._thread is None


def test_progress_disabled_when_quiet():
    console, buffer = make_console()
    ui = ConsoleUIManager(quiet=True, console=console)
    with ui.progress() as ticker:
        assert ticker is None
    ui.info("hidden")
    ui.error("shown")
    output = buffer.getvalue()
    assert "hidden" not in output
    assert "shown" in output


def test_status_lines():
    console, buffer = make_console()
    ui = ConsoleUIManager(console=console, show_progress=False)
    ui.success("Translated in.txt to out.txt using Basic API")
    ui.warning("careful")
    output = buffer.getvalue()
    assert "Translated in.txt to out.txt using Basic API" in output
    assert "careful" in output


def test_status_line_not_wrapped_on_narrow_console():
    buffer = io.StringIO()
    console = Console(file=buffer, force_terminal=False, color_system=None, width=40)
    ui = ConsoleUIManager(console=console)
    path = "/tmp/" + "a-very-long-directory-name/" * 4 + "out.csv"
    ui.success(f"Translated in.csv to {path}")
    assert path in buffer.getvalue()
    assert buffer.getvalue().count("\n") == 1
