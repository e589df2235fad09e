import logging
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Optional

from rich.console import Console
from rich.text import Text


class ProgressTicker:
    """Prints a marker every `interval` seconds from a background thread.

    Purely cosmetic: it shares nothing with the translation work and stops
    as soon as `stop()` is called.
    """

    def __init__(self, console: Console, interval: float = 1.0, marker: str = "."):
        self.console = console
        self.interval = interval
        self.marker = marker
        self.ticks = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def _run(self):
        while not self._stop_event.wait(self.interval):
            self.console.print(self.marker, end="", style="dim", highlight=False)
            self.ticks += 1

    def start(self):
        if self._thread is not None:
            return
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._run, name="progress-ticker")
        self._thread.daemon = True
        self._thread.start()

    def stop(self):
        if self._thread is None:
            return
        self._stop_event.set()
        self._thread.join()
        self._thread = None
        if self.ticks:
            # Finish the line of markers
            self.console.print()

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()
        return False


class ConsoleUIManager:
    """Console output for the CLI, written to stderr so stdout stays clean."""

    def __init__(self, quiet: bool = False, show_progress: bool = True,
                 console: Optional[Console] = None, tick_interval: float = 1.0):
        """Initialize Console UI Manager.

        Args:
            quiet: Only print errors
            show_progress: Print the progress ticker while translating
            console: Console to print to (defaults to stderr)
            tick_interval: Seconds between progress markers
        """
        self.logger = logging.getLogger(__name__)
        self.console = console or Console(stderr=True, soft_wrap=True)
        self.quiet = quiet
        self.show_progress = show_progress and not quiet
        self.tick_interval = tick_interval

    def add_status(self, message: str, level: str = "info"):
        """Print a timestamped status line."""
        if self.quiet and level not in ("error", "critical"):
            return

        time = datetime.now().strftime("%H:%M:%S")
        style = {
            "debug": "dim",
            "info": "white",
            "success": "green",
            "warning": "yellow",
            "error": "red bold",
            "critical": "red bold reverse"
        }.get(level, "white")

        msg = Text()
        msg.append(f"[{time}] ", style="cyan")
        msg.append(message, style=style)

        self.console.print(msg, soft_wrap=True)

    def info(self, message: str):
        self.add_status(message, "info")

    def success(self, message: str):
        self.add_status(message, "success")

    def warning(self, message: str):
        self.add_status(message, "warning")

    def error(self, message: str):
        self.add_status(message, "error")

    def debug(self, message: str):
        self.add_status(message, "debug")

    @contextmanager
    def progress(self):
        """Run the progress ticker for the duration of the block."""
        if not self.show_progress:
            yield None
            return

        ticker = ProgressTicker(self.console, interval=self.tick_interval)
        with ticker:
            yield ticker
