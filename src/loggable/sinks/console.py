"""Rich-based console sink."""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.text import Text

_LEVEL_STYLES = {
    "TRACE": "dim",
    "DEBUG": "cyan",
    "INFO": "green",
    "WARN": "yellow",
    "ERROR": "bold red",
}


class ConsoleSink:
    """Print level-tagged records to a rich ``Console`` (stderr by default)."""

    def __init__(self, console: Console | None = None, *, show_time: bool = True) -> None:
        self.console = console or Console(stderr=True)
        self.show_time = show_time

    def trace(self, msg: str) -> None:
        self._write("TRACE", msg)

    def debug(self, msg: str) -> None:
        self._write("DEBUG", msg)

    def info(self, msg: str) -> None:
        self._write("INFO", msg)

    def warn(self, msg: str) -> None:
        self._write("WARN", msg)

    def error(self, msg: str) -> None:
        self._write("ERROR", msg)

    def _write(self, level: str, msg: str) -> None:
        line = Text()
        if self.show_time:
            line.append(datetime.now().strftime("%H:%M:%S.%f")[:-3] + " ", style="dim")
        line.append(f"{level:>5}", style=_LEVEL_STYLES[level])
        line.append(" | ")
        line.append(msg)
        self.console.print(line, soft_wrap=True, highlight=False)
