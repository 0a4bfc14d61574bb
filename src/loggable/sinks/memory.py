"""In-memory sink."""

from __future__ import annotations

import threading
from typing import Literal, NamedTuple

SinkLevel = Literal["trace", "debug", "info", "warn", "error"]


class LogRecord(NamedTuple):
    level: SinkLevel
    message: str


class MemorySink:
    """In-memory sink. Good for tests and short-lived scripts."""

    def __init__(self) -> None:
        self._records: list[LogRecord] = []
        self._lock = threading.Lock()

    @property
    def records(self) -> list[LogRecord]:
        with self._lock:
            return list(self._records)

    def messages(self, level: SinkLevel | None = None) -> list[str]:
        return [record.message for record in self.records if level is None or record.level == level]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def _append(self, level: SinkLevel, msg: str) -> None:
        with self._lock:
            self._records.append(LogRecord(level, msg))

    def trace(self, msg: str) -> None:
        self._append("trace", msg)

    def debug(self, msg: str) -> None:
        self._append("debug", msg)

    def info(self, msg: str) -> None:
        self._append("info", msg)

    def warn(self, msg: str) -> None:
        self._append("warn", msg)

    def error(self, msg: str) -> None:
        self._append("error", msg)
