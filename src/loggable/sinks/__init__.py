"""Log sink implementations."""

from .base import LogSink
from .console import ConsoleSink
from .logging_sink import TRACE, LoggingSink
from .memory import LogRecord, MemorySink

__all__ = [
    "TRACE",
    "ConsoleSink",
    "LogRecord",
    "LogSink",
    "LoggingSink",
    "MemorySink",
]
