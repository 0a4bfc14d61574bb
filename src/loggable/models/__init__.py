"""Data models for call logging."""

from .descriptor import LoggableConfig, LogLevel
from .invocation import InvocationContext

__all__ = [
    "InvocationContext",
    "LogLevel",
    "LoggableConfig",
]
