"""Public exception types for loggable."""

from __future__ import annotations


class LoggableError(Exception):
    """Base class for all loggable exceptions."""


class LoggableConfigError(LoggableError, ValueError):
    """Raised when a decorator or interceptor is configured incorrectly."""
