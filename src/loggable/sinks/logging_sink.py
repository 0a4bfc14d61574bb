"""Sink writing to the standard library ``logging`` module."""

from __future__ import annotations

import logging

TRACE = 5

logging.addLevelName(TRACE, "TRACE")

# sink method, Interceptor._emit, phase method, Interceptor.intercept, decorator wrapper
CALL_SITE_STACKLEVEL = 6


class LoggingSink:
    """Forward records to a ``logging.Logger``. ``warn`` maps to WARNING.

    ``stacklevel`` is passed to the logger so that ``funcName``/``lineno``
    point at the caller of the decorated function rather than at this sink.
    """

    def __init__(
        self,
        logger: logging.Logger | str | None = None,
        *,
        stacklevel: int = CALL_SITE_STACKLEVEL,
    ) -> None:
        if logger is None or isinstance(logger, str):
            logger = logging.getLogger(logger or "loggable")
        self.logger = logger
        self.stacklevel = stacklevel

    def trace(self, msg: str) -> None:
        self.logger.log(TRACE, msg, stacklevel=self.stacklevel)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg, stacklevel=self.stacklevel)

    def info(self, msg: str) -> None:
        self.logger.info(msg, stacklevel=self.stacklevel)

    def warn(self, msg: str) -> None:
        self.logger.warning(msg, stacklevel=self.stacklevel)

    def error(self, msg: str) -> None:
        self.logger.error(msg, stacklevel=self.stacklevel)
