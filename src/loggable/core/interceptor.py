"""Interceptor deciding and emitting the log records around one call."""

from __future__ import annotations

import traceback
import warnings
from collections.abc import Awaitable, Callable
from typing import TypeVar

from ..models import InvocationContext, LoggableConfig, LogLevel
from ..models.invocation import render_error_message, render_value
from ..sinks import LoggingSink, LogSink
from .interceptor_config import InterceptorConfig

R = TypeVar("R")

_SINK_METHODS = {
    LogLevel.TRACE: "trace",
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warn",
}


class Interceptor:
    """Stateless logging interceptor shared across all call sites.

    Error-handling contract
    ----------------------
    - Errors raised by ``proceed`` are re-raised unchanged, whatever the
      descriptor says. Only ``Exception`` subclasses produce an error record;
      ``KeyboardInterrupt``, ``SystemExit`` and task cancellation pass
      through silently.
    - A sink write that raises is reported with ``warnings.warn`` and
      dropped, so the wrapped call never fails because of logging.
    """

    def __init__(self, sink: LogSink | None = None, config: InterceptorConfig | None = None) -> None:
        self.config = config or InterceptorConfig()
        self.sink: LogSink = sink if sink is not None else LoggingSink(self.config.logger_name)

    def intercept(
        self,
        descriptor: LoggableConfig,
        context: InvocationContext,
        proceed: Callable[[], R],
    ) -> R:
        self._before(descriptor, context)
        try:
            result = proceed()
        except Exception as exc:
            self._failed(descriptor, context, exc)
            raise
        self._response(descriptor, context, result)
        return result

    async def intercept_async(
        self,
        descriptor: LoggableConfig,
        context: InvocationContext,
        proceed: Callable[[], Awaitable[R]],
    ) -> R:
        self._before(descriptor, context)
        try:
            result = await proceed()
        except Exception as exc:
            self._failed(descriptor, context, exc)
            raise
        self._response(descriptor, context, result)
        return result

    def _before(self, descriptor: LoggableConfig, context: InvocationContext) -> None:
        if not descriptor.emits_before:
            return
        message = f"[Before] {context.describe()}"
        if descriptor.log_arguments_and_results:
            message += f" [args] {context.render_arguments(self.config.max_value_size)}"
        self._emit(_SINK_METHODS[descriptor.log_level], message)

    def _response(self, descriptor: LoggableConfig, context: InvocationContext, result: object) -> None:
        if not descriptor.emits_response:
            return
        message = f"[Response] {context.describe()}"
        if descriptor.log_arguments_and_results:
            max_size = self.config.max_value_size
            message += (
                f" [args] {context.render_arguments(max_size)}"
                f" [Return] {render_value(result, max_size)}"
            )
        self._emit(_SINK_METHODS[descriptor.log_level], message)

    def _failed(self, descriptor: LoggableConfig, context: InvocationContext, exc: Exception) -> None:
        if not descriptor.emits_exceptions:
            return
        message = f"[Exception] {context.describe()} [Message] {render_error_message(exc)}"
        if self.config.include_traceback:
            message += "\n" + "".join(traceback.format_exception(exc)).rstrip("\n")
        self._emit("error", message)

    def _emit(self, method: str, message: str) -> None:
        try:
            getattr(self.sink, method)(message)
        except Exception:
            warnings.warn(
                f"loggable: sink failed to write a {method} record. The record has been dropped.",
                stacklevel=3,
            )
