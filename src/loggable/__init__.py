"""loggable: declarative logging around function and method calls.

Convenience API (delegates to a default Interceptor instance):
    loggable.configure(...)   -> set up the default interceptor
    loggable.loggable(...)    -> decorator for functions, methods and classes

DI API (construct your own Interceptor):
    from loggable.core import Interceptor, InterceptorConfig
    interceptor = Interceptor(sink=my_sink, config=InterceptorConfig(...))

    @loggable(interceptor=interceptor, log_level="DEBUG")
    def add(a, b):
        return a + b
"""

from __future__ import annotations

from typing import Literal

from .core import (
    Interceptor,
    InterceptorConfig,
    get_interceptor,
    loggable,
    set_default_interceptor,
    use_interceptor,
)
from .exceptions import LoggableConfigError, LoggableError
from .models import InvocationContext, LoggableConfig, LogLevel
from .sinks import ConsoleSink, LoggingSink, LogSink, MemorySink

SinkName = Literal["logging", "console", "memory"]


def configure(
    *,
    sink: SinkName | LogSink = "logging",
    logger_name: str = "loggable",
    max_value_size: int | None = None,
    include_traceback: bool = True,
) -> Interceptor:
    """Configure and install the default global Interceptor."""
    config = InterceptorConfig(
        logger_name=logger_name,
        max_value_size=max_value_size,
        include_traceback=include_traceback,
    )
    interceptor = Interceptor(sink=_resolve_sink(sink, config), config=config)
    set_default_interceptor(interceptor)
    return interceptor


def _reset_default_interceptor() -> None:
    """Reset the default interceptor. Used by test fixtures."""
    set_default_interceptor(None)


def _resolve_sink(sink: SinkName | LogSink, config: InterceptorConfig) -> LogSink:
    if not isinstance(sink, str):
        return sink
    if sink == "logging":
        return LoggingSink(config.logger_name)
    if sink == "console":
        return ConsoleSink()
    if sink == "memory":
        return MemorySink()
    raise LoggableConfigError(
        "Unsupported sink value. Use 'logging', 'console', 'memory', or a LogSink instance."
    )


__all__ = [
    "ConsoleSink",
    "Interceptor",
    "InterceptorConfig",
    "InvocationContext",
    "LogLevel",
    "LogSink",
    "LoggableConfig",
    "LoggableConfigError",
    "LoggableError",
    "LoggingSink",
    "MemorySink",
    "configure",
    "get_interceptor",
    "loggable",
    "use_interceptor",
]
