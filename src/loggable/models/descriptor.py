"""Per-call-site logging configuration."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


class LogLevel(StrEnum):
    """Severity used for before and response records."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"


_LEVEL_ALIASES = {"WARNING": LogLevel.WARN}


class LoggableConfig(BaseModel):
    """Immutable switches controlling what is logged around one call site.

    ``log_only_exceptions`` takes precedence over ``log_before`` and
    ``log_response`` and forces error records on even when
    ``log_exceptions`` is False.  ``log_arguments_and_results`` only affects
    the before and response records; error records never carry arguments.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="forbid")

    log_before: bool = True
    log_response: bool = True
    log_exceptions: bool = True
    log_only_exceptions: bool = False
    log_arguments_and_results: bool = True
    log_level: LogLevel = LogLevel.INFO

    @field_validator("log_level", mode="before")
    @classmethod
    def _coerce_level(cls, value: object) -> object:
        if isinstance(value, LogLevel) or not isinstance(value, str):
            return value
        name = value.strip().upper()
        if name in _LEVEL_ALIASES:
            return _LEVEL_ALIASES[name]
        try:
            return LogLevel(name)
        except ValueError:
            raise ValueError(
                f"Unsupported log level {value!r}. Use one of: "
                + ", ".join(level.value for level in LogLevel)
            ) from None

    @property
    def emits_before(self) -> bool:
        return self.log_before and not self.log_only_exceptions

    @property
    def emits_response(self) -> bool:
        return self.log_response and not self.log_only_exceptions

    @property
    def emits_exceptions(self) -> bool:
        return self.log_exceptions or self.log_only_exceptions
