"""Configuration for an Interceptor instance."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class InterceptorConfig(BaseModel):
    """Validated configuration for an Interceptor. Passed via DI at construction."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    logger_name: str = "loggable"
    max_value_size: int | None = None
    include_traceback: bool = True
