"""Resolve the descriptor that applies to one call."""

from __future__ import annotations

from ..models import LoggableConfig

CONFIG_ATTR = "__loggable_config__"

_DEFAULT_CONFIG = LoggableConfig()


def resolve_config(
    method_config: LoggableConfig | None,
    owner: type | None = None,
) -> LoggableConfig:
    """Method-level config wins, then the nearest class-level config, then defaults.

    Looked up on every call so that class-level changes and subclass
    configuration are honoured for inherited methods.
    """
    if method_config is not None:
        return method_config
    if owner is not None:
        for klass in owner.__mro__:
            config = klass.__dict__.get(CONFIG_ATTR)
            if isinstance(config, LoggableConfig):
                return config
    return _DEFAULT_CONFIG
