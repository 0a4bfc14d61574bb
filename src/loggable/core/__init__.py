"""Core interception runtime."""

from .context import get_interceptor, set_default_interceptor, use_interceptor
from .decorators import loggable
from .interceptor import Interceptor
from .interceptor_config import InterceptorConfig
from .resolution import resolve_config

__all__ = [
    "Interceptor",
    "InterceptorConfig",
    "get_interceptor",
    "loggable",
    "resolve_config",
    "set_default_interceptor",
    "use_interceptor",
]
