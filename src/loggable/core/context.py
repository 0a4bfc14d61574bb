"""Default and context-scoped interceptor lookup."""

from __future__ import annotations

import contextvars
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from .interceptor import Interceptor

_default_interceptor: Interceptor | None = None
_default_lock = threading.Lock()

_current_interceptor: contextvars.ContextVar[Interceptor | None] = contextvars.ContextVar(
    "loggable_current_interceptor",
    default=None,
)


def get_interceptor() -> Interceptor:
    """Return the interceptor for the current context, creating the default lazily."""
    global _default_interceptor
    scoped = _current_interceptor.get()
    if scoped is not None:
        return scoped
    if _default_interceptor is None:
        with _default_lock:
            if _default_interceptor is None:
                _default_interceptor = Interceptor()
    return _default_interceptor


def set_default_interceptor(interceptor: Interceptor | None) -> None:
    global _default_interceptor
    _default_interceptor = interceptor


def push_interceptor(interceptor: Interceptor) -> contextvars.Token[Interceptor | None]:
    return _current_interceptor.set(interceptor)


def reset_interceptor(token: contextvars.Token[Interceptor | None]) -> None:
    _current_interceptor.reset(token)


@contextmanager
def use_interceptor(interceptor: Interceptor) -> Iterator[Interceptor]:
    """Route calls made in this context (thread or task) to ``interceptor``."""
    token = push_interceptor(interceptor)
    try:
        yield interceptor
    finally:
        reset_interceptor(token)
