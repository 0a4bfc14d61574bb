"""Invocation record describing one intercepted call."""

from __future__ import annotations

import inspect
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict, Field


class InvocationContext(BaseModel):
    """Target, method and arguments of a single call. Built fresh per call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type_name: str
    method_name: str
    signature: str
    args: tuple[object, ...] = ()
    kwargs: dict[str, object] = Field(default_factory=dict)

    def describe(self) -> str:
        return f"[class] {self.type_name} [method] {self.signature}"

    def render_arguments(self, max_size: int | None = None) -> str:
        """Render arguments as a list, e.g. ``[10, b=12]``."""
        parts = [render_value(value, max_size) for value in self.args]
        parts.extend(
            f"{key}={render_value(value, max_size)}" for key, value in self.kwargs.items()
        )
        return f"[{', '.join(parts)}]"


def describe_signature(func: Callable[..., object], *, skip_receiver: bool = False) -> str:
    """Return ``name(params) -> annotation``, dropping the receiver parameter if asked."""
    name = getattr(func, "__name__", "callable")
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return f"{name}(...)"
    try:
        sig = inspect.signature(func, eval_str=True)
    except Exception:
        # unresolvable forward references keep their string form
        pass
    params = list(sig.parameters.values())
    if skip_receiver and params:
        sig = sig.replace(parameters=params[1:])
    return f"{name}{sig}"


def render_value(value: object, max_size: int | None = None) -> str:
    try:
        text = repr(value)
    except Exception:
        text = f"<unrepresentable {type(value).__name__}>"
    return _truncate_if_needed(text, max_size)


def render_error_message(exc: BaseException) -> str:
    try:
        return str(exc)
    except Exception:
        return f"<unprintable {type(exc).__name__}>"


def _truncate_if_needed(text: str, limit: int | None) -> str:
    if limit is None or limit <= 0:
        return text
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... [TRUNCATED: original_size={len(text)}]"
