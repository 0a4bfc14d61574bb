"""The ``loggable`` decorator for functions, methods and classes."""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Literal, TypeVar, cast, overload

from ..exceptions import LoggableConfigError
from ..models import InvocationContext, LoggableConfig, LogLevel
from ..models.invocation import describe_signature
from .context import get_interceptor
from .interceptor import Interceptor
from .resolution import CONFIG_ATTR, resolve_config

T = TypeVar("T")

ReceiverKind = Literal["instance", "class"] | None

_WRAPPED_ATTR = "__loggable_wrapped__"


@overload
def loggable(target: T) -> T: ...


@overload
def loggable(
    target: None = None,
    *,
    config: LoggableConfig | None = None,
    interceptor: Interceptor | None = None,
    log_before: bool | None = None,
    log_response: bool | None = None,
    log_exceptions: bool | None = None,
    log_only_exceptions: bool | None = None,
    log_arguments_and_results: bool | None = None,
    log_level: LogLevel | str | None = None,
) -> Callable[[T], T]: ...


def loggable(
    target: object = None,
    *,
    config: LoggableConfig | None = None,
    interceptor: Interceptor | None = None,
    log_before: bool | None = None,
    log_response: bool | None = None,
    log_exceptions: bool | None = None,
    log_only_exceptions: bool | None = None,
    log_arguments_and_results: bool | None = None,
    log_level: LogLevel | str | None = None,
) -> object:
    """Log every call of a function, a method, or all public methods of a class.

    Usable bare (``@loggable``) or with descriptor fields
    (``@loggable(log_level="DEBUG", log_arguments_and_results=False)``), or
    with a ready ``config=LoggableConfig(...)``.  On a class, the descriptor
    becomes the default for every public method that has no descriptor of
    its own.  When ``interceptor`` is not given, the current interceptor is
    looked up on each call.
    """
    fields = {
        "log_before": log_before,
        "log_response": log_response,
        "log_exceptions": log_exceptions,
        "log_only_exceptions": log_only_exceptions,
        "log_arguments_and_results": log_arguments_and_results,
        "log_level": log_level,
    }
    overrides = {key: value for key, value in fields.items() if value is not None}
    if config is not None and overrides:
        raise LoggableConfigError(
            "Pass either config=LoggableConfig(...) or individual fields, not both: "
            + ", ".join(sorted(overrides))
        )
    descriptor = config if config is not None else LoggableConfig(**overrides)

    def decorator(obj: T) -> T:
        if inspect.isclass(obj):
            return cast(T, _decorate_class(obj, descriptor, interceptor))
        return cast(T, _decorate_member(obj, descriptor, interceptor, owner=None))

    if target is not None:
        return decorator(target)
    return decorator


def _decorate_class(cls: type, config: LoggableConfig, interceptor: Interceptor | None) -> type:
    setattr(cls, CONFIG_ATTR, config)
    for name, member in list(vars(cls).items()):
        if name.startswith("_") or _is_wrapped(member):
            continue
        if isinstance(member, (staticmethod, classmethod)) or inspect.isfunction(member):
            setattr(cls, name, _decorate_member(member, None, interceptor, owner=cls))
    return cls


def _decorate_member(
    member: object,
    config: LoggableConfig | None,
    interceptor: Interceptor | None,
    owner: type | None,
) -> object:
    if isinstance(member, staticmethod):
        return staticmethod(_wrap(member.__func__, config, interceptor, None, owner))
    if isinstance(member, classmethod):
        return classmethod(_wrap(member.__func__, config, interceptor, "class", owner))
    if not callable(member):
        raise LoggableConfigError(
            f"loggable can only decorate functions, methods or classes, got {type(member).__name__}"
        )
    func = cast(Callable[..., object], member)
    kind: ReceiverKind = "instance" if owner is not None else _guess_receiver(func)
    return _wrap(func, config, interceptor, kind, owner)


def _guess_receiver(func: Callable[..., object]) -> ReceiverKind:
    """Classify by the first parameter name, since the owning class does not exist yet."""
    try:
        params = list(inspect.signature(func).parameters)
    except (TypeError, ValueError):
        return None
    if not params:
        return None
    if params[0] == "self":
        return "instance"
    if params[0] == "cls":
        return "class"
    return None


def _wrap(
    func: Callable[..., object],
    config: LoggableConfig | None,
    interceptor: Interceptor | None,
    kind: ReceiverKind,
    owner: type | None,
) -> Callable[..., object]:
    signature = describe_signature(func, skip_receiver=kind is not None)
    method_name = getattr(func, "__name__", "callable")
    module_name = getattr(func, "__module__", None) or "__main__"
    fallback_type_name = owner.__name__ if owner is not None else _enclosing_name(func, module_name)

    def build_call(
        args: tuple[object, ...], kwargs: dict[str, object]
    ) -> tuple[LoggableConfig, InvocationContext]:
        target_type = owner
        call_args = args
        if kind is not None and args:
            receiver = args[0]
            target_type = receiver if kind == "class" and isinstance(receiver, type) else type(receiver)
            call_args = args[1:]
        context = InvocationContext(
            type_name=target_type.__name__ if target_type is not None else fallback_type_name,
            method_name=method_name,
            signature=signature,
            args=call_args,
            kwargs=kwargs,
        )
        return resolve_config(config, target_type), context

    if inspect.iscoroutinefunction(func):
        async_func = cast(Callable[..., Awaitable[object]], func)

        @wraps(func)
        async def async_wrapper(*args: object, **kwargs: object) -> object:
            descriptor, context = build_call(args, kwargs)
            active = interceptor or get_interceptor()
            return await active.intercept_async(
                descriptor, context, lambda: async_func(*args, **kwargs)
            )

        wrapper: Callable[..., object] = async_wrapper
    else:

        @wraps(func)
        def sync_wrapper(*args: object, **kwargs: object) -> object:
            descriptor, context = build_call(args, kwargs)
            active = interceptor or get_interceptor()
            return active.intercept(descriptor, context, lambda: func(*args, **kwargs))

        wrapper = sync_wrapper

    setattr(wrapper, CONFIG_ATTR, config)
    setattr(wrapper, _WRAPPED_ATTR, True)
    return wrapper


def _enclosing_name(func: Callable[..., object], module_name: str) -> str:
    """Name of the class a function was defined in, else the module's last component."""
    enclosing = getattr(func, "__qualname__", "").rpartition(".")[0].rpartition(".")[2]
    if enclosing and enclosing != "<locals>":
        return enclosing
    return module_name.rpartition(".")[2]


def _is_wrapped(member: object) -> bool:
    if isinstance(member, (staticmethod, classmethod)):
        member = member.__func__
    return bool(getattr(member, _WRAPPED_ATTR, False))
