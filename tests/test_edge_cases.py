"""Edge-case tests for sink failures, concurrency and non-Exception errors."""

from __future__ import annotations

import threading
import warnings
from concurrent.futures import ThreadPoolExecutor

import pytest

from loggable import LoggableConfig, loggable
from loggable.core import Interceptor
from loggable.models import InvocationContext
from loggable.sinks import MemorySink

# ---------------------------------------------------------------------------
# 1. Sink failure: call outcome unaffected
# ---------------------------------------------------------------------------


class _FailingSink:
    def trace(self, msg: str) -> None:
        raise OSError("disk full")

    debug = info = warn = error = trace


def _context() -> InvocationContext:
    return InvocationContext(type_name="Service", method_name="run", signature="run()")


def test_sink_failure_does_not_change_result() -> None:
    interceptor = Interceptor(sink=_FailingSink())

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        result = interceptor.intercept(LoggableConfig(), _context(), lambda: 42)

    assert result == 42
    warning_messages = [str(w.message) for w in caught]
    assert any("sink failed to write a info record" in msg for msg in warning_messages)


def test_sink_failure_does_not_mask_original_error() -> None:
    interceptor = Interceptor(sink=_FailingSink())
    error = ValueError("original")

    def proceed() -> int:
        raise error

    with warnings.catch_warnings(record=True), pytest.raises(ValueError) as excinfo:
        warnings.simplefilter("always")
        interceptor.intercept(LoggableConfig(), _context(), proceed)

    assert excinfo.value is error


# ---------------------------------------------------------------------------
# 2. Exception whose __str__ raises: original error still propagates
# ---------------------------------------------------------------------------


class _UnprintableError(Exception):
    def __str__(self) -> str:
        raise RuntimeError("str failed")


def test_unprintable_exception_is_reraised_unchanged() -> None:
    sink = MemorySink()
    interceptor = Interceptor(sink=sink)
    error = _UnprintableError()

    def proceed() -> int:
        raise error

    with pytest.raises(_UnprintableError) as excinfo:
        interceptor.intercept(LoggableConfig(), _context(), proceed)

    assert excinfo.value is error
    (message,) = sink.messages("error")
    assert message.splitlines()[0] == (
        "[Exception] [class] Service [method] run() [Message] <unprintable _UnprintableError>"
    )


@pytest.mark.asyncio
async def test_unprintable_exception_is_reraised_unchanged_async() -> None:
    sink = MemorySink()
    interceptor = Interceptor(sink=sink)
    error = _UnprintableError()

    async def proceed() -> int:
        raise error

    with pytest.raises(_UnprintableError) as excinfo:
        await interceptor.intercept_async(LoggableConfig(log_only_exceptions=True), _context(), proceed)

    assert excinfo.value is error
    assert [record.level for record in sink.records] == ["error"]


# ---------------------------------------------------------------------------
# 3. BaseException: propagates without an error record
# ---------------------------------------------------------------------------


def test_keyboard_interrupt_is_not_logged_as_error() -> None:
    sink = MemorySink()
    interceptor = Interceptor(sink=sink)

    def proceed() -> int:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        interceptor.intercept(LoggableConfig(log_only_exceptions=True), _context(), proceed)

    assert sink.records == []


# ---------------------------------------------------------------------------
# 4. Unrepresentable values: rendered, not raised
# ---------------------------------------------------------------------------


class _BadRepr:
    def __repr__(self) -> str:
        raise RuntimeError("no repr")


def test_unrepresentable_argument_is_rendered_safely() -> None:
    sink = MemorySink()

    @loggable(interceptor=Interceptor(sink=sink), log_response=False)
    def consume(value):
        return None

    consume(_BadRepr())

    assert sink.messages() == ["[Before] [class] test_edge_cases [method] consume(value) [args] [<unrepresentable _BadRepr>]"]


# ---------------------------------------------------------------------------
# 5. Concurrent calls: no serialization, one record pair per call
# ---------------------------------------------------------------------------


def test_concurrent_calls_are_not_serialized() -> None:
    sink = MemorySink()
    workers = 8
    barrier = threading.Barrier(workers, timeout=5)

    @loggable(interceptor=Interceptor(sink=sink))
    def rendezvous(index):
        barrier.wait()
        return index * 2

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(rendezvous, range(workers)))

    assert results == [index * 2 for index in range(workers)]
    assert len(sink.records) == workers * 2
    for index in range(workers):
        assert f"[args] [{index}] [Return] {index * 2}" in "\n".join(sink.messages())


def test_concurrent_calls_with_different_descriptors() -> None:
    sink = MemorySink()
    interceptor = Interceptor(sink=sink)

    @loggable(interceptor=interceptor, log_level="debug")
    def loud(value):
        return value

    @loggable(interceptor=interceptor, log_only_exceptions=True)
    def quiet(value):
        return value

    with ThreadPoolExecutor(max_workers=4) as pool:
        futures = [pool.submit(loud if i % 2 else quiet, i) for i in range(40)]
        assert [future.result() for future in futures] == list(range(40))

    assert len(sink.records) == 40
    assert {record.level for record in sink.records} == {"debug"}
