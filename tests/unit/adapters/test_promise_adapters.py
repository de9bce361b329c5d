"""Unit tests for from_promise and from_future."""

import asyncio
from concurrent.futures import Future

import pytest

from ripple import InvalidSourceError, SourceCancelledError, from_future, from_promise
from tests.test_factories import create_promise


@pytest.mark.unit
@pytest.mark.adapters
def test_from_promise_emits_result_then_completes(recorder):
    """A fulfilled promise yields its value followed by completion"""
    promise = create_promise()
    recorder.subscribe_to(from_promise(lambda: promise))

    assert recorder.events == []
    promise.resolve("done")

    assert recorder.events == [("next", "done"), ("complete",)]


@pytest.mark.unit
@pytest.mark.adapters
def test_from_promise_signals_rejection_then_completes(recorder):
    """A rejected promise yields an error followed by completion"""
    promise = create_promise()
    recorder.subscribe_to(from_promise(lambda: promise))

    promise.reject("nope")

    assert recorder.events == [("error", "nope"), ("complete",)]


@pytest.mark.unit
@pytest.mark.adapters
def test_from_promise_creates_promise_per_subscription():
    """The factory runs once per subscription, never at construction"""
    created = []

    def factory():
        created.append(create_promise())
        return created[-1]

    obs = from_promise(factory)
    assert created == []

    obs.subscribe()
    obs.subscribe()
    assert len(created) == 2


@pytest.mark.unit
@pytest.mark.adapters
def test_from_promise_cancel_is_a_no_op(recorder):
    """A started promise cannot be aborted; its result still arrives"""
    promise = create_promise()
    cancel = recorder.subscribe_to(from_promise(lambda: promise))

    cancel()
    promise.resolve(1)

    assert recorder.values == [1]


@pytest.mark.unit
@pytest.mark.adapters
def test_from_promise_rejects_non_thenables():
    """A factory result without then() is refused at subscription"""
    with pytest.raises(InvalidSourceError):
        from_promise(lambda: 42).subscribe()


@pytest.mark.unit
@pytest.mark.adapters
def test_from_future_emits_result(recorder):
    """A concurrent future result is emitted and completes"""
    future = Future()
    recorder.subscribe_to(from_future(lambda: future))

    future.set_result(10)

    assert recorder.events == [("next", 10), ("complete",)]


@pytest.mark.unit
@pytest.mark.adapters
def test_from_future_already_done(recorder):
    """A future that is already resolved emits during subscribe"""
    future = Future()
    future.set_result("ready")

    recorder.subscribe_to(from_future(lambda: future))

    assert recorder.events == [("next", "ready"), ("complete",)]


@pytest.mark.unit
@pytest.mark.adapters
def test_from_future_signals_exception(recorder):
    """A failed future becomes an error event followed by completion"""
    failure = ValueError("broken")
    future = Future()
    recorder.subscribe_to(from_future(lambda: future))

    future.set_exception(failure)

    assert recorder.events == [("error", failure), ("complete",)]


@pytest.mark.unit
@pytest.mark.adapters
def test_from_future_reports_cancellation(recorder):
    """A cancelled future becomes a SourceCancelledError"""
    future = Future()
    recorder.subscribe_to(from_future(lambda: future))

    future.cancel()

    assert len(recorder.errors) == 1
    assert isinstance(recorder.errors[0], SourceCancelledError)
    assert recorder.completions == 1


@pytest.mark.unit
@pytest.mark.adapters
def test_from_future_with_asyncio_future(recorder):
    """asyncio futures deliver through the event loop"""
    loop = asyncio.new_event_loop()
    try:
        future = loop.create_future()
        recorder.subscribe_to(from_future(lambda: future))
        loop.call_soon(future.set_result, "async")
        loop.run_until_complete(future)
    finally:
        loop.close()

    assert recorder.events == [("next", "async"), ("complete",)]


@pytest.mark.unit
@pytest.mark.adapters
def test_from_future_rejects_non_futures():
    """A factory result without the future interface is refused"""
    with pytest.raises(InvalidSourceError):
        from_future(lambda: "not a future").subscribe()
