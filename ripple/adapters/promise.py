"""
Ripple Promise Adapters
=======================

Turn single-result producers into one-shot observables: the result is
emitted and followed by completion, a failure is signalled and followed by
completion. The producer is created anew on every subscription, and the
cancellation handle is a no-op because a started operation cannot be
aborted through this interface.
"""

from typing import Any, Callable

from ..observable.core.observable import Observable
from ..observable.exceptions import InvalidSourceError, SourceCancelledError
from ..observable.types.common_types import noop
from ..observable.types.protocols import FutureLike, Thenable


def from_promise(factory: Callable[[], Thenable]) -> Observable:
    """
    Adapt a promise-like producer.

    Args:
        factory: Zero-argument callable returning an object with
            `then(on_fulfilled, on_rejected)`
    """

    def subscribe(on_next, on_error, on_complete):
        promise = factory()
        if not isinstance(promise, Thenable):
            raise InvalidSourceError(
                f"from_promise factory returned {type(promise).__name__}, which has no then()"
            )

        def on_fulfilled(value: Any) -> None:
            on_next(value)
            on_complete()

        def on_rejected(reason: Any) -> None:
            on_error(reason)
            on_complete()

        promise.then(on_fulfilled, on_rejected)
        return noop

    return Observable(subscribe)


def from_future(factory: Callable[[], FutureLike]) -> Observable:
    """
    Adapt a `concurrent.futures.Future` or `asyncio.Future` producer.

    A cancelled future is reported as a `SourceCancelledError` on the error
    channel, followed by completion.
    """

    def subscribe(on_next, on_error, on_complete):
        future = factory()
        if not isinstance(future, FutureLike):
            raise InvalidSourceError(
                f"from_future factory returned {type(future).__name__}, which is not a future"
            )

        def on_done(done: FutureLike) -> None:
            if done.cancelled():
                on_error(SourceCancelledError(f"{done!r} was cancelled"))
            elif done.exception() is not None:
                on_error(done.exception())
            else:
                on_next(done.result())
            on_complete()

        future.add_done_callback(on_done)
        return noop

    return Observable(subscribe)
