"""
Ripple Stream Adapter
=====================

Turns an event-emitting readable stream into an observable of its records.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from ..observable.core.observable import Observable
from ..observable.exceptions import InvalidSourceError
from ..observable.types.protocols import ReadableStream


@dataclass
class _StreamState:
    cancelled: bool = False


def from_stream(factory: Callable[[], ReadableStream]) -> Observable:
    """
    Adapt a readable push stream.

    Every `"readable"` event drains all records currently available through
    the non-blocking `read()`. `"error"` feeds the error channel and `"end"`
    completes. Cancelling removes the readable listener and silences the
    error and end listeners, which stay registered; the stream itself is left
    open.
    """

    def subscribe(on_next, on_error, on_complete):
        stream = factory()
        if not isinstance(stream, ReadableStream):
            raise InvalidSourceError(
                f"from_stream factory returned {type(stream).__name__}, which is not a readable stream"
            )

        state = _StreamState()

        def on_readable(*_):
            for record in iter(stream.read, None):
                on_next(record)
                if state.cancelled:
                    break

        def on_stream_error(error):
            if not state.cancelled:
                on_error(error)

        def on_end(*_):
            if not state.cancelled:
                on_complete()

        stream.on("readable", on_readable)
        stream.on("error", on_stream_error)
        stream.on("end", on_end)

        def cancel():
            if state.cancelled:
                return
            state.cancelled = True
            stream.remove_listener("readable", on_readable)
            logging.debug(f"from_stream stopped reading from {stream!r}")

        return cancel

    return Observable(subscribe)
