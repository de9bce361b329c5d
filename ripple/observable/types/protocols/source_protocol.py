"""
Ripple Source Protocols - Foreign Producer Interface Definitions
================================================================

Protocol-based interfaces for the foreign producers that the adapters in
`ripple.adapters` translate into the three-channel subscription protocol.

- `Thenable` - promise-like value with a two-callback resolution contract
- `FutureLike` - `concurrent.futures.Future` / `asyncio.Future` shape
- `ReadableStream` - event-emitting push stream with a non-blocking `read()`

The adapters depend only on these structural interfaces, never on a concrete
runtime type.
"""

from typing import Any, Callable, Optional, Protocol, runtime_checkable

# ============================================================================
# PROMISE-LIKE SOURCES
# ============================================================================


@runtime_checkable
class Thenable(Protocol):
    """
    A value that settles exactly once, reporting through two callbacks.

    `then(on_fulfilled, on_rejected)` must eventually call exactly one of the
    two callbacks with a single argument.
    """

    def then(
        self,
        on_fulfilled: Callable[[Any], Any],
        on_rejected: Callable[[Any], Any],
    ) -> Any: ...


@runtime_checkable
class FutureLike(Protocol):
    """The subset of the standard future interface used by `from_future`."""

    def add_done_callback(self, fn: Callable[[Any], Any]) -> Any: ...

    def cancelled(self) -> bool: ...

    def exception(self) -> Optional[BaseException]: ...

    def result(self) -> Any: ...


# ============================================================================
# PUSH STREAMS
# ============================================================================


@runtime_checkable
class ReadableStream(Protocol):
    """
    Event-emitting readable stream.

    Events used by `from_stream`:
    - `"readable"` - one or more records can be read (no arguments)
    - `"error"` - the stream failed (one argument: the error)
    - `"end"` - no more records will be produced (no arguments)

    `read()` never blocks and returns `None` when nothing is available.
    """

    def on(self, event: str, listener: Callable[..., Any]) -> Any: ...

    def remove_listener(self, event: str, listener: Callable[..., Any]) -> Any: ...

    def read(self) -> Optional[Any]: ...
