"""
Ripple Factories - Observables From Literal Values
==================================================

Every factory emits synchronously inside `subscribe()` and returns a no-op
cancellation handle.
"""

from typing import Any

from .core.observable import Observable
from .types.common_types import noop


def of(value: Any) -> Observable:
    """Emit `value`, then complete."""

    def subscribe(on_next, on_error, on_complete):
        on_next(value)
        on_complete()
        return noop

    return Observable(subscribe)


def error(err: Any) -> Observable:
    """
    Signal `err`, then complete.

    The completion still fires after the error: an error event does not end
    the subscription by itself.
    """

    def subscribe(on_next, on_error, on_complete):
        on_error(err)
        on_complete()
        return noop

    return Observable(subscribe)


def empty() -> Observable:
    """Complete immediately without emitting."""

    def subscribe(on_next, on_error, on_complete):
        on_complete()
        return noop

    return Observable(subscribe)
