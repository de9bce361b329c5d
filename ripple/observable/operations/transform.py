"""
Ripple Transformations - Single-Source Operators
================================================

Operators that wrap the channel callbacks of one source:

- `map_operator` - emit `fn(value)` for every value
- `filter_operator` - emit only values accepted by a predicate
- `map_error_operator` - turn error events into data events
- `start_with_operator` - emit a value before the source starts

All of them hand the source's cancellation handle back unchanged. Exceptions
raised by user functions are not caught; they propagate to the producer that
triggered the call.
"""

from typing import Any

from ..core.observable import Observable
from ..types.common_types import PredicateFunction, RecoverFunction, TransformFunction


def map_operator(source: Observable, fn: TransformFunction) -> Observable:
    """
    Functor map: Obs[A] -> (A -> B) -> Obs[B]

    Laws:
    - map(id) = id
    - map(f).map(g) = map(g ∘ f)
    """

    def subscribe(on_next, on_error, on_complete):
        def on_source_next(value):
            on_next(fn(value))

        return source.subscribe(on_source_next, on_error, on_complete)

    return Observable(subscribe)


def filter_operator(source: Observable, predicate: PredicateFunction) -> Observable:
    """Keep the values for which `predicate` is truthy, in their original order."""

    def subscribe(on_next, on_error, on_complete):
        def on_source_next(value):
            if predicate(value):
                on_next(value)

        return source.subscribe(on_source_next, on_error, on_complete)

    return Observable(subscribe)


def map_error_operator(source: Observable, fn: RecoverFunction) -> Observable:
    """
    Recovery: every error `e` of the source becomes the data event `fn(e)`.

    The subscription keeps going after a recovered error and the completion
    handler is passed through untouched, so the result completes only when the
    source completes. A source that errors and never completes produces an
    observable that never completes either.
    """

    def subscribe(on_next, on_error, on_complete):
        def on_source_error(error):
            on_next(fn(error))

        return source.subscribe(on_next, on_source_error, on_complete)

    return Observable(subscribe)


def start_with_operator(source: Observable, value: Any) -> Observable:
    """Emit `value` synchronously, then delegate everything to the source."""

    def subscribe(on_next, on_error, on_complete):
        on_next(value)
        return source.subscribe(on_next, on_error, on_complete)

    return Observable(subscribe)
