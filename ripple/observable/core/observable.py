"""
Ripple Observable - Push-Based Stream Value
===========================================

An `Observable` is an immutable value that holds exactly one capability: a
subscription function

    subscribe_fn(on_next, on_error, on_complete) -> cancel

Nothing happens until `subscribe()` is called, and every call runs the
underlying work again with fresh state; results are never shared or cached
between subscriptions.

Channel contract:
- `on_next` may be called any number of times
- `on_error` signals a failure as an event, never as a raised exception
- `on_complete` ends the subscription; no data follows it
- calls may happen synchronously inside `subscribe()` or later, whenever the
  producer decides

Operators return new observables and never touch the source:

    >>> from ripple import of
    >>> cancel = of(1).map(lambda x: x + 1).start_with(0).subscribe(print)
    0
    2
"""

from typing import Any, Callable, Generic, Optional, Union

from ..exceptions import InvalidSourceError
from ..types.common_types import (
    Cancel,
    CombineFunction,
    CompleteHandler,
    ErrorHandler,
    NextHandler,
    PredicateFunction,
    RecoverFunction,
    SubscribeFunction,
    T,
    TransformFunction,
    noop,
)
from .observer import Observer


class Observable(Generic[T]):
    """
    A re-subscribable value wrapping one subscription function.
    """

    __slots__ = ("_subscribe",)

    def __init__(self, subscribe: SubscribeFunction) -> None:
        if not callable(subscribe):
            raise InvalidSourceError(
                f"Observable needs a callable subscription function, got {type(subscribe).__name__}"
            )
        self._subscribe = subscribe

    def subscribe(
        self,
        on_next: Union[Observer, NextHandler, None] = None,
        on_error: Optional[ErrorHandler] = None,
        on_complete: Optional[CompleteHandler] = None,
    ) -> Cancel:
        """
        Run the subscription function against an observer.

        Args:
            on_next: Data handler, or an `Observer` carrying all three handlers
            on_error: Error handler (ignored when an `Observer` is given)
            on_complete: Completion handler (ignored when an `Observer` is given)

        Returns:
            Cancellation handle; always callable
        """
        if isinstance(on_next, Observer):
            observer = on_next
        else:
            observer = Observer(on_next, on_error, on_complete)

        cancel = self._subscribe(observer.next, observer.error, observer.complete)
        return cancel if cancel is not None else noop

    # ========================================================================
    # TRANSFORMATION
    # ========================================================================

    def map(self, fn: TransformFunction) -> "Observable":
        """Emit `fn(value)` for every value; error and completion pass through."""
        from ..operations.transform import map_operator

        return map_operator(self, fn)

    def filter(self, predicate: PredicateFunction) -> "Observable[T]":
        """Emit only the values for which `predicate` is truthy."""
        from ..operations.transform import filter_operator

        return filter_operator(self, predicate)

    def map_error(self, fn: RecoverFunction) -> "Observable":
        """
        Recover from errors by emitting `fn(error)` as a data event.

        Completion is not forced: the result completes only when the source
        itself completes.
        """
        from ..operations.transform import map_error_operator

        return map_error_operator(self, fn)

    def start_with(self, value: Any) -> "Observable":
        """Emit `value` before anything from this observable."""
        from ..operations.transform import start_with_operator

        return start_with_operator(self, value)

    # ========================================================================
    # FLATTENING
    # ========================================================================

    def merge_all(self) -> "Observable":
        """Flatten an observable of observables, running inners concurrently."""
        from ..operations.flatten import merge_all_operator

        return merge_all_operator(self)

    def concat_all(self) -> "Observable":
        """Flatten an observable of observables, running inners one at a time."""
        from ..operations.flatten import concat_all_operator

        return concat_all_operator(self)

    def chain(self, fn: Callable[[T], "Observable"]) -> "Observable":
        """`map(fn).merge_all()`"""
        return self.map(fn).merge_all()

    def concat_map(self, fn: Callable[[T], "Observable"]) -> "Observable":
        """`map(fn).concat_all()`"""
        return self.map(fn).concat_all()

    # ========================================================================
    # COMBINATION
    # ========================================================================

    def merge(self, other: "Observable") -> "Observable":
        """Interleave both observables; complete once both have completed."""
        from ..operations.combine import merge_operator

        return merge_operator(self, other)

    def concat(self, other: "Observable") -> "Observable":
        """Subscribe to `other` once this observable completes."""
        from ..operations.combine import concat_operator

        return concat_operator(self, other)

    def zip(self, other: "Observable", combine: CombineFunction) -> "Observable":
        """Pair the i-th value of each side through `combine(mine, theirs)`."""
        from ..operations.combine import zip_operator

        return zip_operator(self, other, combine)

    def zip_switch(self, other: "Observable", combine: CombineFunction) -> "Observable":
        """Pair every value of this observable with the latest value of `other`."""
        from ..operations.combine import zip_switch_operator

        return zip_switch_operator(self, other, combine)

    # ========================================================================
    # OPERATOR SYNTAX
    # ========================================================================

    def __rshift__(self, fn: TransformFunction) -> "Observable":
        """obs >> f  is  obs.map(f)"""
        return self.map(fn)

    def __and__(self, predicate: PredicateFunction) -> "Observable[T]":
        """obs & p  is  obs.filter(p)"""
        return self.filter(predicate)

    def __or__(self, other: "Observable") -> "Observable":
        """a | b  is  a.merge(b)"""
        if not isinstance(other, Observable):
            return NotImplemented
        return self.merge(other)

    def __add__(self, other: "Observable") -> "Observable":
        """a + b  is  a.concat(b)"""
        if not isinstance(other, Observable):
            return NotImplemented
        return self.concat(other)

    def __repr__(self) -> str:
        name = getattr(self._subscribe, "__qualname__", repr(self._subscribe))
        return f"Observable({name})"
