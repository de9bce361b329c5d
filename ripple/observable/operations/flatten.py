"""
Ripple Flattening - Observables of Observables
==============================================

Operators that turn an outer observable whose values are themselves
observables into one observable of the inner values:

- `merge_all_operator` - every inner runs as soon as it arrives
- `concat_all_operator` - inners run one at a time, in arrival order

Bookkeeping lives in a small state object created per subscription, never on
the observable value, so subscribing twice runs two independent flattenings.

Cancelling a flattened subscription cancels the outer subscription and every
inner subscription still running; inners waiting in the concat queue are
dropped without being subscribed to.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque, Dict

from ..core.observable import Observable
from ..exceptions import InvalidSourceError
from ..types.common_types import Cancel, noop


def _ensure_inner(value: Any, operator: str) -> Observable:
    if not isinstance(value, Observable):
        raise InvalidSourceError(
            f"{operator} expects an observable of observables, got {type(value).__name__}"
        )
    return value


# ============================================================================
# MERGE ALL
# ============================================================================


@dataclass
class _MergeAllState:
    outer_finished: bool = False
    completed: bool = False
    cancelled: bool = False
    unfinished: int = 0
    next_key: int = 0
    # key -> cancel handle, or None while the inner is still subscribing
    inner: Dict[int, Any] = field(default_factory=dict)


def merge_all_operator(source: Observable) -> Observable:
    """
    Concurrent flattening: Obs[Obs[A]] -> Obs[A]

    Completes exactly when the outer has completed and no inner is unfinished.
    Errors from the outer or any inner are forwarded as they happen; siblings
    keep running.
    """

    def subscribe(on_next, on_error, on_complete):
        state = _MergeAllState()

        def forward_next(value):
            if not state.cancelled:
                on_next(value)

        def forward_error(error):
            if not state.cancelled:
                on_error(error)

        def check_complete():
            if (
                state.outer_finished
                and state.unfinished == 0
                and not state.completed
                and not state.cancelled
            ):
                state.completed = True
                on_complete()

        def on_outer_next(value):
            if state.cancelled:
                return
            inner = _ensure_inner(value, "merge_all")

            key = state.next_key
            state.next_key += 1
            state.unfinished += 1
            state.inner[key] = None

            def on_inner_complete():
                if key not in state.inner:
                    return
                del state.inner[key]
                state.unfinished -= 1
                check_complete()

            cancel_inner = inner.subscribe(forward_next, forward_error, on_inner_complete)
            # The subscriber may have cancelled, or the inner completed,
            # while the inner was still subscribing
            if state.cancelled:
                cancel_inner()
            elif key in state.inner:
                state.inner[key] = cancel_inner

        def on_outer_complete():
            state.outer_finished = True
            check_complete()

        cancel_outer = source.subscribe(on_outer_next, forward_error, on_outer_complete)

        def cancel():
            if state.cancelled:
                return
            state.cancelled = True
            cancel_outer()
            running = [c for c in state.inner.values() if c is not None]
            state.inner.clear()
            logging.debug(f"merge_all cancelled with {len(running)} inner subscriptions running")
            for cancel_inner in running:
                cancel_inner()

        return cancel

    return Observable(subscribe)


# ============================================================================
# CONCAT ALL
# ============================================================================


@dataclass
class _ConcatAllState:
    waiting: Deque[Observable] = field(default_factory=deque)
    active: bool = False
    draining: bool = False
    outer_finished: bool = False
    completed: bool = False
    cancelled: bool = False
    generation: int = 0
    cancel_inner: Cancel = noop


def concat_all_operator(source: Observable) -> Observable:
    """
    Sequential flattening: Obs[Obs[A]] -> Obs[A]

    The operator is busy while an inner subscription is active or inners are
    queued. Inners that arrive while busy wait in an unbounded FIFO queue.
    Completes when the outer has completed, the queue is empty, and the last
    inner has completed.
    """

    def subscribe(on_next, on_error, on_complete):
        state = _ConcatAllState()

        def forward_next(value):
            if not state.cancelled:
                on_next(value)

        def forward_error(error):
            if not state.cancelled:
                on_error(error)

        def on_inner_complete():
            state.active = False
            state.cancel_inner = noop
            drain()

        def drain():
            # Inners that complete synchronously return here instead of
            # recursing, so the stack stays flat however long the queue is
            if state.draining:
                return
            state.draining = True
            try:
                while state.waiting and not state.active and not state.cancelled:
                    inner = state.waiting.popleft()
                    state.active = True
                    state.generation += 1
                    generation = state.generation

                    cancel_inner = inner.subscribe(
                        forward_next, forward_error, on_inner_complete
                    )
                    if state.cancelled:
                        cancel_inner()
                    elif state.active and state.generation == generation:
                        state.cancel_inner = cancel_inner
            finally:
                state.draining = False

            if (
                state.outer_finished
                and not state.active
                and not state.waiting
                and not state.completed
                and not state.cancelled
            ):
                state.completed = True
                on_complete()

        def on_outer_next(value):
            if state.cancelled:
                return
            state.waiting.append(_ensure_inner(value, "concat_all"))
            drain()

        def on_outer_complete():
            state.outer_finished = True
            drain()

        cancel_outer = source.subscribe(on_outer_next, forward_error, on_outer_complete)

        def cancel():
            if state.cancelled:
                return
            state.cancelled = True
            cancel_outer()
            logging.debug(
                f"concat_all cancelled with {len(state.waiting)} queued inner observables"
            )
            state.waiting.clear()
            cancel_inner, state.cancel_inner = state.cancel_inner, noop
            cancel_inner()

        return cancel

    return Observable(subscribe)
