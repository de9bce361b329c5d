"""
Ripple Combination - Two-Source Operators
=========================================

- `merge_operator` - run both sources concurrently
- `concat_operator` - run the second source after the first completes
- `zip_operator` - pair values by arrival index
- `zip_switch_operator` - sample the latest value of the second source

Every operator keeps its bookkeeping in a state object created per
subscription. The returned cancellation handles are idempotent, cancel every
constituent subscription that is still active, and stop all forwarding from
that point on.
"""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Any, Deque

from ..core.observable import Observable
from ..exceptions import InvalidSourceError
from ..types.common_types import Cancel, CombineFunction, noop


def _ensure_observable(value: Any, operator: str) -> Observable:
    if not isinstance(value, Observable):
        raise InvalidSourceError(
            f"Cannot {operator} Observable with {type(value).__name__}"
        )
    return value


@dataclass
class _PairState:
    """Finished flags shared by the two-sided operators."""

    source_finished: bool = False
    other_finished: bool = False
    completed: bool = False
    cancelled: bool = False

    def both_finished(self) -> bool:
        return self.source_finished and self.other_finished


def _pair_subscription(state: _PairState, on_next, on_error, on_complete):
    """
    Build the forwarding callbacks for a two-sided operator.

    Returns (forward_next, forward_error, source_done, other_done); the two
    `*_done` callbacks set the matching finished flag and complete once both
    sides are done.
    """

    def forward_next(value):
        if not state.cancelled:
            on_next(value)

    def forward_error(error):
        if not state.cancelled:
            on_error(error)

    def finish_if_done():
        if state.both_finished() and not state.completed and not state.cancelled:
            state.completed = True
            on_complete()

    def source_done():
        state.source_finished = True
        finish_if_done()

    def other_done():
        state.other_finished = True
        finish_if_done()

    return forward_next, forward_error, source_done, other_done


def _cancel_pair(state: _PairState, operator: str, *cancels: Cancel) -> Cancel:
    def cancel():
        if state.cancelled:
            return
        state.cancelled = True
        logging.debug(f"{operator} cancelled")
        for cancel_side in cancels:
            cancel_side()

    return cancel


# ============================================================================
# MERGE
# ============================================================================


def merge_operator(source: Observable, other: Observable) -> Observable:
    """
    Interleave two observables.

    Data and errors from either side pass straight through; completion fires
    once, after both sides have completed.
    """
    _ensure_observable(other, "merge")

    def subscribe(on_next, on_error, on_complete):
        state = _PairState()
        forward_next, forward_error, source_done, other_done = _pair_subscription(
            state, on_next, on_error, on_complete
        )

        cancel_source = source.subscribe(forward_next, forward_error, source_done)
        cancel_other = other.subscribe(forward_next, forward_error, other_done)

        return _cancel_pair(state, "merge", cancel_source, cancel_other)

    return Observable(subscribe)


# ============================================================================
# CONCAT
# ============================================================================


@dataclass
class _ConcatState:
    second_started: bool = False
    cancelled: bool = False
    cancel_active: Cancel = noop


def concat_operator(source: Observable, other: Observable) -> Observable:
    """
    Sequence two observables.

    `other` is subscribed to only after `source` completes; nothing from it is
    buffered in advance. The cancellation handle always targets whichever
    side is currently running.
    """
    _ensure_observable(other, "concat")

    def subscribe(on_next, on_error, on_complete):
        state = _ConcatState()

        def forward_next(value):
            if not state.cancelled:
                on_next(value)

        def forward_error(error):
            if not state.cancelled:
                on_error(error)

        def forward_complete():
            if not state.cancelled:
                on_complete()

        def on_source_complete():
            if state.cancelled or state.second_started:
                return
            state.second_started = True
            state.cancel_active = noop
            cancel_other = other.subscribe(forward_next, forward_error, forward_complete)
            # `other` may have triggered cancellation while subscribing
            if state.cancelled:
                cancel_other()
            else:
                state.cancel_active = cancel_other

        cancel_source = source.subscribe(forward_next, forward_error, on_source_complete)
        # The source may have completed synchronously and started `other`
        if not state.second_started:
            state.cancel_active = cancel_source

        def cancel():
            if state.cancelled:
                return
            state.cancelled = True
            cancel_active, state.cancel_active = state.cancel_active, noop
            cancel_active()

        return cancel

    return Observable(subscribe)


# ============================================================================
# ZIP
# ============================================================================


@dataclass
class _ZipState(_PairState):
    source_values: Deque[Any] = field(default_factory=deque)
    other_values: Deque[Any] = field(default_factory=deque)


def zip_operator(source: Observable, other: Observable, combine: CombineFunction) -> Observable:
    """
    Pair values by arrival index: emits `combine(a_i, b_i)` once both sides
    have produced their i-th value, whichever side arrives first.

    Completes once both sides have completed. Values still unpaired at that
    point are dropped.
    """
    _ensure_observable(other, "zip")

    def subscribe(on_next, on_error, on_complete):
        state = _ZipState()
        forward_next, forward_error, source_done, other_done = _pair_subscription(
            state, on_next, on_error, on_complete
        )

        def on_source_next(value):
            if state.cancelled:
                return
            if state.other_values:
                forward_next(combine(value, state.other_values.popleft()))
            else:
                state.source_values.append(value)

        def on_other_next(value):
            if state.cancelled:
                return
            if state.source_values:
                forward_next(combine(state.source_values.popleft(), value))
            else:
                state.other_values.append(value)

        def on_source_complete():
            source_done()
            if state.completed:
                _drop_leftovers(state)

        def on_other_complete():
            other_done()
            if state.completed:
                _drop_leftovers(state)

        cancel_source = source.subscribe(on_source_next, forward_error, on_source_complete)
        cancel_other = other.subscribe(on_other_next, forward_error, on_other_complete)

        return _cancel_pair(state, "zip", cancel_source, cancel_other)

    return Observable(subscribe)


def _drop_leftovers(state: _ZipState) -> None:
    if state.source_values or state.other_values:
        logging.debug(
            f"zip completed with {len(state.source_values)} + {len(state.other_values)} unpaired values"
        )
    state.source_values.clear()
    state.other_values.clear()


# ============================================================================
# ZIP SWITCH
# ============================================================================


@dataclass
class _ZipSwitchState(_PairState):
    latest_other: Any = None
    other_has_emitted: bool = False


def zip_switch_operator(
    source: Observable, other: Observable, combine: CombineFunction
) -> Observable:
    """
    Sampling zip: every value of `source` is emitted as
    `combine(value, latest_other)`, once `other` has emitted at least once.

    Values of `other` never produce output by themselves. `other` is
    subscribed to first. Completes once both sides have completed.
    """
    _ensure_observable(other, "zip_switch")

    def subscribe(on_next, on_error, on_complete):
        state = _ZipSwitchState()
        forward_next, forward_error, source_done, other_done = _pair_subscription(
            state, on_next, on_error, on_complete
        )

        def on_other_next(value):
            state.latest_other = value
            state.other_has_emitted = True

        def on_source_next(value):
            if state.other_has_emitted:
                forward_next(combine(value, state.latest_other))

        cancel_other = other.subscribe(on_other_next, forward_error, other_done)
        cancel_source = source.subscribe(on_source_next, forward_error, source_done)

        return _cancel_pair(state, "zip_switch", cancel_source, cancel_other)

    return Observable(subscribe)
