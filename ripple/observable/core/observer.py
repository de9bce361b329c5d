"""
Ripple Observer - Named Three-Channel Notification Sink
=======================================================

An `Observer` groups the data, error, and completion handlers of one
subscription behind named operations, so they can never be passed in the
wrong positional order.
"""

import logging
from typing import Any, Generic, Optional

from ..types.common_types import (
    CompleteHandler,
    ErrorHandler,
    NextHandler,
    T,
    noop,
)


def _log_unhandled_error(error: Any) -> None:
    logging.error(f"Unhandled error event in subscription: {error!r}")


class Observer(Generic[T]):
    """
    Notification sink for one subscription.

    Missing data and completion handlers are no-ops. A missing error handler
    logs the error event, so failures without a listener are never silent.
    """

    __slots__ = ("_on_next", "_on_error", "_on_complete")

    def __init__(
        self,
        on_next: Optional[NextHandler] = None,
        on_error: Optional[ErrorHandler] = None,
        on_complete: Optional[CompleteHandler] = None,
    ) -> None:
        self._on_next = on_next or noop
        self._on_error = on_error or _log_unhandled_error
        self._on_complete = on_complete or noop

    def next(self, value: T) -> None:
        self._on_next(value)

    def error(self, error: Any) -> None:
        self._on_error(error)

    def complete(self) -> None:
        self._on_complete()

    def __repr__(self) -> str:
        return (
            f"Observer(next={self._on_next!r}, error={self._on_error!r}, "
            f"complete={self._on_complete!r})"
        )
