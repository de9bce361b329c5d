"""
Ripple Types Package
====================

Shared type variables, callback aliases, and foreign producer protocols.
"""

from .common_types import (
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
    U,
    V,
    noop,
)
from .protocols import FutureLike, ReadableStream, Thenable

__all__ = [
    "Cancel",
    "CombineFunction",
    "CompleteHandler",
    "ErrorHandler",
    "NextHandler",
    "PredicateFunction",
    "RecoverFunction",
    "SubscribeFunction",
    "T",
    "TransformFunction",
    "U",
    "V",
    "noop",
    "FutureLike",
    "ReadableStream",
    "Thenable",
]
