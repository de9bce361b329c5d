"""
Ripple - Push-Based Observable Streams
======================================

A minimal push-based stream abstraction: an `Observable` wraps one
subscription function, and combinators compose observables without an
intermediate buffering runtime.

Three channels: data (`next`), `error`, `complete`.
"""

__version__ = "0.1.0"

from .adapters import from_future, from_promise, from_stream
from .observable import (
    InvalidSourceError,
    Observable,
    Observer,
    SourceCancelledError,
    empty,
    error,
    of,
)

__all__ = [
    # Core
    "Observable",
    "Observer",
    # Factories
    "of",
    "error",
    "empty",
    # Adapters
    "from_promise",
    "from_future",
    "from_stream",
    # Exceptions
    "InvalidSourceError",
    "SourceCancelledError",
]
