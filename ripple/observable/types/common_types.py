"""
Ripple Common Types - Shared Type Definitions
=============================================

This module contains shared type definitions used across the Ripple operator
and adapter modules. It avoids circular imports and provides a single source
of truth for the callback shapes of the subscription protocol.
"""

from typing import Any, Callable, Optional, TypeVar

# ============================================================================
# TYPE VARIABLES
# ============================================================================

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")  # Result of a two-source combination

# ============================================================================
# CHANNEL CALLBACKS
# ============================================================================

NextHandler = Callable[[Any], None]
ErrorHandler = Callable[[Any], None]
CompleteHandler = Callable[[], None]

# Returned by every subscription; never emits on any channel itself
Cancel = Callable[[], None]

# (on_next, on_error, on_complete) -> cancel
SubscribeFunction = Callable[
    [NextHandler, ErrorHandler, CompleteHandler], Optional[Cancel]
]

# ============================================================================
# OPERATION FUNCTION TYPES
# ============================================================================

TransformFunction = Callable[[T], U]
PredicateFunction = Callable[[T], Any]
CombineFunction = Callable[[T, U], V]
RecoverFunction = Callable[[Any], T]


def noop(*args: Any) -> None:
    """Cancellation handle and default channel handler that does nothing."""
    return None
