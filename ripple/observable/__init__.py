"""
Ripple Observable Package
=========================

The Observable value, its observer, operators, and literal factories.
"""

from .core import Observable, Observer
from .exceptions import InvalidSourceError, SourceCancelledError
from .factories import empty, error, of

__all__ = [
    "Observable",
    "Observer",
    "InvalidSourceError",
    "SourceCancelledError",
    "empty",
    "error",
    "of",
]
