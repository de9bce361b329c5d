"""
Ripple Observable Core Module
=============================

This module contains the Observable value and the Observer sink.
"""

from ripple.observable.core.observable import Observable
from ripple.observable.core.observer import Observer

__all__ = [
    "Observable",
    "Observer",
]
