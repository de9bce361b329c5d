"""
Ripple Protocols Package
========================

Structural interfaces for foreign producers accepted by the adapters.
"""

from .source_protocol import FutureLike, ReadableStream, Thenable

__all__ = [
    "FutureLike",
    "ReadableStream",
    "Thenable",
]
