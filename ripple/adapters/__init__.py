"""
Ripple Adapters
===============

Bridges from foreign producers (promise-like values, futures, readable push
streams) into the observable channel protocol.
"""

from .promise import from_future, from_promise
from .stream import from_stream

__all__ = [
    "from_future",
    "from_promise",
    "from_stream",
]
