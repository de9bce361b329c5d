"""
Ripple Exceptions
=================

Exceptions raised by Ripple itself. Failures of a running source are never
raised; they travel on the error channel of the subscription.
"""


class InvalidSourceError(TypeError):
    """Something that should be an observable or a producer is not usable as one."""

    pass


class SourceCancelledError(Exception):
    """A wrapped future was cancelled before producing a result."""

    pass
