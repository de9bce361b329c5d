"""
Ripple Operations Package
=========================

Operator implementations behind the `Observable` methods.
"""

from .combine import (
    concat_operator,
    merge_operator,
    zip_operator,
    zip_switch_operator,
)
from .flatten import concat_all_operator, merge_all_operator
from .transform import (
    filter_operator,
    map_error_operator,
    map_operator,
    start_with_operator,
)

__all__ = [
    "concat_all_operator",
    "concat_operator",
    "filter_operator",
    "map_error_operator",
    "map_operator",
    "merge_all_operator",
    "merge_operator",
    "start_with_operator",
    "zip_operator",
    "zip_switch_operator",
]
