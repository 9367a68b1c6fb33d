"""
Pure collection algorithms with no domain-specific dependencies.

Modules:
    sets        - Mutable hash set with in-place algebra
    sequences   - Structural operations over ordered sequences
    numeric     - Numeric kinds, reductions, ranges and generators
"""

from .numeric import (
    convert,
    max_value,
    min_value,
    number_range,
    numeric_kind,
    sequence_generator,
    sum_values,
    zero,
)
from .sequences import (
    copy,
    difference,
    fill,
    filter_values,
    format_values,
    has_value,
    index_of,
    intersection,
    map_values,
    merge,
    remove_index,
    remove_value,
    reverse,
    safe_slice,
    split,
    stringify,
    unique,
)
from .sets import Set

__all__ = [
    # Sets
    "Set",
    # Structural sequence operations
    "copy",
    "remove_value",
    "remove_index",
    "has_value",
    "index_of",
    "difference",
    "intersection",
    "safe_slice",
    "split",
    "merge",
    "unique",
    "fill",
    "filter_values",
    "map_values",
    "reverse",
    "format_values",
    "stringify",
    # Numeric sequence operations
    "numeric_kind",
    "zero",
    "convert",
    "min_value",
    "max_value",
    "sum_values",
    "number_range",
    "sequence_generator",
]
