"""
Numeric sequence utilities.

Numeric kinds are runtime tags naming fixed-width integer or floating-point
types (numpy scalar types, or Python's int/float for their 64-bit forms).
A kind only matters where fixed-width semantics are observable:
- convert(seq, kind)       - Cast with wrap-around / truncation
- min/max/sum_values(seq, kind) - Reduce in that kind; zero of that kind when empty

Ranges and generators:
    number_range(start, stop, step) - Arithmetic progression, [] when degenerate
    sequence_generator(start, step) - Infinite producer with private state
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Sequence
from typing import Callable

import numpy as np

from constants import DEFAULT_NUMERIC_KIND, NUMERIC_KINDS
from localtypes import Number, NumericKind

logger = logging.getLogger(__name__)


# =============================================================================
# Numeric kinds
# =============================================================================


def numeric_kind(kind: NumericKind) -> np.dtype:
    """
    Resolve a numeric kind tag to its numpy dtype.

    Raises:
        TypeError: If `kind` is not a fixed-width integer or floating-point kind.
    """
    if kind not in NUMERIC_KINDS:
        raise TypeError(f"Unsupported numeric kind: {kind!r}")
    return np.dtype(kind)


def zero(kind: NumericKind = DEFAULT_NUMERIC_KIND) -> Number:
    """Return the zero value of a numeric kind as a Python scalar."""
    return numeric_kind(kind).type(0).item()


def _as_array(seq: Sequence[Number], kind: NumericKind) -> np.ndarray:
    # astype (not asarray(dtype=...)) so out-of-range values wrap instead of raising
    return np.asarray(seq).astype(numeric_kind(kind))


def _as_scalar(value: Number) -> Number:
    return value.item() if isinstance(value, np.generic) else value


def _empty_reduction(name: str, kind: NumericKind | None) -> Number:
    logger.debug("%s: empty input, returning zero value", name)
    return zero(DEFAULT_NUMERIC_KIND if kind is None else kind)


# =============================================================================
# Conversion and reductions
# =============================================================================


def convert(seq: Sequence[Number], kind: NumericKind) -> list[Number]:
    """
    Cast every element to the given numeric kind.

    Follows fixed-width semantics: integers wrap around on overflow and floats
    are truncated toward zero when cast to an integer kind.

    Args:
        seq: Numeric elements.
        kind: Target numeric kind, e.g. np.int8 or float.

    Returns:
        list: The cast values as Python scalars.
    """
    if len(seq) == 0:
        numeric_kind(kind)
        return []
    return _as_array(seq, kind).tolist()


def min_value(seq: Sequence[Number], kind: NumericKind | None = None) -> Number:
    """Smallest element, or the zero value of `kind` for an empty sequence."""
    if len(seq) == 0:
        return _empty_reduction("min_value", kind)
    if kind is None:
        return _as_scalar(min(seq))
    return _as_array(seq, kind).min().item()


def max_value(seq: Sequence[Number], kind: NumericKind | None = None) -> Number:
    """Largest element, or the zero value of `kind` for an empty sequence."""
    if len(seq) == 0:
        return _empty_reduction("max_value", kind)
    if kind is None:
        return _as_scalar(max(seq))
    return _as_array(seq, kind).max().item()


def sum_values(seq: Sequence[Number], kind: NumericKind | None = None) -> Number:
    """
    Sum of the elements, or the zero value of `kind` for an empty sequence.

    Without a kind, plain Python arithmetic is used. With one, elements are
    cast to it and accumulated in it, so fixed-width integers wrap around.
    """
    if len(seq) == 0:
        return _empty_reduction("sum_values", kind)
    if kind is None:
        return _as_scalar(sum(seq, zero()))
    dtype = numeric_kind(kind)
    return _as_array(seq, kind).sum(dtype=dtype).item()


# =============================================================================
# Progressions
# =============================================================================


def number_range(start: Number, stop: Number, step: Number) -> list[Number]:
    """
    Arithmetic progression from `start` (included) to `stop` (excluded).

    A zero step, an empty interval, or a step pointing away from `stop`
    yields [] rather than looping forever. A progression that overflows its
    fixed-width kind ends at the last value before the wrap-around.

    Example:
        >>> number_range(2, -1, -1)
        [2, 1, 0]
    """
    if step == 0 or start == stop or (start < stop) != (step > 0):
        logger.debug(
            "number_range: degenerate parameters start=%s stop=%s step=%s",
            start,
            stop,
            step,
        )
        return []

    before_stop = operator.lt if start < stop else operator.gt
    moved_on = operator.gt if start < stop else operator.lt

    result = []
    value = start
    while before_stop(value, stop):
        result.append(value)
        previous, value = value, value + step
        # Fixed-width kinds wrap around on overflow instead of passing stop
        if not moved_on(value, previous):
            logger.debug(
                "number_range: progression stopped advancing at %s, ending range",
                value,
            )
            break
    return result


def sequence_generator(start: Number, step: Number) -> Callable[[], Number]:
    """
    Return a producer of the progression start, start + step, start + 2*step...

    Each producer owns its current value; it never ends and cannot be reset.
    """
    current = start

    def next_value() -> Number:
        nonlocal current
        value = current
        current += step
        return value

    return next_value
