"""
Functions for working with ordered sequences.

Every function takes a sequence and returns a new list; arguments are never
mutated. Anomalous input degrades to a safe result instead of raising:
- Out-of-range index        - Input returned unchanged (as a copy)
- Absent predicate/transform - Identity
- Zero `others`             - difference() returns the input, intersection() returns []
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from constants import DEFAULT_FORMAT_STYLE, FORMAT_STYLES, NOT_FOUND
from localtypes import H, Predicate, Stringer, T, Transform

logger = logging.getLogger(__name__)


# =============================================================================
# Copies and removal
# =============================================================================


def copy(seq: Sequence[T]) -> list[T]:
    """Return an independent shallow copy of the sequence."""
    return list(seq)


def remove_value(seq: Sequence[T], value: T) -> list[T]:
    """Return the sequence without any occurrence of `value`."""
    return [item for item in seq if item != value]


def remove_index(seq: Sequence[T], index: int) -> list[T]:
    """
    Return the sequence without the element at `index`.

    Negative indices are not interpreted from the end: any index outside
    [0, len(seq)) leaves the sequence unchanged.
    """
    if index < 0 or index >= len(seq):
        logger.debug(
            "remove_index: index %d out of range for length %d, nothing removed",
            index,
            len(seq),
        )
        return copy(seq)
    return [*seq[:index], *seq[index + 1 :]]


# =============================================================================
# Lookups
# =============================================================================


def index_of(seq: Sequence[T], value: T) -> int:
    """Return the position of the first occurrence of `value`, or NOT_FOUND."""
    for i, item in enumerate(seq):
        if item == value:
            return i
    return NOT_FOUND


def has_value(seq: Sequence[T], value: T) -> bool:
    return index_of(seq, value) != NOT_FOUND


# =============================================================================
# Multi-sequence algebra
# =============================================================================


def difference(seq: Sequence[H], *others: Iterable[H]) -> list[H]:
    """
    Return the elements of `seq` absent from every one of the others.

    Order and duplicates of `seq` are preserved. Without others the
    sequence is returned unchanged.
    """
    if not others:
        return copy(seq)

    excluded: set[H] = set()
    for other in others:
        excluded.update(other)

    return [item for item in seq if item not in excluded]


def intersection(seq: Sequence[H], *others: Sequence[H]) -> list[H]:
    """
    Return the elements of `seq` present in each of the others.

    Intersecting with nothing yields nothing: without others the result is
    empty, as it is as soon as one of the others is empty.
    """
    if not others:
        logger.debug("intersection() called without others, returning []")
        return []

    # Smallest first, to shrink the result as early as possible
    ordered = sorted(others, key=len)
    if len(ordered[0]) == 0:
        return []

    result = copy(seq)
    for other in ordered:
        lookup = frozenset(other)
        result = [item for item in result if item in lookup]
        if not result:
            break

    return result


def merge(seq: Sequence[H], *others: Iterable[H]) -> list[H]:
    """
    Return `seq` followed by the elements of each other not already seen.

    The elements of `seq` are kept as they are; others only contribute
    values that are new to the accumulated result, in order of appearance.
    """
    result = copy(seq)
    seen = set(result)
    for other in others:
        for item in other:
            if item in seen:
                continue
            seen.add(item)
            result.append(item)
    return result


def unique(seq: Iterable[H]) -> list[H]:
    """Return the first occurrence of each distinct value, in original order."""
    seen: set[H] = set()
    result: list[H] = []
    for item in seq:
        if item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


# =============================================================================
# Slicing
# =============================================================================


def safe_slice(seq: Sequence[T], start: int, stop: int) -> list[T]:
    """
    Copy the half-open range [start, stop) of the sequence.

    `stop` is clamped to the sequence length. `start` is the caller's
    responsibility: a negative start, or one past the clamped stop,
    raises IndexError.
    """
    stop = min(stop, len(seq))
    if start < 0 or start > stop:
        raise IndexError(
            f"slice bounds out of range [{start}:{stop}] with length {len(seq)}"
        )
    return list(seq[start:stop])


def split(seq: Sequence[T], part_size: int) -> list[list[T]]:
    """
    Split the sequence into consecutive chunks of at most `part_size` elements.

    Returns [] for an empty sequence or a non-positive part size.
    """
    if part_size <= 0 or not seq:
        return []

    if len(seq) <= part_size:
        return [safe_slice(seq, 0, len(seq))]

    return [
        safe_slice(seq, start, start + part_size)
        for start in range(0, len(seq), part_size)
    ]


# =============================================================================
# Construction and element-wise transforms
# =============================================================================


def fill(value: T, count: int) -> list[T]:
    """Return `count` repetitions of `value`, or [] when count <= 0."""
    if count <= 0:
        return []
    return [value] * count


def filter_values(seq: Sequence[T], predicate: Predicate[T] | None) -> list[T]:
    """Keep the elements for which the predicate is true. None keeps everything."""
    if predicate is None:
        return copy(seq)
    return [item for item in seq if predicate(item)]


def map_values(seq: Sequence[T], transform: Transform[T] | None) -> list[T]:
    """Apply `transform` to every element. None is the identity."""
    if transform is None:
        return copy(seq)
    return [transform(item) for item in seq]


def reverse(seq: Sequence[T]) -> list[T]:
    return list(reversed(seq))


# =============================================================================
# Text rendering
# =============================================================================


def format_values(
    seq: Sequence[T], template: str, style: str = DEFAULT_FORMAT_STYLE
) -> list[str]:
    """
    Render each element through a formatting template.

    Args:
        seq: Elements to render.
        template: "{:03d}"-like template for style "{", "%03d"-like for style "%".
        style: Either "{" (str.format) or "%" (printf-style).

    Returns:
        list[str]: One rendered string per element.
    """
    if style not in FORMAT_STYLES:
        raise ValueError(f"Style must be one of: {', '.join(FORMAT_STYLES)}")

    if style == "%":
        return [template % (item,) for item in seq]
    return [template.format(item) for item in seq]


def stringify(seq: Sequence[Stringer]) -> list[str]:
    """Return the textual representation of each element."""
    return [str(item) for item in seq]
