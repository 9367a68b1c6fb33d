"""
Mutable hash set with in-place algebra.

Set(*values) keeps unique hashable elements in a dict used as a presence map:
- add / delete / truncate      - Basic mutation
- merge / diff / intersect     - In-place union, subtraction, intersection
- filter / map                 - In-place predicate filtering and transformation
- union / difference / intersection - Same algebra, returning a new Set

Iteration order is unspecified. Operations taking "others" accept any iterable
of elements and never mutate them.

Note the deliberate asymmetry: diff() with no others is a no-op, while
intersect() with no others empties the set.
"""

import logging
from collections.abc import Iterable, Set as AbstractSet
from typing import Callable, Generic, Iterator, TypeVar

logger = logging.getLogger(__name__)

Element = TypeVar("Element")


def _as_lookup(values: Iterable[Element]) -> "Set[Element] | AbstractSet[Element]":
    """Return `values` in a form supporting O(1) membership tests."""
    if isinstance(values, (Set, AbstractSet)):
        return values
    return frozenset(values)


class Set(Generic[Element]):
    """
    Unordered collection of unique elements, mutated in place.

    Example:
        >>> s = Set(1, 2, 2, 3)
        >>> len(s)
        3
        >>> s.intersect(Set(2, 3, 4))
        >>> sorted(s.values())
        [2, 3]
    """

    def __init__(self, *values: Element) -> None:
        self._items: dict[Element, None] = {}
        self.add(*values)

    # -------------------------------------------------------------------------
    # Basic operations
    # -------------------------------------------------------------------------

    def add(self, *values: Element) -> None:
        """Insert values, ignoring those already present."""
        for value in values:
            self._items[value] = None

    def delete(self, *values: Element) -> None:
        """Remove values, ignoring those absent."""
        for value in values:
            self._items.pop(value, None)

    def truncate(self) -> None:
        """Remove every element by starting over with a fresh backing store."""
        self._items = {}

    def has(self, value: Element) -> bool:
        return value in self._items

    def values(self) -> list[Element]:
        """Return the elements as a new list, in no particular order."""
        return list(self._items)

    # -------------------------------------------------------------------------
    # In-place algebra
    # -------------------------------------------------------------------------

    def merge(self, *others: Iterable[Element]) -> None:
        """Add every element found in any of the others."""
        for other in others:
            self.add(*other)

    def diff(self, *others: Iterable[Element]) -> None:
        """Remove every element found in any of the others. No-op without others."""
        if not others:
            return

        excluded: set[Element] = set()
        for other in others:
            excluded.update(other)

        self.delete(*[value for value in self._items if value in excluded])

    def intersect(self, *others: Iterable[Element]) -> None:
        """
        Keep only elements found in every one of the others.

        Intersecting with nothing yields nothing: without others the set is
        emptied.
        """
        if not others:
            logger.debug("intersect() called without others, truncating set")
            self.truncate()
            return

        lookups = [_as_lookup(other) for other in others]
        self.filter(lambda value: all(value in lookup for lookup in lookups))

    def filter(self, predicate: Callable[[Element], bool]) -> None:
        """Remove elements for which the predicate returns False."""
        self.delete(*[value for value in self._items if not predicate(value)])

    def map(self, transform: Callable[[Element], Element]) -> None:
        """
        Replace every element by its transformed value.

        Elements mapped to the same value collapse, so the set may shrink.
        """
        mapped = [transform(value) for value in self._items]
        self.truncate()
        self.add(*mapped)

    # -------------------------------------------------------------------------
    # Comparison and copies
    # -------------------------------------------------------------------------

    def equals(self, other: "Set[Element]") -> bool:
        """True if both sets hold the same elements, regardless of order."""
        if len(self) != len(other):
            return False
        return all(other.has(value) for value in self._items)

    def copy(self) -> "Set[Element]":
        """Return an independent set with the same (not deep-copied) elements."""
        return Set(*self._items)

    # Value-returning variants

    def union(self, *others: Iterable[Element]) -> "Set[Element]":
        result = self.copy()
        result.merge(*others)
        return result

    def difference(self, *others: Iterable[Element]) -> "Set[Element]":
        result = self.copy()
        result.diff(*others)
        return result

    def intersection(self, *others: Iterable[Element]) -> "Set[Element]":
        result = self.copy()
        result.intersect(*others)
        return result

    # -------------------------------------------------------------------------
    # Python protocols
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __iter__(self) -> Iterator[Element]:
        # Snapshot, so the set can be mutated while iterating
        return iter(self.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Set):
            return NotImplemented
        return self.equals(other)

    def __or__(self, other: "Set[Element]") -> "Set[Element]":
        if not isinstance(other, Set):
            return NotImplemented
        return self.union(other)

    def __sub__(self, other: "Set[Element]") -> "Set[Element]":
        if not isinstance(other, Set):
            return NotImplemented
        return self.difference(other)

    def __and__(self, other: "Set[Element]") -> "Set[Element]":
        if not isinstance(other, Set):
            return NotImplemented
        return self.intersection(other)

    def __copy__(self) -> "Set[Element]":
        return self.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self._items))})"
