"""Tests for utils/algorithms/sets.py"""

import copy

from utils.algorithms.sets import Set


class TestConstruction:
    def test_empty(self):
        assert len(Set()) == 0
        assert Set().values() == []

    def test_duplicates_collapse(self):
        s = Set(1, 1, 2, 3, 3)
        assert len(s) == 3
        assert sorted(s.values()) == [1, 2, 3]

    def test_repr(self):
        assert repr(Set()) == "Set()"
        assert repr(Set("a")) == "Set('a')"


class TestBasicOperations:
    def test_add(self):
        s = Set[int]()
        s.add(1, 2, 3)
        assert s == Set(1, 2, 3)

    def test_add_existing_is_noop(self):
        s = Set(1, 2)
        s.add(2)
        assert len(s) == 2

    def test_delete(self):
        """Absent values are ignored."""
        s = Set(1, 2, 3, 4, 5)
        s.delete(4, 5, 6, 7)
        assert s == Set(1, 2, 3)

    def test_truncate(self):
        s = Set("1", "2", "3")
        s.truncate()
        assert len(s) == 0

    def test_truncate_does_not_touch_previous_snapshot(self):
        """Truncate starts over with a new backing store."""
        s = Set(1, 2, 3)
        snapshot = s._items
        s.truncate()
        s.add(4)
        assert list(snapshot) == [1, 2, 3]

    def test_has(self):
        s = Set("one", "two")
        assert s.has("one")
        assert not s.has("three")
        assert "two" in s
        assert "three" not in s

    def test_len(self):
        assert len(Set("one")) == 1

    def test_values_returns_new_list(self):
        s = Set(1, 2, 3)
        values = s.values()
        values.append(4)
        assert sorted(s.values()) == [1, 2, 3]

    def test_iteration_over_snapshot(self):
        """Deleting while iterating is allowed."""
        s = Set(1, 2, 3, 4)
        for value in s:
            if value % 2:
                s.delete(value)
        assert s == Set(2, 4)


class TestMerge:
    def test_merge_several(self):
        s = Set(1, 2)
        s.merge(Set(2, 3, 4), Set(3, 4, 5))
        assert s == Set(1, 2, 3, 4, 5)

    def test_merge_nothing(self):
        s = Set(1, 2)
        s.merge()
        assert s == Set(1, 2)

    def test_merge_does_not_mutate_others(self):
        first, second = Set(2), Set(3)
        Set(1).merge(first, second)
        assert first == Set(2)
        assert second == Set(3)

    def test_merge_with_itself(self):
        s = Set(1, 2)
        s.merge(s)
        assert s == Set(1, 2)

    def test_merge_plain_iterables(self):
        s = Set(1)
        s.merge([2, 3], {4})
        assert s == Set(1, 2, 3, 4)


class TestDiff:
    def test_diff_several(self):
        s = Set(1, 2, 3, 4, 5)
        s.diff(Set(4), Set(5))
        assert s == Set(1, 2, 3)

    def test_diff_without_others_is_noop(self):
        s = Set(1, 2, 3)
        s.diff()
        assert s == Set(1, 2, 3)

    def test_diff_does_not_mutate_others(self):
        first, second = Set(4), Set(5)
        Set(1, 4, 5).diff(first, second)
        assert first == Set(4)
        assert second == Set(5)

    def test_diff_with_itself(self):
        s = Set(1, 2)
        s.diff(s)
        assert len(s) == 0


class TestIntersect:
    def test_intersect_several(self):
        s = Set(1, 2, 3, 4, 5)
        s.intersect(Set(1, 2, 3, 4), Set(1, 2, 3, 5))
        assert s == Set(1, 2, 3)

    def test_intersect_without_others_empties(self):
        """Intersecting with nothing yields nothing, unlike diff()."""
        s = Set(1, 2, 3, 4, 5)
        s.intersect()
        assert len(s) == 0

    def test_intersect_empty_set(self):
        s = Set[int]()
        s.intersect(Set(1))
        assert len(s) == 0

    def test_intersect_does_not_mutate_others(self):
        first, second = Set(1, 2, 9), Set(2, 3, 8)
        Set(1, 2, 3).intersect(first, second)
        assert first == Set(1, 2, 9)
        assert second == Set(2, 3, 8)

    def test_intersect_with_itself(self):
        s = Set(1, 2)
        s.intersect(s)
        assert s == Set(1, 2)

    def test_intersect_plain_iterables(self):
        s = Set("a", "b", "c")
        s.intersect(["a", "b"], ("b", "c"))
        assert s == Set("b")


class TestEquals:
    def test_equal_sets(self):
        assert Set("1", "2").equals(Set("2", "1"))

    def test_different_length(self):
        assert not Set("1", "2").equals(Set("1", "2", "3"))

    def test_same_length_different_members(self):
        assert not Set(1, 2).equals(Set(1, 3))

    def test_eq_operator(self):
        assert Set(1, 2) == Set(2, 1)
        assert Set(1, 2) != Set(1)
        assert Set(1, 2) != {1, 2}


class TestFilterAndMap:
    def test_filter(self):
        s = Set(1, 2, 3, 4, 5)
        s.filter(lambda i: i < 4)
        assert s == Set(1, 2, 3)

    def test_map(self):
        s = Set(1, 2, 3)
        s.map(lambda i: i + 1)
        assert s == Set(2, 3, 4)

    def test_map_empty(self):
        s = Set[int]()
        s.map(lambda i: i + 1)
        assert len(s) == 0

    def test_map_collapsing_values_shrinks(self):
        s = Set(1, 2, 3, 4)
        s.map(lambda i: i % 2)
        assert s == Set(0, 1)


class TestCopy:
    def test_copy_is_equal(self):
        s = Set(1, 2, 3)
        assert s.copy() == s

    def test_copy_is_independent(self):
        s = Set(1, 2, 3)
        c = s.copy()
        c.add(4)
        s.delete(1)
        assert s == Set(2, 3)
        assert c == Set(1, 2, 3, 4)

    def test_copy_module(self):
        s = Set(1, 2)
        c = copy.copy(s)
        c.truncate()
        assert s == Set(1, 2)

    def test_elements_are_not_deep_copied(self):
        element = (1, [2])
        c = Set(element).copy()
        assert c.values()[0] is element


class TestValueReturningVariants:
    def test_union(self):
        s = Set(1, 2)
        assert s.union(Set(3), [4]) == Set(1, 2, 3, 4)
        assert s == Set(1, 2)

    def test_difference(self):
        s = Set(1, 2, 3)
        assert s.difference(Set(1)) == Set(2, 3)
        assert s.difference() == s
        assert s == Set(1, 2, 3)

    def test_intersection(self):
        s = Set(1, 2, 3)
        assert s.intersection(Set(2, 3, 4)) == Set(2, 3)
        assert s.intersection() == Set()
        assert s == Set(1, 2, 3)

    def test_operators(self):
        a, b = Set(1, 2, 3), Set(3, 4)
        assert a | b == Set(1, 2, 3, 4)
        assert a - b == Set(1, 2)
        assert a & b == Set(3)
        assert a == Set(1, 2, 3)
