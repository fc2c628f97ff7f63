from operator import gt

from rangealgo import binary_search, equal_range, is_sorted, lower_bound, sort, upper_bound

V = [1, 1, 2, 3, 3, 3, 3, 4, 4, 4, 5, 5, 6]


def test_bounds():
    assert lower_bound(V, 4) == 7
    assert upper_bound(V, 4) == 10
    assert lower_bound(V, 1) == 0
    assert upper_bound(V, 1) == 2
    assert lower_bound(V, 6) == 12
    assert upper_bound(V, 6) == 13


def test_bounds_of_missing_values():
    assert lower_bound(V, 0) == 0
    assert upper_bound(V, 0) == 0
    assert lower_bound(V, 100) == len(V)
    assert upper_bound(V, 100) == len(V)
    assert lower_bound([1, 3, 5], 4) == upper_bound([1, 3, 5], 4) == 2


def test_bounds_in_range():
    assert lower_bound(V, 4, 0, 5) == 5
    assert upper_bound(V, 1, 5) == 5
    assert lower_bound(V, 3, 4, 10) == 4
    assert upper_bound(V, 3, -10) == 7


def test_bounds_on_empty_range():
    assert lower_bound(V, 4, 3, 3) == 3
    assert upper_bound(V, 4, 8, 2) == 2
    assert lower_bound([], 1) == 0
    assert not binary_search([], 1)
    assert not binary_search(V, 4, 9, 9)


def test_binary_search():
    assert binary_search(V, 4)
    assert binary_search(V, 1)
    assert binary_search(V, 6)
    assert not binary_search(V, 0)
    assert not binary_search(V, 3.5)
    assert not binary_search(V, 4, 0, 7)
    assert binary_search(V, 4, 0, 8)


def test_bounds_properties():
    for value in range(-1, 9):
        lo, hi = equal_range(V, value)
        assert lo <= hi
        assert binary_search(V, value) == (lo < hi)
        assert hi - lo == V.count(value)


def test_descending_comparator():
    v = [9, 7, 7, 4, 1]
    assert lower_bound(v, 7, cmp=gt) == 1
    assert upper_bound(v, 7, cmp=gt) == 3
    assert binary_search(v, 4, cmp=gt)
    assert not binary_search(v, 5, cmp=gt)


def test_inconsistent_comparator_stays_in_range():
    for first, last in ((0, len(V)), (2, 9), (5, 5)):
        assert first <= lower_bound(V, 3, first, last, cmp=lambda a, b: True) <= last
        assert first <= upper_bound(V, 3, first, last, cmp=lambda a, b: True) <= last


class TestSort:

    def test_sort(self):
        assert sort([3, 1, 2]) == [1, 2, 3]
        assert sort([]) == []
        assert sort([1]) == [1]
        assert sort([5, 2, 8, 1, 9, 3, 7]) == [1, 2, 3, 5, 7, 8, 9]

    def test_sort_range(self):
        assert sort([5, 4, 3, 2, 1], 1, 4) == [5, 2, 3, 4, 1]
        assert sort([5, 4, 3, 2, 1], -2) == [5, 4, 3, 1, 2]

    def test_sort_descending(self):
        assert sort([3, 1, 2], cmp=gt) == [3, 2, 1]

    def test_sort_is_stable(self):
        v = [(2, 'a'), (1, 'b'), (2, 'c'), (1, 'd'), (0, 'e')]
        result = sort(v, cmp=lambda a, b: a[0] < b[0])
        assert result == [(0, 'e'), (1, 'b'), (1, 'd'), (2, 'a'), (2, 'c')]

    def test_sort_does_not_modify_input(self):
        v = [3, 1, 2]
        sort(v)
        assert v == [3, 1, 2]

    def test_sort_large(self):
        v = [(i * 7919) % 1009 for i in range(1009)]
        assert sort(v) == sorted(v)

    def test_sorted_result_is_searchable(self):
        v = sort([9, 2, 7, 2, 4])
        assert is_sorted(v)
        assert lower_bound(v, 2) == 0
        assert upper_bound(v, 2) == 2


def test_is_sorted():
    assert is_sorted(V)
    assert is_sorted([])
    assert is_sorted([1])
    assert not is_sorted([2, 1])
    assert is_sorted([3, 1, 2, 3], 1)
    assert is_sorted([3, 2, 1], cmp=gt)
