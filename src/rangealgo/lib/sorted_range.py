"""
Algorithms on sorted ranges

The binary searches expect the resolved range to be sorted under the comparator; this is not
checked. With an inconsistent comparator the returned index is unspecified, but always within
the range.
"""
from typing import TypeVar, Any, Sequence
from operator import lt

from ..core.range_resolver import resolve
from ..types.na import NA, na_int
from ..types.functions import Comparator
from .sequence import concat

T = TypeVar('T')

__all__ = [
    'binary_search',
    'equal_range',
    'is_sorted',
    'lower_bound',
    'sort',
    'upper_bound',
]


def lower_bound(v: Sequence[T], value: Any, first: int | NA[int] = na_int, last: int | NA[int] = na_int,
                cmp: Comparator = lt) -> int:
    """
    Returns the first index in range whose element is not less than the value.

    :param v: Input sequence, sorted in range
    :param value: Value to search for
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :param cmp: Less-than comparator
    :return: First ``i`` where ``cmp(v[i], value)`` is false, or the resolved ``last``
    """
    lo, hi = resolve(v, first, last)
    length = hi - lo
    while length > 0:
        half = length // 2
        mid = lo + half
        if cmp(v[mid], value):
            lo = mid + 1
            length -= half + 1
        else:
            length = half
    return lo


def upper_bound(v: Sequence[T], value: Any, first: int | NA[int] = na_int, last: int | NA[int] = na_int,
                cmp: Comparator = lt) -> int:
    """
    Returns the first index in range whose element is greater than the value.

    :param v: Input sequence, sorted in range
    :param value: Value to search for
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :param cmp: Less-than comparator
    :return: First ``i`` where ``cmp(value, v[i])`` is true, or the resolved ``last``
    """
    lo, hi = resolve(v, first, last)
    length = hi - lo
    while length > 0:
        half = length // 2
        mid = lo + half
        if not cmp(value, v[mid]):
            lo = mid + 1
            length -= half + 1
        else:
            length = half
    return lo


def equal_range(v: Sequence[T], value: Any, first: int | NA[int] = na_int, last: int | NA[int] = na_int,
                cmp: Comparator = lt) -> tuple[int, int]:
    """
    Returns the range of elements equivalent to the value.

    :return: ``(lower_bound, upper_bound)`` pair
    """
    return lower_bound(v, value, first, last, cmp), upper_bound(v, value, first, last, cmp)


def binary_search(v: Sequence[T], value: Any, first: int | NA[int] = na_int, last: int | NA[int] = na_int,
                  cmp: Comparator = lt) -> bool:
    """
    Returns true if the sorted range contains an element equivalent to the value.

    :param v: Input sequence, sorted in range
    :param value: Value to search for
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :param cmp: Less-than comparator
    :return: True if ``lower_bound() < upper_bound()``
    """
    lo, hi = equal_range(v, value, first, last, cmp)
    return lo < hi


def is_sorted(v: Sequence[T], first: int | NA[int] = na_int, last: int | NA[int] = na_int,
              cmp: Comparator = lt) -> bool:
    """
    Returns true if no element in range is less than its predecessor.
    """
    f, l = resolve(v, first, last)  # noqa: E741
    return not any(cmp(v[i + 1], v[i]) for i in range(f, l - 1))


def _merge(left: list[T], right: list[T], cmp: Comparator) -> list[T]:
    # Takes from the right only if strictly less, so equal elements keep their order
    result: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if cmp(right[j], left[i]):
            result.append(right[j])
            j += 1
        else:
            result.append(left[i])
            i += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def sort(v: Sequence[T], first: int | NA[int] = na_int, last: int | NA[int] = na_int,
         cmp: Comparator = lt) -> list[T]:
    """
    Returns a new list with the range sorted, the rest of the sequence is left as it is.

    It is a stable bottom-up merge sort, so it only needs the comparator and never recurses.

    :param v: Input sequence
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :param cmp: Less-than comparator, must be a strict weak ordering
    :return: New list with the range sorted
    """
    f, l = resolve(v, first, last)  # noqa: E741
    runs = [[x] for x in v[f:l]]
    while len(runs) > 1:
        merged = [_merge(runs[i], runs[i + 1], cmp) for i in range(0, len(runs) - 1, 2)]
        if len(runs) % 2:
            merged.append(runs[-1])
        runs = merged
    return concat(v[:f], runs[0] if runs else [], v[l:])
