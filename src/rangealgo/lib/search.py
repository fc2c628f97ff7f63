"""
Search algorithms

Every function works on the resolved ``[first, last)`` range of the sequence. When nothing is
found, the index functions return the resolved ``last``, not -1.
"""
from typing import TypeVar, Any, Sequence
from operator import eq

from ..core.range_resolver import resolve
from ..types.na import NA, na_int
from ..types.functions import Predicate, Comparator
from ..utils.range_view import RangeView

T = TypeVar('T')

__all__ = [
    'adjacent_find',
    'all_of',
    'any_of',
    'contains',
    'count',
    'count_if',
    'find',
    'find_if',
    'find_if_not',
    'none_of',
]


def _view(v: Sequence[T], first: int | NA[int], last: int | NA[int]) -> RangeView[T]:
    f, l = resolve(v, first, last)  # noqa: E741
    return RangeView(v, range(f, l))


def find_if(v: Sequence[T], p: Predicate, first: int | NA[int] = na_int, last: int | NA[int] = na_int) -> int:
    """
    Returns the index of the first element in range for which the predicate is true.

    :param v: Input sequence
    :param p: Predicate
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :return: Index of the first matching element, or the resolved ``last`` if there is none
    """
    view = _view(v, first, last)
    for i, x in view.enumerate():
        if p(x):
            return i
    return view.stop


def find_if_not(v: Sequence[T], p: Predicate, first: int | NA[int] = na_int,
                last: int | NA[int] = na_int) -> int:
    """
    Returns the index of the first element in range for which the predicate is false.

    :param v: Input sequence
    :param p: Predicate
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :return: Index of the first failing element, or the resolved ``last`` if there is none
    """
    view = _view(v, first, last)
    for i, x in view.enumerate():
        if not p(x):
            return i
    return view.stop


def find(v: Sequence[T], value: Any, first: int | NA[int] = na_int, last: int | NA[int] = na_int,
         cmp: Comparator = eq) -> int:
    """
    Returns the index of the first element ``x`` in range where ``cmp(x, value)`` is true.

    :param v: Input sequence
    :param value: Value to search for
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :param cmp: Equality comparator
    :return: Index of the first match, or the resolved ``last`` if there is none
    """
    return find_if(v, lambda x: cmp(x, value), first, last)


def all_of(v: Sequence[T], p: Predicate, first: int | NA[int] = na_int, last: int | NA[int] = na_int) -> bool:
    """
    Returns true if the predicate is true for every element in range (or the range is empty).
    """
    return all(p(x) for x in _view(v, first, last))


def any_of(v: Sequence[T], p: Predicate, first: int | NA[int] = na_int, last: int | NA[int] = na_int) -> bool:
    """
    Returns true if the predicate is true for at least one element in range.
    """
    return any(p(x) for x in _view(v, first, last))


def none_of(v: Sequence[T], p: Predicate, first: int | NA[int] = na_int, last: int | NA[int] = na_int) -> bool:
    """
    Returns true if the predicate is false for every element in range (or the range is empty).
    """
    return not any_of(v, p, first, last)


def contains(v: Sequence[T], value: Any, first: int | NA[int] = na_int, last: int | NA[int] = na_int,
             cmp: Comparator = eq) -> bool:
    """
    Returns true if the range contains an element equal to the value.

    :param v: Input sequence
    :param value: Value to search for
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :param cmp: Equality comparator
    :return: True if ``find()`` finds the value
    """
    return find(v, value, first, last, cmp) != resolve(v, first, last)[1]


def count_if(v: Sequence[T], p: Predicate, first: int | NA[int] = na_int, last: int | NA[int] = na_int) -> int:
    """
    Returns the number of elements in range for which the predicate is true.
    """
    return sum(1 for x in _view(v, first, last) if p(x))


def count(v: Sequence[T], value: Any, first: int | NA[int] = na_int, last: int | NA[int] = na_int,
          cmp: Comparator = eq) -> int:
    """
    Returns the number of elements in range equal to the value.
    """
    return count_if(v, lambda x: cmp(x, value), first, last)


def adjacent_find(v: Sequence[T], first: int | NA[int] = na_int, last: int | NA[int] = na_int,
                  cmp: Comparator = eq) -> int:
    """
    Returns the index of the first element in range that is equal to its successor.

    Both elements of the pair must be inside the range.

    :param v: Input sequence
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :param cmp: Equality comparator
    :return: Index of the first element of the pair, or the resolved ``last`` if there is none
    """
    f, l = resolve(v, first, last)  # noqa: E741
    for i in range(f, l - 1):
        if cmp(v[i], v[i + 1]):
            return i
    return l
