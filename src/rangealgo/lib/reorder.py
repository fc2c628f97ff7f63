"""
Reordering algorithms

Each function returns a new list in which only the resolved range is transformed. Elements
before and after the range are passed through unchanged.
"""
from typing import TypeVar, Any, Sequence, Iterable
from operator import eq, lt

from ..core.errors import DomainError
from ..core.range_resolver import resolve, resolve_index
from ..types.na import NA, na_int
from ..types.functions import Predicate, Comparator
from .sequence import concat
from .sorted_range import upper_bound
from . import log

T = TypeVar('T')

__all__ = [
    'insert_sorted',
    'insertv_sorted',
    'remove',
    'remove_if',
    'replace',
    'replace_if',
    'reverse',
    'stable_partition',
    'std_rotate',
    'unique',
]


def remove(v: Sequence[T], first: int | NA[int] = na_int, last: int | NA[int] = na_int) -> list[T]:
    """
    Removes all elements of the range.

    :param v: Input sequence
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :return: New list, shorter by the size of the resolved range
    """
    f, l = resolve(v, first, last)  # noqa: E741
    return concat(v[:f], v[l:])


def remove_if(v: Sequence[T], p: Predicate, first: int | NA[int] = na_int, last: int | NA[int] = na_int) -> list[T]:
    """
    Removes the elements of the range for which the predicate is true.

    :param v: Input sequence
    :param p: Predicate
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :return: New list with the kept elements in their original order
    """
    f, l = resolve(v, first, last)  # noqa: E741
    return concat(v[:f], [x for x in v[f:l] if not p(x)], v[l:])


def replace(v: Sequence[T], old: Any, new: T, first: int | NA[int] = na_int, last: int | NA[int] = na_int,
            cmp: Comparator = eq) -> list[T]:
    """
    Replaces every element of the range that is equal to ``old`` with ``new``.

    :param v: Input sequence
    :param old: Value to replace
    :param new: Replacement value
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :param cmp: Equality comparator, called as ``cmp(x, old)``
    :return: New list of the same length
    """
    return replace_if(v, new, lambda x: cmp(x, old), first, last)


def replace_if(v: Sequence[T], new: T, p: Predicate, first: int | NA[int] = na_int,
               last: int | NA[int] = na_int) -> list[T]:
    """
    Replaces every element of the range for which the predicate is true with ``new``.

    :param v: Input sequence
    :param new: Replacement value
    :param p: Predicate
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :return: New list of the same length
    """
    f, l = resolve(v, first, last)  # noqa: E741
    return concat(v[:f], [new if p(x) else x for x in v[f:l]], v[l:])


def reverse(v: Sequence[T], first: int | NA[int] = na_int, last: int | NA[int] = na_int) -> list[T]:
    """
    Reverses the order of the elements of the range.

    :param v: Input sequence
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :return: New list with the range reversed
    """
    f, l = resolve(v, first, last)  # noqa: E741
    return concat(v[:f], [v[i] for i in range(l - 1, f - 1, -1)], v[l:])


def std_rotate(v: Sequence[T], first: int | NA[int], first_n: int, last: int | NA[int] = na_int) -> list[T]:
    """
    Rotates the range so that ``first_n`` becomes its first element.

    The result is ``v[:first] + v[first_n:last] + v[first:first_n] + v[last:]``.

    :param v: Input sequence
    :param first: First index of the range
    :param first_n: Index of the element that should become the first one
    :param last: Last index of the range (exclusive)
    :return: New list with the range rotated
    :raises DomainError: If ``first_n`` is not inside ``[first, last]`` after resolution
    """
    f, l = resolve(v, first, last)  # noqa: E741
    n = resolve_index(v, first_n, f)
    if not f <= n <= l:
        log.debug("Rotation midpoint %s resolved to %d, outside of [%d, %d]", first_n, n, f, l)
        raise DomainError(f"Rotation midpoint {first_n} is outside of the range [{f}, {l}]")
    return concat(v[:f], v[n:l], v[f:n], v[l:])


def unique(v: Sequence[T], first: int | NA[int] = na_int, last: int | NA[int] = na_int,
           cmp: Comparator = eq) -> list[T]:
    """
    Collapses runs of consecutive equal elements of the range to their first element.

    Every element is compared to the last kept one, as ``cmp(kept, x)``. This only removes all
    duplicates if the range is sorted by the same criteria.

    :param v: Input sequence
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :param cmp: Equality comparator
    :return: New list
    """
    f, l = resolve(v, first, last)  # noqa: E741
    kept: list[T] = []
    for x in v[f:l]:
        if not kept or not cmp(kept[-1], x):
            kept.append(x)
    return concat(v[:f], kept, v[l:])


def stable_partition(v: Sequence[T], first: int | NA[int] = na_int, last: int | NA[int] = na_int,
                     p: Predicate = bool) -> list[T]:
    """
    Moves the elements of the range for which the predicate is true before the others.

    The relative order inside both groups is preserved.

    :param v: Input sequence
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :param p: Predicate, the truthiness of the element by default
    :return: New list with the range partitioned
    """
    f, l = resolve(v, first, last)  # noqa: E741
    matching: list[T] = []
    rest: list[T] = []
    for x in v[f:l]:
        (matching if p(x) else rest).append(x)
    return concat(v[:f], matching, rest, v[l:])


def insert_sorted(v: Sequence[T], x: T, cmp: Comparator = lt) -> list[T]:
    """
    Inserts a value into a sorted sequence, keeping it sorted.

    The value is placed after all elements equivalent to it.

    :param v: Input sequence, sorted under ``cmp``
    :param x: Value to insert
    :param cmp: Less-than comparator
    :return: New sorted list
    """
    pos = upper_bound(v, x, cmp=cmp)
    return concat(v[:pos], [x], v[pos:])


def insertv_sorted(v: Sequence[T], xs: Iterable[T], cmp: Comparator = lt) -> list[T]:
    """
    Inserts all values into a sorted sequence, keeping it sorted.

    The values do not need to be sorted. They are inserted one by one, in order, so equivalent
    elements end up in the order they arrived.

    :param v: Input sequence, sorted under ``cmp``
    :param xs: Values to insert
    :param cmp: Less-than comparator
    :return: New sorted list
    """
    result = list(v)
    for x in xs:
        result.insert(upper_bound(result, x, cmp=cmp), x)
    return result
