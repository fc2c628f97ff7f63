"""
Core list operations

Structural operations that the higher level algorithms build their results from. None of them
modify their input, every sequence result is a new list.
"""
from typing import TypeVar, Any, Sequence, Iterable

import builtins
import operator

from ..core.errors import DomainError
from ..core.range_resolver import resolve, clamped_range
from ..types.na import NA, na_int, is_na
from . import log

T = TypeVar('T')

__all__ = [
    'concat',
    'get',
    'insert',
    'insertv',
    'replace_range',
    'rotl',
    'rotr',
    'slice',
    'sublist',
]


def concat(*vs: Iterable[T]) -> list[T]:
    """
    Concatenates any number of sequences into a new list.

    Parts are merged pairwise, level by level, so every element is copied ``O(log k)`` times
    for ``k`` parts and no recursion is involved.

    :param vs: Sequences to concatenate
    :return: New list containing the elements of all sequences in order
    """
    parts = [list(v) for v in vs]
    if not parts:
        return []
    while len(parts) > 1:
        merged = [parts[i] + parts[i + 1] for i in builtins.range(0, len(parts) - 1, 2)]
        if len(parts) % 2:
            merged.append(parts[-1])
        parts = merged
    return parts[0]


def get(v: Sequence[T], i: int) -> T:
    """
    Returns the element at the specified index, wrapping around in both directions.

    :param v: Input sequence
    :param i: Any integer index
    :return: The element at ``i mod len(v)``
    :raises DomainError: If the sequence is empty
    """
    if len(v) == 0:
        log.debug("Element %d requested from an empty sequence", i)
        raise DomainError(f"Cannot get element {i} of an empty sequence")
    return v[i % len(v)]


def _insert_position(v: Sequence[Any], i: int | NA[int] | None) -> int:
    # Insertion positions are clamped, they never wrap
    if is_na(i):
        return len(v)
    return builtins.max(0, builtins.min(operator.index(i), len(v)))


def insert(v: Sequence[T], x: T, i: int | NA[int] = na_int) -> list[T]:
    """
    Returns a new list with a value inserted at the specified position.

    :param v: Input sequence
    :param x: Value to insert
    :param i: Insert position, clamped to ``[0, len(v)]``, appends if omitted
    :return: New list, elements at or after ``i`` shifted right by one
    """
    pos = _insert_position(v, i)
    return concat(v[:pos], [x], v[pos:])


def insertv(v: Sequence[T], i: int | NA[int], xs: Iterable[T]) -> list[T]:
    """
    Returns a new list with all values of ``xs`` inserted at the specified position, in order.

    :param v: Input sequence
    :param i: Insert position, clamped to ``[0, len(v)]``
    :param xs: Values to insert
    :return: New list, elements at or after ``i`` shifted right by ``len(xs)``
    """
    pos = _insert_position(v, i)
    return concat(v[:pos], xs, v[pos:])


# noinspection PyShadowingBuiltins
def replace_range(v: Sequence[T], range: tuple[int, int], xs: Iterable[T]) -> list[T]:
    """
    Replaces a range of the sequence with the given values.

    The number of values does not need to match the size of the range.

    :param v: Input sequence
    :param range: ``(first, last)`` pair, resolved as any other range
    :param xs: Replacement values
    :return: New list ``v[:first] + xs + v[last:]``
    """
    b, e = resolve(v, *range)
    return concat(v[:b], xs, v[e:])


def sublist(v: Sequence[T], b: int | NA[int] = na_int, e: int | NA[int] = na_int) -> list[T]:
    """
    Returns the elements of a range of the sequence.

    :param v: Input sequence
    :param b: First index (inclusive)
    :param e: Last index (exclusive)
    :return: New list of the elements in the resolved range
    """
    b, e = resolve(v, b, e)
    return list(v[b:e])


# noinspection PyShadowingBuiltins
def slice(v: Sequence[T], begin: int | NA[int] = na_int, step: int = 1, end: int | NA[int] = na_int,
          range: tuple[int, int] | None = None) -> list[T]:
    """
    Returns every ``step``-th element between two bounds.

    The bounds are resolved as for any range, so ``begin > end`` gives an empty list. With a
    negative step the elements are taken from the higher bound down to the lower one.

    :param v: Input sequence
    :param begin: One of the bounds, defaults to 0
    :param step: The stride, must not be zero
    :param end: The other bound, defaults to the length of the sequence
    :param range: Optional ``(begin, end)`` pair, overrides ``begin`` and ``end``
    :return: New list of the selected elements
    :raises DomainError: If step is zero
    """
    if range is not None:
        begin, end = range
    return [v[i] for i in clamped_range(v, begin, step, end)]


def rotl(v: Sequence[T], l: int = 1) -> list[T]:  # noqa: E741
    """
    Rotates the sequence to the left, the first ``l`` elements move to the end.

    :param v: Input sequence
    :param l: Number of positions, taken modulo the length
    :return: New rotated list
    """
    if len(v) == 0:
        return []
    n = l % len(v)
    return concat(v[n:], v[:n])


def rotr(v: Sequence[T], l: int = 1) -> list[T]:  # noqa: E741
    """
    Rotates the sequence to the right, the last ``l`` elements move to the front.

    :param v: Input sequence
    :param l: Number of positions, taken modulo the length
    :return: New rotated list
    """
    return rotl(v, -l)
