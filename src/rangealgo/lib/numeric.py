from typing import TypeVar, Any, Sequence
from operator import add

from ..core.range_resolver import resolve
from ..types.na import NA, na_int
from ..types.functions import BinaryOp

T = TypeVar('T')

__all__ = ['accumulate']


def accumulate(v: Sequence[Any], first: int | NA[int] = na_int, last: int | NA[int] = na_int,
               init: T = 0, op: BinaryOp = add) -> T:
    """
    Folds the elements of the range from left to right.

    Undefined (NA) elements are not skipped, with the default ``add`` they make the result NA.

    :param v: Input sequence
    :param first: First index of the range
    :param last: Last index of the range (exclusive)
    :param init: Initial value, returned as it is for an empty range
    :param op: Combining function, called as ``op(acc, element)``
    :return: The accumulated value
    """
    f, l = resolve(v, first, last)  # noqa: E741
    acc = init
    for i in range(f, l):
        acc = op(acc, v[i])
    return acc
