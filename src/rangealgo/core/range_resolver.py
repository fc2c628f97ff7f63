import logging
import operator
from typing import Any, Sequence

from typing_extensions import SupportsIndex

from .errors import DomainError
from ..types.na import NA, na_int, is_na
from ..lib.log import logger

__all__ = ['resolve', 'resolve_index', 'clamped_range']


def resolve_index(v: Sequence[Any], i: SupportsIndex | NA[int] | None, default: int) -> int:
    """
    Resolve a single bound against the length of a sequence.

    Negative values wrap once by adding the length, what is still negative after that is clamped
    to 0, and anything beyond the length is clamped to the length.

    :param v: The sequence the bound belongs to
    :param i: The bound, any integer-like value, NA or None means omitted
    :param default: The value to use for an omitted bound
    :return: The bound in ``[0, len(v)]``
    """
    if is_na(i):
        return default
    size = len(v)
    index = operator.index(i)
    if index < 0:
        index += size
        if index < 0:
            index = 0
    elif index > size:
        index = size
    if index != i and logger.isEnabledFor(logging.DEBUG):
        logger.debug("Bound %d resolved to %d (length: %d)", i, index, size)
    return index


def resolve(v: Sequence[Any], first: int | NA[int] | None = na_int,
            last: int | NA[int] | None = na_int) -> tuple[int, int]:
    """
    Resolve user supplied bounds into a valid half-open range of the sequence.

    The result always satisfies ``0 <= first <= last <= len(v)``. If the bounds are out of order
    after wrapping and clamping, the range is empty and it is reported at ``last``.

    :param v: The sequence
    :param first: First index (inclusive), defaults to 0
    :param last: Last index (exclusive), defaults to the length of the sequence
    :return: The ``(first, last)`` pair
    """
    f = resolve_index(v, first, 0)
    l = resolve_index(v, last, len(v))  # noqa: E741
    if f > l:
        logger.debug("Range [%d, %d) is out of order, collapsed to empty range at %d", f, l, l)
        f = l
    return f, l


def clamped_range(v: Sequence[Any], begin: int | NA[int] | None = na_int, step: int = 1,
                  end: int | NA[int] | None = na_int) -> range:
    """
    Create the index range used by strided extraction.

    A positive step resolves the bounds as ``resolve()`` does, so out of order bounds give an
    empty range. A negative step walks from the higher bound down to the lower one, whichever
    order they were given in. The lower bound is inclusive and the higher one is exclusive.

    :param v: The sequence
    :param begin: One of the bounds, defaults to 0
    :param step: The stride, must not be zero
    :param end: The other bound, defaults to the length of the sequence
    :return: A range object of valid indices of ``v``
    :raises DomainError: If step is zero
    """
    if step == 0:
        logger.debug("Zero stride requested for a sequence of length %d", len(v))
        raise DomainError("Step cannot be zero")
    if step > 0:
        f, l = resolve(v, begin, end)  # noqa: E741
        return range(f, l, step)
    lo = resolve_index(v, begin, 0)
    hi = resolve_index(v, end, len(v))
    if lo > hi:
        lo, hi = hi, lo
    return range(hi - 1, lo - 1, step)
