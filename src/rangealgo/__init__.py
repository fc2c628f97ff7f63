"""
Side-effect free algorithms on ranges of sequences

Every function takes the sequence first and optional ``first``/``last`` bounds, which are resolved
the same way everywhere (negative bounds wrap once, out-of-range bounds are clamped). Functions that
"modify" a sequence return a new list.
"""
from .lib import log
from .lib.sequence import concat, get, insert, insertv, replace_range, rotl, rotr, slice, sublist
from .lib.search import (adjacent_find, all_of, any_of, contains, count, count_if, find, find_if, find_if_not,
                         none_of)
from .lib.reorder import (insert_sorted, insertv_sorted, remove, remove_if, replace, replace_if, reverse,
                          stable_partition, std_rotate, unique)
from .lib.sorted_range import binary_search, equal_range, is_sorted, lower_bound, sort, upper_bound
from .lib.numeric import accumulate
from .core.range_resolver import resolve, resolve_index, clamped_range
from .core.errors import DomainError
from .core.config import Config
from .types.na import NA, na_int, is_na

__version__ = "0.1.0"

__all__ = [
    # Range resolution
    'resolve', 'resolve_index', 'clamped_range',

    # Core list ops
    'concat', 'get', 'insert', 'insertv', 'replace_range', 'rotl', 'rotr', 'slice', 'sublist',

    # Search
    'adjacent_find', 'all_of', 'any_of', 'contains', 'count', 'count_if', 'find', 'find_if', 'find_if_not',
    'none_of',

    # Reordering
    'insert_sorted', 'insertv_sorted', 'remove', 'remove_if', 'replace', 'replace_if', 'reverse',
    'stable_partition', 'std_rotate', 'unique',

    # Sorted ranges
    'binary_search', 'equal_range', 'is_sorted', 'lower_bound', 'sort', 'upper_bound',

    # Accumulation
    'accumulate',

    # Types, errors, config
    'NA', 'na_int', 'is_na', 'DomainError', 'Config', 'log',
]
