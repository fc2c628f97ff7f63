"""
Algorithm library of rangealgo
"""
# log must be imported first, the range resolver depends on it
from . import log
from . import sequence, search, sorted_range, reorder, numeric

__all__ = ['log', 'sequence', 'search', 'sorted_range', 'reorder', 'numeric']
