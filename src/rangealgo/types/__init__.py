from .na import NA, is_na, na_int, na_float
from .functions import Predicate, Comparator, BinaryOp

__all__ = ['NA', 'is_na', 'na_int', 'na_float', 'Predicate', 'Comparator', 'BinaryOp']
