from typing import Any, Callable, TypeAlias

__all__ = ['Predicate', 'Comparator', 'BinaryOp']

# One argument, returns whether the element matches
Predicate: TypeAlias = Callable[[Any], bool]

# Two arguments, either an equivalence or a strict weak ordering (e.g. operator.lt)
Comparator: TypeAlias = Callable[[Any, Any], bool]

# (accumulator, element) -> accumulator
BinaryOp: TypeAlias = Callable[[Any, Any], Any]
