from __future__ import annotations
from typing import Any, TypeVar, Generic, Type

__all__ = ['NA', 'is_na', 'na_int', 'na_float']

T = TypeVar('T')


class NA(Generic[T]):
    """
    Undefined value marker.

    Used as the default for omitted bounds and as a value that can live inside a sequence.
    Arithmetic on NA yields NA and every comparison with NA is false, so an undefined element
    propagates through an algorithm instead of being filtered out.
    """
    __slots__ = ('type',)

    _type_cache: dict[Type, NA] = {}

    # noinspection PyShadowingBuiltins
    def __new__(cls, type: Type[T] | None = int) -> NA[T]:
        if type is None:
            return super().__new__(cls)
        try:
            return cls._type_cache[type]
        except KeyError:
            na = super().__new__(cls)
            cls._type_cache[type] = na
            return na

    # noinspection PyShadowingBuiltins
    def __init__(self, type: Type[T] | None = int) -> None:
        self.type = type

    def __repr__(self) -> str:
        if self.type is None:
            return "NA"
        return f"NA[{self.type.__name__}]"

    def __str__(self) -> str:
        return ""

    def __hash__(self) -> int:
        return hash(self.type)

    def __bool__(self) -> bool:
        return False

    def __index__(self) -> int:
        raise TypeError("NA cannot be used as an index")

    #
    # Arithmetic operations
    #

    def __neg__(self) -> NA[T]:
        return self

    def __abs__(self) -> NA[T]:
        return self

    def __add__(self, _: Any) -> NA[T]:
        return self

    def __radd__(self, _: Any) -> NA[T]:
        return self

    def __sub__(self, _: Any) -> NA[T]:
        return self

    def __rsub__(self, _: Any) -> NA[T]:
        return self

    def __mul__(self, _: Any) -> NA[T]:
        return self

    def __rmul__(self, _: Any) -> NA[T]:
        return self

    def __truediv__(self, _: Any) -> NA[T]:
        return self

    def __rtruediv__(self, _: Any) -> NA[T]:
        return self

    def __floordiv__(self, _: Any) -> NA[T]:
        return self

    def __rfloordiv__(self, _: Any) -> NA[T]:
        return self

    def __mod__(self, _: Any) -> NA[T]:
        return self

    def __rmod__(self, _: Any) -> NA[T]:
        return self

    #
    # All comparisons are false, NA is not even equal to itself
    #

    def __eq__(self, _: Any) -> bool:
        return False

    def __ne__(self, _: Any) -> bool:
        return True

    def __gt__(self, _: Any) -> bool:
        return False

    def __lt__(self, _: Any) -> bool:
        return False

    def __le__(self, _: Any) -> bool:
        return False

    def __ge__(self, _: Any) -> bool:
        return False


def is_na(value: Any) -> bool:
    """
    Check if a value is undefined. ``None`` counts as undefined too.

    :param value: The value to check
    :return: True if the value is NA or None
    """
    return value is None or isinstance(value, NA)


na_int = NA(int)
na_float = NA(float)
