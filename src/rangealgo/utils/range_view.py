from __future__ import annotations
from typing import TypeVar, Generic, Sequence, Iterator

T = TypeVar('T')


class RangeView(Generic[T]):
    """
    A read-only view of a range of a sequence

    ``enumerate()`` yields absolute indices, so search algorithms can report positions of the
    underlying sequence without copying it.
    """

    __slots__ = ('sequence', 'range')

    def __init__(self, sequence: Sequence[T], range_object: range | None = None) -> None:
        if range_object is None:
            range_object = range(len(sequence))
        self.range = range_object
        self.sequence = sequence

    def __len__(self) -> int:
        return len(self.range)

    def __iter__(self) -> Iterator[T]:
        sequence = self.sequence
        for i in self.range:
            yield sequence[i]

    def enumerate(self) -> Iterator[tuple[int, T]]:
        """Iterate over ``(absolute index, value)`` pairs of the view."""
        sequence = self.sequence
        for i in self.range:
            yield i, sequence[i]

    @property
    def stop(self) -> int:
        """Absolute index one past the last element of the view."""
        return self.range.stop

    def __repr__(self) -> str:
        return f"RangeView({self.sequence!r}, {self.range!r})"
