"""Integer ranges and the unbounded sequence of indices."""

from __future__ import annotations

from typing import Any

from lazyiter.core import RandomAccessIter

#: Default end of a range: the largest 32-bit signed integer.
INT_MAX = 2**31 - 1


class Range(RandomAccessIter):
    """Half-open range of integers ``[begin, end)`` with random access."""

    def __init__(self, begin: int = 0, end: int = INT_MAX) -> None:
        if not isinstance(begin, int) or not isinstance(end, int):
            raise TypeError("range bounds must be integers")
        self._begin = begin
        self._end = end

    def size(self) -> int:
        return max(0, self._end - self._begin)

    def get(self, index: int) -> int:
        return self._begin + index

    def __repr__(self) -> str:
        return f"Range({self._begin}, {self._end})"


def until(begin: int, end: int) -> Range:
    """Range of integers from ``begin`` up to, but not including, ``end``."""
    return Range(begin, end)


def indices() -> Range:
    """Indices counting up from zero to the largest 32-bit signed integer."""
    return Range(0, INT_MAX)


def _range_args(*args: Any) -> Range:
    return Range(*args)