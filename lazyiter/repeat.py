"""An iterator that yields the same value forever."""

from __future__ import annotations

from typing import Any

from lazyiter.core import UNBOUNDED_SIZE, RandomAccessIter


class Repeat(RandomAccessIter):
    """Yields ``value`` endlessly; every index holds the same value."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def size(self) -> int:
        return UNBOUNDED_SIZE

    def get(self, index: int) -> Any:
        return self._value

    def __next__(self) -> Any:
        return self._value

    def __repr__(self) -> str:
        return f"Repeat({self._value!r})"