"""An iterator that yields a single value."""

from __future__ import annotations

from typing import Any

from lazyiter.core import RandomAccessIter
from lazyiter.repeat import Repeat


class Once(RandomAccessIter):
    """Yields ``value`` exactly once."""

    def __init__(self, value: Any) -> None:
        self._value = value

    def size(self) -> int:
        return 1

    def get(self, index: int) -> Any:
        return self._value

    def cycle(self) -> Repeat:
        """Endless repetition of the single value."""
        return Repeat(self._value)

    def __repr__(self) -> str:
        return f"Once({self._value!r})"