"""Lazy application of a function to every item."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from lazyiter.core import Iter, RandomAccessIter, to_iter


class MapIter(RandomAccessIter):
    """Yields ``func(item)`` for every item of the inner iterator.

    Random access is available when the inner iterator supports it.
    """

    def __init__(self, inner: Iter, func: Callable[[Any], Any]) -> None:
        self._inner = inner
        self._func = func
        self.random_access = bool(inner.random_access)

    def _require_random_access(self) -> None:
        if not self.random_access:
            raise TypeError("map over a sequential iterator does not support random access")

    def size(self) -> int:
        self._require_random_access()
        return self._inner.size()

    def get(self, index: int) -> Any:
        self._require_random_access()
        return self._func(self._inner.get(index))

    def __next__(self) -> Any:
        if self.random_access:
            return super().__next__()
        return self._func(next(self._inner))


def map(iterable: Any, func: Callable[[Any], Any]) -> MapIter:
    """Lazily apply ``func`` to every item of ``iterable``."""
    return MapIter(to_iter(iterable), func)