"""Limiting an iterator to its first items."""

from __future__ import annotations

import operator
from typing import Any

from lazyiter.core import Iter, RandomAccessIter, to_iter


class TakeIter(RandomAccessIter):
    """Yields at most ``n`` items of the inner iterator.

    Random access is available when the inner iterator supports it.
    """

    def __init__(self, inner: Iter, n: int) -> None:
        n = operator.index(n)
        if n < 0:
            raise ValueError("take count must not be negative")
        self._inner = inner
        self._limit = n
        self._remaining = n
        self.random_access = bool(inner.random_access)

    def _require_random_access(self) -> None:
        if not self.random_access:
            raise TypeError("take over a sequential iterator does not support random access")

    def size(self) -> int:
        self._require_random_access()
        return min(self._limit, self._inner.size())

    def get(self, index: int) -> Any:
        self._require_random_access()
        return self._inner.get(index)

    def __next__(self) -> Any:
        if self.random_access:
            return super().__next__()
        if self._remaining <= 0:
            raise StopIteration
        self._remaining -= 1
        return next(self._inner)


def take(iterable: Any, n: int) -> TakeIter:
    """The first ``n`` items of ``iterable``."""
    return TakeIter(to_iter(iterable), n)