"""Concatenation of two iterators."""

from __future__ import annotations

from typing import Any, Optional

from lazyiter.core import Iter, RandomAccessIter, to_iter


class Chain(RandomAccessIter):
    """Yields every item of ``first`` followed by every item of ``second``.

    Random access is available when both parts support it.
    """

    def __init__(self, first: Iter, second: Iter) -> None:
        self._first: Optional[Iter] = first
        self._second = second
        self.random_access = bool(first.random_access and second.random_access)

    def _require_random_access(self) -> None:
        if not self.random_access:
            raise TypeError("chain of sequential iterators does not support random access")

    def size(self) -> int:
        self._require_random_access()
        return self._first.size() + self._second.size()

    def get(self, index: int) -> Any:
        self._require_random_access()
        first_size = self._first.size()
        if index < first_size:
            return self._first.get(index)
        return self._second.get(index - first_size)

    def __next__(self) -> Any:
        if self.random_access:
            return super().__next__()
        if self._first is not None:
            try:
                return next(self._first)
            except StopIteration:
                self._first = None
        return next(self._second)


def chain(iterable1: Any, iterable2: Any) -> Chain:
    """Chain two iterables one after the other."""
    return Chain(to_iter(iterable1), to_iter(iterable2))