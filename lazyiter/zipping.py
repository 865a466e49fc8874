"""Walking several iterators in step."""

from __future__ import annotations

from typing import Any

from lazyiter.core import Iter, RandomAccessIter, to_iter

_END = object()


class ZipIter(RandomAccessIter):
    """Yields tuples holding one item from each inner iterator.

    Stops as soon as any inner iterator runs out. Zipping a ``ZipIter``
    with further iterators extends its tuples instead of nesting them.
    Random access is available when every inner iterator supports it.
    """

    def __init__(self, *iters: Iter) -> None:
        if iters and isinstance(iters[0], ZipIter):
            iters = iters[0]._iters + tuple(iters[1:])
        if len(iters) < 2:
            raise TypeError("zip needs at least two iterators")
        self._iters = tuple(iters)
        self.random_access = all(it.random_access for it in self._iters)

    def _require_random_access(self) -> None:
        if not self.random_access:
            raise TypeError("zip over sequential iterators does not support random access")

    def size(self) -> int:
        self._require_random_access()
        return min(it.size() for it in self._iters)

    def get(self, index: int) -> tuple:
        self._require_random_access()
        return tuple(it.get(index) for it in self._iters)

    def __next__(self) -> tuple:
        if self.random_access:
            return super().__next__()
        items = tuple(next(it, _END) for it in self._iters)
        if any(item is _END for item in items):
            raise StopIteration
        return items


def zip(*args: Any) -> ZipIter:
    """Zip two or more iterables into an iterator of tuples."""
    if len(args) < 2:
        raise TypeError("zip needs at least two iterables")
    return ZipIter(*(to_iter(arg) for arg in args))