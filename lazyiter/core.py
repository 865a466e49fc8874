"""Core iterator protocol: lazy iterators, random access and conversion helpers."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Sequence
from typing import Any, Optional

LIBRARY_VERSION = 20210426

#: Size reported by random access iterators that never run out.
UNBOUNDED_SIZE = sys.maxsize


class Iter(ABC, Iterator):
    """A lazy iterator.

    Subclasses implement ``__next__``. Once exhausted an iterator stays
    exhausted: every further call keeps raising ``StopIteration``.
    """

    #: Whether this iterator supports ``size()`` and ``get(index)``.
    random_access = False

    def __iter__(self) -> Iter:
        return self

    @abstractmethod
    def __next__(self) -> Any:
        """Return the next item or raise ``StopIteration``."""

    def next(self) -> Optional[Any]:
        """Return the next item, or ``None`` once the iterator is exhausted."""
        return next(self, None)


class RandomAccessIter(Iter):
    """An iterator whose items can be fetched by index.

    Subclasses implement ``size()`` and ``get(index)``; sequential iteration
    walks the indices from the current position up to ``size()``.
    """

    random_access = True
    _position = 0

    @abstractmethod
    def size(self) -> int:
        """Number of items, counted from the start of the iterator."""

    @abstractmethod
    def get(self, index: int) -> Any:
        """Item at ``index``; ``index`` must be below ``size()``."""

    def __next__(self) -> Any:
        index = self._position
        self._position = index + 1
        if index < self.size():
            return self.get(index)
        raise StopIteration


class SequenceIter(RandomAccessIter):
    """Random access iterator over a Python sequence."""

    def __init__(self, sequence: Sequence) -> None:
        self._sequence = sequence

    def size(self) -> int:
        return len(self._sequence)

    def get(self, index: int) -> Any:
        return self._sequence[index]


class IterableIter(Iter):
    """Sequential iterator over any Python iterable."""

    def __init__(self, iterable: Iterable) -> None:
        self._source = iter(iterable)
        self._done = False

    def __next__(self) -> Any:
        if self._done:
            raise StopIteration
        try:
            return next(self._source)
        except StopIteration:
            self._done = True
            raise


def to_iter(iterable: Any) -> Iter:
    """Turn ``iterable`` into an :class:`Iter`; iterators are returned as they are."""
    if isinstance(iterable, Iter):
        return iterable
    if isinstance(iterable, Sequence):
        return SequenceIter(iterable)
    if isinstance(iterable, Iterable):
        return IterableIter(iterable)
    raise TypeError(f"object of type {type(iterable).__name__!r} is not iterable")


def is_random_access(iterable: Any) -> bool:
    """Whether ``iterable`` supports indexed access once turned into an iterator."""
    if isinstance(iterable, Iter):
        return bool(iterable.random_access)
    if isinstance(iterable, Sequence):
        return True
    if isinstance(iterable, Iterable):
        return False
    raise TypeError(f"object of type {type(iterable).__name__!r} is not iterable")


def get_option(it: RandomAccessIter, index: int) -> Optional[Any]:
    """Item at ``index`` of a random access iterator, or ``None`` past its end."""
    if not it.random_access:
        raise TypeError(f"{type(it).__name__!r} does not support random access")
    return it.get(index) if index < it.size() else None