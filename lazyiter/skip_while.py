"""Skipping leading items that satisfy a predicate."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from lazyiter.core import Iter, to_iter


class SkipWhileIter(Iter):
    """Drops items while ``pred`` holds, then yields everything that follows.

    The predicate is no longer called once it has returned false.
    """

    def __init__(self, inner: Iter, pred: Callable[[Any], bool]) -> None:
        self._inner = inner
        self._pred: Optional[Callable[[Any], bool]] = pred

    def __next__(self) -> Any:
        for item in self._inner:
            if self._pred is not None:
                if self._pred(item):
                    continue
                self._pred = None
            return item
        raise StopIteration


def skip_while(iterable: Any, pred: Callable[[Any], bool]) -> SkipWhileIter:
    """Skip the leading items of ``iterable`` for which ``pred`` holds."""
    return SkipWhileIter(to_iter(iterable), pred)