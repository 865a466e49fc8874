"""Iterators driven by Python generator functions."""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterator
from typing import Any, Optional

from lazyiter.core import IterableIter


class Generator(IterableIter):
    """Sequential iterator over the values a generator yields.

    Exceptions raised inside the generator propagate to the caller of
    ``next``. A generator built without a source yields nothing.
    """

    def __init__(self, source: Optional[Iterator] = None) -> None:
        super().__init__(() if source is None else source)


def generator(func: Callable[..., Iterator]) -> Callable[..., Generator]:
    """Decorate a generator function so that calling it returns a :class:`Generator`."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Generator:
        return Generator(func(*args, **kwargs))

    return wrapper