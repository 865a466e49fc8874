"""Finding the largest item of an iterator."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from lazyiter.core import to_iter


def _three_way(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def max(iterable: Any, compare: Optional[Callable[[Any, Any], int]] = None) -> Optional[Any]:
    """The largest item of ``iterable``, or ``None`` if it is empty.

    ``compare(a, b)`` returns a negative number when ``a`` orders before
    ``b``, zero when equal and a positive number otherwise; by default items
    are compared directly. Of several largest items the first is returned.
    """
    cmp = compare if compare is not None else _three_way
    found = False
    result = None
    for item in to_iter(iterable):
        if not found or cmp(result, item) < 0:
            result = item
            found = True
    return result


def max_by(iterable: Any, key: Callable[[Any], Any]) -> Optional[Any]:
    """The item with the largest ``key(item)``, or ``None`` if it is empty.

    ``key`` is called once per item. Of several largest items the first is
    returned.
    """
    found = False
    result = None
    best = None
    for item in to_iter(iterable):
        projection = key(item)
        if not found or best < projection:
            result = item
            best = projection
            found = True
    return result