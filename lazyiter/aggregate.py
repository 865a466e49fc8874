"""Sum and product of numeric iterators."""

from __future__ import annotations

import numbers
from typing import Any

from lazyiter.core import to_iter


def _numeric(value: Any) -> Any:
    if not isinstance(value, numbers.Number):
        raise TypeError(f"cannot aggregate non-numeric item of type {type(value).__name__!r}")
    return value


def sum(iterable: Any) -> Any:
    """Sum of all items, starting from zero."""
    total = 0
    for item in to_iter(iterable):
        total += _numeric(item)
    return total


def product(iterable: Any) -> Any:
    """Product of all items, starting from one."""
    result = 1
    for item in to_iter(iterable):
        result *= _numeric(item)
    return result