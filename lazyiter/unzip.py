"""Splitting an iterator of tuples into one list per position."""

from __future__ import annotations

from typing import Any

from lazyiter.core import to_iter

_END = object()


def unzip(iterable: Any) -> tuple:
    """Split an iterable of equally sized tuples into a tuple of lists.

    The n-th list holds the n-th element of every item. An empty iterable
    gives an empty tuple; items of differing length raise ``ValueError``.
    """
    items = to_iter(iterable)
    first = next(items, _END)
    if first is _END:
        return ()
    columns = tuple([value] for value in first)
    width = len(columns)
    for item in items:
        values = tuple(item)
        if len(values) != width:
            raise ValueError(
                f"cannot unzip an item of length {len(values)} alongside items of length {width}"
            )
        for column, value in zip(columns, values):
            column.append(value)
    return columns