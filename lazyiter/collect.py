"""Gathering the items of an iterator into containers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Optional

from lazyiter.core import to_iter


def collect(iterable: Any, container: Callable[[Any], Any] = list) -> Any:
    """Build ``container`` from every item of ``iterable``.

    ``container`` is any callable taking an iterable, such as ``list``,
    ``tuple``, ``set``, ``collections.deque`` or ``dict`` for key/value pairs.
    """
    return container(to_iter(iterable))


def to_vector(iterable: Any) -> list:
    """Every item of ``iterable`` in a list, in iteration order."""
    return collect(iterable, list)


def to_map(iterable: Any, key: Optional[Callable[[Any], Any]] = None) -> dict:
    """A dict built from key/value pairs, ordered by key.

    Keys are ordered by ``key(k)`` when ``key`` is given, otherwise by the
    keys themselves. Keys that order the same count as one key and the first
    pair seen for it is kept.
    """
    order = key if key is not None else (lambda k: k)
    entries: dict = {}
    for pair in to_iter(iterable):
        k, v = pair
        entries.setdefault(order(k), (k, v))
    return dict(entries[slot] for slot in sorted(entries))