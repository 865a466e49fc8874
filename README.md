# lazyiter

Lazy, composable iterators. Every iterator in this package is an ordinary
Python iterator, so it works with `for`, `list()`, `next()` and the rest of
the language. When every input supports random access, an adaptor supports
it too. It then knows its `size()` and can `get(index)` any item without
walking the items before it.

## Installation

```
pip install lazyiter
```

The package has no runtime dependencies.

## Core (`lazyiter.core`)

- `Iter`: the base class of every iterator here. `Iter.next()` returns the
  next item, or `None` once the iterator is exhausted. An exhausted iterator
  stays exhausted.
- `RandomAccessIter`: an iterator with `size()` and `get(index)`. Sequential
  iteration walks the indices from its own read position. Calling
  `get(index)` does not move that position.
- `SequenceIter` wraps a Python sequence with random access.
  `IterableIter` wraps any other iterable for sequential access only.
- `to_iter(iterable)` turns an iterable into an `Iter`. Sequences get
  random access, other iterables are wrapped sequentially, and `Iter`
  objects are returned unchanged. Anything that is not iterable raises
  `TypeError`.
- `is_random_access(iterable)` reports whether `to_iter` would give random
  access.
- `get_option(it, index)` returns `it.get(index)`, or `None` when `index`
  is past the end. It raises `TypeError` if `it` has no random access.
- `UNBOUNDED_SIZE` is the size that endless random access iterators report.

## Sources

- `lazyiter.range.Range(begin=0, end=2**31 - 1)` is the half-open integer
  range `[begin, end)`, with random access. Non-integer bounds raise
  `TypeError`.
- `until(begin, end)` is the same as `Range(begin, end)`.
- `indices()` is `Range(0, 2**31 - 1)`.
- `lazyiter.repeat.Repeat(value)` yields `value` forever.
- `lazyiter.once.Once(value)` yields `value` once. `Once.cycle()` returns a
  `Repeat` of that value.
- `lazyiter.generator.Generator` is a sequential iterator over the values a
  Python generator yields. Exceptions raised inside the generator reach the
  caller. The decorator `generator` makes a generator function return a
  `Generator` when called.

## Adaptors

Each adaptor accepts any iterable and keeps random access when its inputs
have it.

- `lazyiter.chain.chain(a, b)` yields all of `a`, then all of `b`. The
  result is a `Chain`.
- `lazyiter.mapping.map(iterable, func)` applies `func` to each item
  lazily. The result is a `MapIter`.
- `lazyiter.take.take(iterable, n)` yields at most `n` items. The result is
  a `TakeIter`. A negative `n` raises `ValueError`.
- `lazyiter.skip_while.skip_while(iterable, pred)` drops leading items for
  which `pred` holds. It never has random access. Once `pred` returns
  false, it is not called again.
- `lazyiter.zipping.zip(*iterables)` yields tuples and stops at the
  shortest input. It needs at least two iterables. Zipping a `ZipIter`
  again extends its tuples instead of nesting them.

Calling `size()` or `get()` on an adaptor without random access raises
`TypeError`.

## Consumers

- `lazyiter.collect.collect(iterable, container=list)` passes the iterator
  to `container`, which can be `list`, `tuple`, `set`, `dict`, and so on.
- `to_vector(iterable)` returns a list of the items.
- `to_map(iterable, key=None)` builds a dict from key/value pairs, ordered
  by key, or by `key(k)` when given. When several keys order the same, the
  first pair is kept.
- `lazyiter.unzip.unzip(iterable)` turns equally sized tuples into a tuple
  of lists. An empty input gives `()`. Items of mismatched length raise
  `ValueError`.
- `lazyiter.extremes.max(iterable, compare=None)` returns the largest item,
  or `None` when the input is empty.
  - `compare(a, b)` is a three-way comparison that returns a negative
    number, zero, or a positive number.
  - When several items are largest, the first is returned.
- `lazyiter.extremes.max_by(iterable, key)` returns the item with the
  largest `key(item)`, or `None` when the input is empty. It calls `key`
  once per item and returns the first of several largest items.
- `lazyiter.aggregate.sum(iterable)` sums the items, starting from `0`.
  `product(iterable)` multiplies them, starting from `1`. Both raise
  `TypeError` on a non-numeric item.

Several of these functions share names with Python built-ins (`map`, `zip`,
`sum`, `max`). Import them from their modules, or under an alias.

## Example

```python
from lazyiter.range import Range
from lazyiter.mapping import map
from lazyiter.take import take
from lazyiter.aggregate import sum

squares = map(Range(0, 10), lambda i: i * i)
print(squares.size())              # 10
print(squares.get(3))              # 9
print(sum(take(squares, 4)))       # 14
```

```python
from lazyiter.chain import chain
from lazyiter.once import Once

c = chain(chain(Once(0), Once(1)), Once(2))
print(c.size(), list(c))           # 3 [0, 1, 2]
```

## What is not included

The package has no adaptors for filtering, flattening, flat-mapping,
enumerating, cycling general iterators, or folding, and it has no minimum
finder. Python's own `filter`, `enumerate`, `itertools` and
`functools.reduce` work directly on these iterators, but their results
have no random access.