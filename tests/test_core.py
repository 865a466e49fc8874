import copy

import pytest

from lazyiter.core import (
    Iter,
    IterableIter,
    RandomAccessIter,
    SequenceIter,
    get_option,
    is_random_access,
    to_iter,
)


class Squares(RandomAccessIter):
    def __init__(self, count):
        self.count = count
        self.fetched = []

    def size(self):
        return self.count

    def get(self, index):
        self.fetched.append(index)
        return index * index


class CountDown(Iter):
    def __init__(self, start):
        self.current = start

    def __next__(self):
        if self.current <= 0:
            raise StopIteration
        self.current -= 1
        return self.current + 1


def test_sequence_iter_yields_items_in_order():
    data = [9, -10, 3, 55]
    assert list(SequenceIter(data)) == data


def test_sequence_iter_size_and_get():
    data = (4, 5, 6)
    it = SequenceIter(data)
    assert it.size() == len(data)
    assert [it.get(i) for i in range(it.size())] == list(data)


def test_sequence_iter_get_past_end_raises():
    it = SequenceIter([1, 2])
    with pytest.raises(IndexError):
        it.get(2)


def test_sequence_iter_is_fused():
    it = SequenceIter([1])
    assert it.next() == 1
    assert it.next() is None
    assert it.next() is None
    with pytest.raises(StopIteration):
        next(it)


def test_copy_continues_independently():
    it = SequenceIter([0, 1, 2])
    assert it.next() == 0
    assert it.next() == 1
    other = copy.copy(it)
    assert it.next() == 2
    assert other.next() == 2
    assert it.next() is None
    assert other.next() is None


def test_random_access_subclass_iterates_through_get():
    source = Squares(4)
    it = to_iter(source)
    assert it is source
    assert is_random_access(it) is True
    assert list(it) == [0, 1, 4, 9]
    assert source.fetched == [0, 1, 2, 3]
    assert it.next() is None


def test_empty_random_access_iter():
    source = Squares(0)
    it = to_iter(source)
    assert it.next() is None
    assert get_option(it, 0) is None
    assert source.fetched == []


def test_iter_returns_itself():
    it = to_iter(CountDown(2))
    assert iter(it) is it
    assert list(it) == [2, 1]


def test_sequential_iter_next_returns_none_at_end():
    it = to_iter(CountDown(2))
    assert is_random_access(it) is False
    assert it.next() == 2
    assert it.next() == 1
    assert it.next() is None


def test_for_loop_over_iter():
    total = 0
    for value in to_iter(CountDown(3)):
        total += value
    assert total == 3 + 2 + 1


def test_iterable_iter_wraps_generator():
    it = IterableIter(x * 2 for x in range(3))
    assert it.random_access is False
    assert list(it) == [0, 2, 4]
    assert it.next() is None


def test_to_iter_returns_iter_unchanged():
    it = CountDown(1)
    assert to_iter(it) is it


def test_to_iter_sequence_is_random_access():
    it = to_iter([7, 8])
    assert isinstance(it, SequenceIter)
    assert it.size() == 2
    assert list(it) == [7, 8]


def test_to_iter_generic_iterable():
    it = to_iter({"a": 1, "b": 2})
    assert isinstance(it, IterableIter)
    assert sorted(it) == ["a", "b"]


def test_to_iter_rejects_non_iterable():
    with pytest.raises(TypeError):
        to_iter(42)


@pytest.mark.parametrize(
    "value, expected",
    [
        ([1, 2], True),
        ((1,), True),
        ("abc", True),
        ({1, 2}, False),
        (iter([1, 2]), False),
    ],
)
def test_is_random_access(value, expected):
    assert is_random_access(value) is expected


def test_is_random_access_for_iters():
    assert is_random_access(Squares(3)) is True
    assert is_random_access(CountDown(3)) is False


def test_is_random_access_rejects_non_iterable():
    with pytest.raises(TypeError):
        is_random_access(3.5)


def test_get_option_inside_and_outside():
    it = Squares(3)
    assert get_option(it, 2) == 4
    assert get_option(it, 3) is None
    assert get_option(it, 100) is None


def test_get_option_requires_random_access():
    with pytest.raises(TypeError):
        get_option(CountDown(2), 0)