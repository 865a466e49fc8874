import pytest

from lazyiter.aggregate import product
from lazyiter.aggregate import sum as lazy_sum
from lazyiter.generator import Generator
from lazyiter.mapping import map as lazy_map
from lazyiter.range import Range
from lazyiter.take import take


def _counting():
    n = 0
    while True:
        yield n
        n += 1


def test_sum_int():
    assert lazy_sum(Range(0, 10)) == 45


def test_sum_float():
    s = lazy_sum(lazy_map(Range(0, 10), float))
    assert s == 45.0
    assert isinstance(s, float)


def test_sum_empty_is_zero():
    assert lazy_sum([]) == 0


def test_sum_of_generator():
    assert lazy_sum(take(Generator(_counting()), 10)) == 45


def test_product_empty_is_one():
    assert product([]) == 1


def test_product_matches_repeated_multiplication_invariant():
    values = [2, 3, 7]
    assert product(values) == values[0] * values[1] * values[2]


def test_product_with_zero():
    assert product(Range(0, 10)) == 0


def test_sum_rejects_non_numbers():
    with pytest.raises(TypeError):
        lazy_sum(["a", "b"])


def test_product_rejects_non_numbers():
    with pytest.raises(TypeError):
        product([1, "x"])