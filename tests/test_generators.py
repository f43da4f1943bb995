"""
Tests for the heap generators.
"""
import pytest
from hypothesis import given, find, settings

from heapcheck.generators import ints, element_pairs, heaps, non_empty_heaps, INT_MIN, INT_MAX
from heapcheck.heaps import BinomialHeap, PairingHeap

hi = BinomialHeap()


@given(ints)
def test_ints_are_32_bit(x):
    assert INT_MIN <= x <= INT_MAX


@given(element_pairs())
def test_element_pairs(pair):
    x, y = pair
    assert INT_MIN <= x <= INT_MAX and INT_MIN <= y <= INT_MAX


@given(heaps(hi, max_size=10))
def test_heap_size_is_bounded(heap):
    assert len(hi.to_sorted_list(heap)) <= 10


@given(heaps(hi, min_size=3, max_size=5))
def test_heap_size_within_range(heap):
    assert 3 <= len(hi.to_sorted_list(heap)) <= 5


@given(non_empty_heaps(PairingHeap()))
def test_non_empty_heaps(heap):
    assert not PairingHeap().is_empty(heap)


def test_zero_max_size_gives_empty_heap():
    heap = find(heaps(hi, max_size=0), lambda h: True, settings=settings(database=None))
    assert hi.is_empty(heap)


def test_generated_heaps_shrink():
    found = find(heaps(hi), lambda h: len(hi.to_sorted_list(h)) >= 3,
                 settings=settings(database=None))
    assert hi.to_sorted_list(found) == [0, 0, 0]


def test_min_size_larger_than_max_size():
    with pytest.raises(ValueError):
        find(heaps(hi, min_size=5, max_size=2), lambda h: True, settings=settings(database=None))


def test_continue_odds_must_be_positive():
    with pytest.raises(ValueError):
        find(heaps(hi, continue_odds=0), lambda h: True, settings=settings(database=None))
