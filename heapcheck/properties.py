"""
Properties every correct heap implementation must satisfy.

Each property is a pure predicate over generated arguments, paired with a
human readable description and the Hypothesis strategies that feed it.
A property "fails" when its predicate returns False for some input; the
property tester then reports the shrunk input as a counterexample.

The two recursive checks (repeated extraction, meld consistency) are
written as loops. Each step removes one element from the heap under
inspection, and the optional `limit` caps the number of steps so that a
heap whose delete_min fails to shrink is reported instead of looping.
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from .generators import ints, heaps, non_empty_heaps, DEFAULT_MAX_HEAP_SIZE
from .heaps.base import HeapInterface


def extracts_in_order(hi: HeapInterface, heap: Any, limit: Optional[int] = None) -> bool:
    """Repeatedly deleting the minimum yields a non-decreasing sequence"""
    steps = 0
    # an empty heap or a heap of one element is trivially sorted
    while not (hi.is_empty(heap) or hi.is_empty(hi.delete_min(heap))):
        if limit is not None and steps >= limit:
            return False
        x1 = hi.find_min(heap)
        heap = hi.delete_min(heap)
        x2 = hi.find_min(heap)
        if not x1 <= x2:
            return False
        steps += 1
    return True


def meld_is_consistent(hi: HeapInterface, heap1: Any, heap2: Any, melded: Any,
                       limit: Optional[int] = None) -> bool:
    """Check that `melded` drains exactly like its two sources.

    At every step the minimum of the melded heap must be the minimum of
    heap1 (checked first) or of heap2; that minimum is then removed from
    the melded heap and from the source it matched. The melded heap may
    only run empty when both sources are empty too.
    """
    steps = 0
    while not hi.is_empty(melded):
        if limit is not None and steps >= limit:
            return False
        m = hi.find_min(melded)
        if not hi.is_empty(heap1) and hi.find_min(heap1) == m:
            heap1 = hi.delete_min(heap1)
        elif not hi.is_empty(heap2) and hi.find_min(heap2) == m:
            heap2 = hi.delete_min(heap2)
        else:
            return False
        melded = hi.delete_min(melded)
        steps += 1
    return hi.is_empty(heap1) and hi.is_empty(heap2)


def _drain(hi: HeapInterface, heap: Any, limit: Optional[int]) -> Optional[List[Any]]:
    """Drain at most `limit` elements; None means the heap never ran empty"""
    out = []
    while not hi.is_empty(heap):
        if limit is not None and len(out) >= limit:
            return None
        out.append(hi.find_min(heap))
        heap = hi.delete_min(heap)
    return out


@dataclass(frozen=True)
class Property:
    name: str
    description: str
    arg_names: Tuple[str, ...]
    strategies: Tuple[SearchStrategy, ...]
    predicate: Callable[..., bool]

    def __call__(self, *args) -> bool:
        return self.predicate(*args)

    def as_pair(self) -> Tuple[str, Callable[..., bool]]:
        return (self.description, self.predicate)


class HeapProperties:
    """The heap contract, instantiated for one heap implementation.

    Args:
        heap_interface: implementation under test
        elements: strategy for elements fed to the properties
        max_heap_size: bound passed to the heap generator; also sizes the
            step limit of the looping checks
    """

    NAMES = [
        'min_of_two',
        'delete_min_of_one',
        'insert_min_and_get_min',
        'delete_all_produces_sorted_list',
        'melding_small_heaps',
        'melding_heaps',
        'drain_matches_inserted',
        'meld_with_empty',
    ]

    def __init__(self, heap_interface: HeapInterface, elements: SearchStrategy = ints,
                 max_heap_size: int = DEFAULT_MAX_HEAP_SIZE):
        if max_heap_size < 1:
            raise ValueError(f"max_heap_size must be at least 1, got {max_heap_size}")
        self.heap_interface = heap_interface
        self.elements = elements
        self.max_heap_size = max_heap_size

    def _heaps(self, **kwargs) -> SearchStrategy:
        return heaps(self.heap_interface, elements=self.elements,
                     max_size=self.max_heap_size, **kwargs)

    def _limit(self, heap_count: int = 1) -> int:
        # a correct heap never needs more steps than it has elements
        return heap_count * self.max_heap_size

    # Properties from the heap contract

    def min_of_two(self, x1, x2) -> bool:
        hi = self.heap_interface
        heap = hi.insert(x2, hi.insert(x1, hi.empty))
        return hi.find_min(heap) == min(x1, x2)

    def delete_min_of_one(self, x) -> bool:
        hi = self.heap_interface
        return hi.is_empty(hi.delete_min(hi.insert(x, hi.empty)))

    def insert_min_and_get_min(self, heap) -> bool:
        hi = self.heap_interface
        m = hi.find_min(heap)
        return hi.find_min(hi.insert(m, heap)) == m

    def delete_all_produces_sorted_list(self, heap) -> bool:
        return extracts_in_order(self.heap_interface, heap, self._limit())

    def melding_small_heaps(self, x, y) -> bool:
        hi = self.heap_interface
        high, low = max(x, y), min(x, y)
        melded = hi.meld(hi.insert(high, hi.insert(high, hi.empty)),
                         hi.insert(low, hi.insert(low, hi.empty)))
        delete_two_and_find = hi.find_min(hi.delete_min(hi.delete_min(melded))) == high
        insert_low_and_find = hi.find_min(hi.insert(low, melded)) == low
        return delete_two_and_find and insert_low_and_find

    def melding_heaps(self, heap1, heap2) -> bool:
        hi = self.heap_interface
        return meld_is_consistent(hi, heap1, heap2, hi.meld(heap1, heap2), self._limit(2))

    # Supplementary properties

    def drain_matches_inserted(self, elements) -> bool:
        hi = self.heap_interface
        return _drain(hi, hi.from_iterable(elements), len(elements)) == sorted(elements)

    def meld_with_empty(self, heap) -> bool:
        hi = self.heap_interface
        limit = self._limit()
        expected = _drain(hi, heap, limit)
        return (expected is not None
                and _drain(hi, hi.meld(heap, hi.empty), limit) == expected
                and _drain(hi, hi.meld(hi.empty, heap), limit) == expected)

    def properties(self) -> List[Property]:
        elems = self.elements
        specs: Dict[str, Tuple[str, Tuple[str, ...], Tuple[SearchStrategy, ...]]] = {
            'min_of_two': (
                "the minimum of a heap of two elements should be the smallest of the two elements",
                ('x1', 'x2'), (elems, elems)),
            'delete_min_of_one': (
                "delete minimum of heap of one element should return an empty heap",
                ('x',), (elems,)),
            'insert_min_and_get_min': (
                "inserting the minimal element and then finding it should return the same minimal element",
                ('heap',), (non_empty_heaps(self.heap_interface, elements=elems,
                                            max_size=self.max_heap_size),)),
            'delete_all_produces_sorted_list': (
                "continually finding and deleting the minimal element of a heap should return a sorted sequence",
                ('heap',), (self._heaps(),)),
            'melding_small_heaps': (
                "melding a heap containing two low values with a heap containing two high values",
                ('x', 'y'), (elems, elems)),
            'melding_heaps': (
                "finding the minimum of melding any two heaps should return the minimum of one or the other of the source heaps",
                ('heap1', 'heap2'), (self._heaps(), self._heaps())),
            'drain_matches_inserted': (
                "inserting a list of elements and draining the heap should return the sorted list",
                ('elements',), (st.lists(elems, max_size=self.max_heap_size),)),
            'meld_with_empty': (
                "melding a heap with the empty heap on either side should not change its contents",
                ('heap',), (self._heaps(),)),
        }
        return [Property(name, *specs[name], getattr(self, name)) for name in self.NAMES]

    def named(self) -> List[Tuple[str, Callable[..., bool]]]:
        """The (description, predicate) pairs of every property"""
        return [p.as_pair() for p in self.properties()]

    def by_name(self, name: str) -> Property:
        for prop in self.properties():
            if prop.name == name:
                return prop
        raise KeyError(name)
