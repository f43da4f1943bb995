"""
Hypothesis strategies producing elements and heap values.

Heaps are built the way a recursive coin-flip generator would build them:
start from the empty heap and keep inserting one more random element
until the coin says stop. The recursion is unrolled into a loop and
bounded by max_size.
"""
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from .heaps.base import HeapInterface

INT_MIN = -2**31
INT_MAX = 2**31 - 1
DEFAULT_MAX_HEAP_SIZE = 50

ints = st.integers(min_value=INT_MIN, max_value=INT_MAX)


def element_pairs(elements: SearchStrategy = ints) -> SearchStrategy:
    return st.tuples(elements, elements)


@st.composite
def heaps(draw, heap_interface: HeapInterface, elements: SearchStrategy = ints,
          min_size: int = 0, max_size: int = DEFAULT_MAX_HEAP_SIZE, continue_odds: int = 4):
    """Draw a heap reachable from empty through inserts.

    Args:
        heap_interface: implementation whose heap values are produced
        elements: strategy for inserted elements
        min_size: inserts that always happen before the first coin flip
        max_size: hard bound on the number of inserts
        continue_odds: each flip continues with probability 1 - 1/continue_odds.
            A fair coin is continue_odds=2. Shrinking moves the flip
            towards 0, which means stop.
    """
    if min_size > max_size:
        raise ValueError(f"min_size={min_size} is larger than max_size={max_size}")
    if continue_odds < 1:
        raise ValueError(f"continue_odds must be at least 1, got {continue_odds}")
    heap = heap_interface.empty
    size = 0
    while size < max_size:
        if size >= min_size and draw(st.integers(0, continue_odds - 1)) == 0:
            break
        heap = heap_interface.insert(draw(elements), heap)
        size += 1
    return heap


def non_empty_heaps(heap_interface: HeapInterface, **kwargs) -> SearchStrategy:
    kwargs.setdefault('min_size', 1)
    return heaps(heap_interface, **kwargs)
