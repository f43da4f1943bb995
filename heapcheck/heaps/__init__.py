"""
Heap implementations checked by the heap properties.
"""
from .base import HeapInterface, EmptyHeapError
from .binomial import BinomialHeap
from .leftist import LeftistHeap
from .pairing import PairingHeap
from .buggy import (FirstRootMinHeap, InvertedLinkHeap, LossyLinkHeap,
                    FirstRootDeleteHeap, LossyMeldHeap)

HEAPS = {cls.name: cls for cls in (BinomialHeap, LeftistHeap, PairingHeap)}

BUGGY_HEAPS = {cls.name: cls for cls in (FirstRootMinHeap, InvertedLinkHeap, LossyLinkHeap,
                                         FirstRootDeleteHeap, LossyMeldHeap)}

default_heap = BinomialHeap


def get_heap(name: str) -> HeapInterface:
    """Instantiate a registered heap implementation by name"""
    if name in HEAPS:
        return HEAPS[name]()
    if name in BUGGY_HEAPS:
        return BUGGY_HEAPS[name]()
    valid = ", ".join(sorted(HEAPS) + sorted(BUGGY_HEAPS))
    raise ValueError(f"Unknown heap '{name}' (choose from: {valid})")


__all__ = ['HeapInterface', 'EmptyHeapError', 'BinomialHeap', 'LeftistHeap', 'PairingHeap',
           'FirstRootMinHeap', 'InvertedLinkHeap', 'LossyLinkHeap', 'FirstRootDeleteHeap',
           'LossyMeldHeap', 'HEAPS', 'BUGGY_HEAPS', 'default_heap', 'get_heap']
