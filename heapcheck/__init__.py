from .heaps import HeapInterface, EmptyHeapError, BinomialHeap, LeftistHeap, PairingHeap, HEAPS, BUGGY_HEAPS, default_heap, get_heap
from .properties import HeapProperties, Property, extracts_in_order, meld_is_consistent
from .property_stats import PropertyStats

__version__ = "0.1.0"
