"""
A heap kept as a sorted tuple, to show how to check your own implementation.

Run with:
    python -m heapcheck.property_tester --heap-file examples/sorted_tuple_heap.py
"""
from bisect import insort

from heapcheck.heaps import HeapInterface, EmptyHeapError


class SortedTupleHeap(HeapInterface):
    name = "sorted_tuple"

    @property
    def empty(self):
        return ()

    def is_empty(self, heap):
        return not heap

    def insert(self, x, heap):
        items = list(heap)
        insort(items, x)
        return tuple(items)

    def find_min(self, heap):
        if not heap:
            raise EmptyHeapError("find_min of empty heap")
        return heap[0]

    def delete_min(self, heap):
        if not heap:
            raise EmptyHeapError("delete_min of empty heap")
        return heap[1:]

    def meld(self, heap1, heap2):
        return tuple(sorted(heap1 + heap2))
