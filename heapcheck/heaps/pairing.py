"""
Persistent pairing heap.

Inserting ascending values leaves the root with a long list of subheaps,
so the two-pass merge in delete_min is written as loops rather than
recursion over that list.
"""
from dataclasses import dataclass
from typing import Any, Tuple
from .base import HeapInterface, EmptyHeapError


@dataclass(frozen=True)
class PairingNode:
    value: Any
    subheaps: Tuple["PairingNode", ...] = ()


class PairingHeap(HeapInterface):
    name = "pairing"

    @property
    def empty(self):
        return None

    def is_empty(self, heap) -> bool:
        return heap is None

    def insert(self, x, heap):
        return self.meld(PairingNode(x), heap)

    def meld(self, heap1, heap2):
        if heap1 is None:
            return heap2
        if heap2 is None:
            return heap1
        if heap1.value <= heap2.value:
            return PairingNode(heap1.value, (heap2,) + heap1.subheaps)
        return PairingNode(heap2.value, (heap1,) + heap2.subheaps)

    def find_min(self, heap):
        if heap is None:
            raise EmptyHeapError("find_min of empty heap")
        return heap.value

    def delete_min(self, heap):
        if heap is None:
            raise EmptyHeapError("delete_min of empty heap")
        return self._merge_pairs(heap.subheaps)

    def _merge_pairs(self, subheaps):
        # first pass: meld left to right in pairs
        paired = []
        for k in range(0, len(subheaps) - 1, 2):
            paired.append(self.meld(subheaps[k], subheaps[k + 1]))
        if len(subheaps) % 2:
            paired.append(subheaps[-1])
        # second pass: meld right to left into one heap
        result = None
        for sub in reversed(paired):
            result = self.meld(sub, result)
        return result
