"""
Persistent leftist heap.
"""
from dataclasses import dataclass
from typing import Any, Optional
from .base import HeapInterface, EmptyHeapError


@dataclass(frozen=True)
class LeftistNode:
    rank: int  # length of the right spine
    value: Any
    left: Optional["LeftistNode"] = None
    right: Optional["LeftistNode"] = None


def _rank(node: Optional[LeftistNode]) -> int:
    return node.rank if node is not None else 0


def _make(value, a, b) -> LeftistNode:
    if _rank(a) >= _rank(b):
        return LeftistNode(_rank(b) + 1, value, a, b)
    return LeftistNode(_rank(a) + 1, value, b, a)


class LeftistHeap(HeapInterface):
    name = "leftist"

    @property
    def empty(self):
        return None

    def is_empty(self, heap) -> bool:
        return heap is None

    def insert(self, x, heap):
        return self.meld(LeftistNode(1, x), heap)

    def meld(self, heap1, heap2):
        # Recursion only follows right spines, which are logarithmic.
        if heap1 is None:
            return heap2
        if heap2 is None:
            return heap1
        if heap1.value <= heap2.value:
            return _make(heap1.value, heap1.left, self.meld(heap1.right, heap2))
        return _make(heap2.value, heap2.left, self.meld(heap1, heap2.right))

    def find_min(self, heap):
        if heap is None:
            raise EmptyHeapError("find_min of empty heap")
        return heap.value

    def delete_min(self, heap):
        if heap is None:
            raise EmptyHeapError("delete_min of empty heap")
        return self.meld(heap.left, heap.right)
