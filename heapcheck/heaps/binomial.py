"""
Persistent binomial heap.

A heap is a tuple of binomial trees in strictly increasing rank order.
Each tree's children are kept in decreasing rank order, so reversing them
yields a valid heap again.
"""
from dataclasses import dataclass
from typing import Any, Tuple
from .base import HeapInterface, EmptyHeapError


@dataclass(frozen=True)
class Node:
    value: Any
    rank: int
    children: Tuple["Node", ...] = ()


class BinomialHeap(HeapInterface):
    name = "binomial"

    @property
    def empty(self) -> Tuple[Node, ...]:
        return ()

    def is_empty(self, heap: Tuple[Node, ...]) -> bool:
        return not heap

    def insert(self, x, heap):
        return self._ins(Node(x, 0), heap)

    def meld(self, heap1, heap2):
        merged = []
        carry = None
        i = j = 0
        # Walk both rank-ordered tuples like binary addition.
        while i < len(heap1) or j < len(heap2) or carry is not None:
            candidates = []
            rank = None
            if i < len(heap1):
                rank = heap1[i].rank
            if j < len(heap2) and (rank is None or heap2[j].rank < rank):
                rank = heap2[j].rank
            if carry is not None and (rank is None or carry.rank < rank):
                rank = carry.rank
            if i < len(heap1) and heap1[i].rank == rank:
                candidates.append(heap1[i])
                i += 1
            if j < len(heap2) and heap2[j].rank == rank:
                candidates.append(heap2[j])
                j += 1
            if carry is not None and carry.rank == rank:
                candidates.append(carry)
                carry = None
            if len(candidates) == 1:
                merged.append(candidates[0])
            elif len(candidates) == 2:
                carry = self._link(candidates[0], candidates[1])
            else:
                merged.append(candidates[2])
                carry = self._link(candidates[0], candidates[1])
        return tuple(merged)

    def find_min(self, heap):
        if not heap:
            raise EmptyHeapError("find_min of empty heap")
        return self._min_tree(heap)[0].value

    def delete_min(self, heap):
        if not heap:
            raise EmptyHeapError("delete_min of empty heap")
        tree, rest = self._min_tree(heap)
        return self.meld(tuple(reversed(tree.children)), rest)

    def _link(self, t1: Node, t2: Node) -> Node:
        """Join two trees of equal rank, smaller root on top"""
        if t1.value <= t2.value:
            return Node(t1.value, t1.rank + 1, (t2,) + t1.children)
        return Node(t2.value, t2.rank + 1, (t1,) + t2.children)

    def _ins(self, tree: Node, heap):
        trees = list(heap)
        while trees and tree.rank >= trees[0].rank:
            tree = self._link(tree, trees.pop(0))
        return (tree,) + tuple(trees)

    def _min_tree(self, heap):
        """Return the tree holding the minimum root and the remaining trees"""
        best = 0
        for k in range(1, len(heap)):
            if heap[k].value < heap[best].value:
                best = k
        return heap[best], heap[:best] + heap[best + 1:]
