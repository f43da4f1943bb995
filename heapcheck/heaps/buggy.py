"""
Intentionally broken binomial heaps for exercising the heap properties.

Each class carries exactly one defect. ALL of them should be caught:
running the property tester against any of these must produce at least
one counterexample.

Run with:
    python -m heapcheck.property_tester --heaps buggy
"""
from .base import EmptyHeapError
from .binomial import BinomialHeap, Node


class FirstRootMinHeap(BinomialHeap):
    """BUG: find_min reports the root of the lowest-rank tree.

    Counterexample: insert 0, 1, 2 gives trees [2] and [0 <- 1], find_min says 2.
    """
    name = "first_root_min"

    def find_min(self, heap):
        if not heap:
            raise EmptyHeapError("find_min of empty heap")
        return heap[0].value


class InvertedLinkHeap(BinomialHeap):
    """BUG: linking puts the larger root on top.

    Counterexample: min of two elements returns the larger one.
    """
    name = "inverted_link"

    def _link(self, t1, t2):
        if t1.value >= t2.value:
            return Node(t1.value, t1.rank + 1, (t2,) + t1.children)
        return Node(t2.value, t2.rank + 1, (t1,) + t2.children)


class LossyLinkHeap(BinomialHeap):
    """BUG: linking overwrites the losing root with the winning value.

    The heap keeps its size and order, but the multiset changes:
    {1, 2} becomes {1, 1}.
    """
    name = "lossy_link"

    def _link(self, t1, t2):
        winner, loser = (t1, t2) if t1.value <= t2.value else (t2, t1)
        copy = Node(winner.value, loser.rank, loser.children)
        return Node(winner.value, winner.rank + 1, (copy,) + winner.children)


class FirstRootDeleteHeap(BinomialHeap):
    """BUG: delete_min removes the root of the lowest-rank tree."""
    name = "first_root_delete"

    def delete_min(self, heap):
        if not heap:
            raise EmptyHeapError("delete_min of empty heap")
        return self.meld(tuple(reversed(heap[0].children)), heap[1:])


class LossyMeldHeap(BinomialHeap):
    """BUG: meld keeps only the roots of the second heap.

    Counterexample: melding anything with a heap of two elements
    loses one of them.
    """
    name = "lossy_meld"

    def meld(self, heap1, heap2):
        if not heap1:
            return heap2
        if not heap2:
            return heap1
        result = heap1
        for tree in heap2:
            result = self.insert(tree.value, result)
        return result
