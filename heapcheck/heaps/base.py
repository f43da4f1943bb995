"""
Base heap interface.

Every heap implementation exposes the same six operations over immutable
heap values. An implementation object carries no state of its own; the
heaps it hands out are plain values that are never mutated.
"""
from typing import Any, Iterable, Iterator, List


class EmptyHeapError(IndexError):
    """Raised when find_min or delete_min is called on an empty heap."""


class HeapInterface:
    name = "abstract"

    @property
    def empty(self) -> Any:
        """The canonical empty heap"""
        raise NotImplementedError

    def is_empty(self, heap: Any) -> bool:
        raise NotImplementedError

    def insert(self, x: Any, heap: Any) -> Any:
        """Return a new heap holding the elements of `heap` plus `x`"""
        raise NotImplementedError

    def find_min(self, heap: Any) -> Any:
        """Return the smallest element of `heap`.

        Raises EmptyHeapError if the heap holds no elements.
        """
        raise NotImplementedError

    def delete_min(self, heap: Any) -> Any:
        """Return a new heap without one occurrence of find_min(heap).

        Raises EmptyHeapError if the heap holds no elements.
        """
        raise NotImplementedError

    def meld(self, heap1: Any, heap2: Any) -> Any:
        """Return a new heap holding the elements of both heaps"""
        raise NotImplementedError

    def from_iterable(self, elements: Iterable[Any]) -> Any:
        heap = self.empty
        for x in elements:
            heap = self.insert(x, heap)
        return heap

    def drain(self, heap: Any) -> Iterator[Any]:
        """Yield elements in extraction order until the heap is empty"""
        while not self.is_empty(heap):
            yield self.find_min(heap)
            heap = self.delete_min(heap)

    def to_sorted_list(self, heap: Any) -> List[Any]:
        return list(self.drain(heap))

    def __repr__(self):
        return f"{type(self).__name__}()"
