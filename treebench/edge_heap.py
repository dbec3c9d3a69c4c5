"""Fixed-capacity binary min-heap of edges, keyed on weight."""

from typing import List

from treebench.edges import Edge
from treebench.errors import StructureError


class EdgeHeap:
    """Array-backed binary min-heap holding at most ``capacity`` edges."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: List[Edge] = []

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, edge: Edge) -> None:
        """Add ``edge``; raise StructureError when the heap is full."""
        if len(self._items) == self.capacity:
            raise StructureError("Heap overflow: Cannot insert more elements.")
        items = self._items
        items.append(edge)
        index = len(items) - 1
        while index != 0:
            parent = (index - 1) // 2
            if items[parent].weight <= items[index].weight:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def peek(self) -> Edge:
        """The lightest edge; raise StructureError when empty."""
        if not self._items:
            raise StructureError("Heap is empty!")
        return self._items[0]

    def delete_min(self) -> Edge:
        """Remove and return the lightest edge; raise StructureError when empty."""
        if not self._items:
            raise StructureError("Heap is empty!")
        items = self._items
        smallest_edge = items[0]
        last = items.pop()
        if not items:
            return smallest_edge
        items[0] = last
        index = 0
        size = len(items)
        while True:
            left, right = 2 * index + 1, 2 * index + 2
            smallest = index
            if left < size and items[left].weight < items[smallest].weight:
                smallest = left
            if right < size and items[right].weight < items[smallest].weight:
                smallest = right
            if smallest == index:
                break
            items[index], items[smallest] = items[smallest], items[index]
            index = smallest
        return smallest_edge