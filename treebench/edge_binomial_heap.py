"""Binomial min-heap of edges, keyed on weight."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from treebench.edges import Edge
from treebench.errors import StructureError

_MINUS_INFINITY = -(2 ** 31)


@dataclass(eq=False)
class _Node:
    edge: Edge
    degree: int = 0
    parent: Optional["_Node"] = field(default=None, repr=False)
    child: Optional["_Node"] = field(default=None, repr=False)
    sibling: Optional["_Node"] = field(default=None, repr=False)


def _union(a: Optional[_Node], b: Optional[_Node]) -> Optional[_Node]:
    """Merge two root lists by ascending degree."""
    if a is None:
        return b
    if b is None:
        return a
    head: Optional[_Node] = None
    tail: Optional[_Node] = None
    while a is not None and b is not None:
        if a.degree <= b.degree:
            pick, a = a, a.sibling
        else:
            pick, b = b, b.sibling
        if tail is None:
            head = pick
        else:
            tail.sibling = pick
        tail = pick
    tail.sibling = a if a is not None else b
    return head


def _merge_trees(first: _Node, second: _Node) -> _Node:
    if first.edge.weight > second.edge.weight:
        first, second = second, first
    second.parent = first
    second.sibling = first.child
    first.child = second
    first.degree += 1
    return first


def _reverse(node: Optional[_Node]) -> Optional[_Node]:
    previous: Optional[_Node] = None
    while node is not None:
        following = node.sibling
        node.sibling = previous
        node.parent = None
        previous = node
        node = following
    return previous


def _preorder(node: Optional[_Node]) -> Iterator[_Node]:
    """Visit a node, then its child list, then its siblings."""
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.sibling is not None:
            stack.append(current.sibling)
        if current.child is not None:
            stack.append(current.child)


def _tree_lines(node: Optional[_Node], space: int) -> Iterator[str]:
    if node is None:
        return
    space += 5
    yield from _tree_lines(node.sibling, space)
    edge = node.edge
    yield " " * space + f"({edge.src}, {edge.dest}, {edge.weight})\n"
    yield from _tree_lines(node.child, space)


class EdgeBinomialHeap:
    """Binomial min-heap of edges supporting merge, decrease-key and delete."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None

    def _roots(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.sibling

    def __len__(self) -> int:
        return sum(1 << root.degree for root in self._roots())

    def _absorb(self, head: Optional[_Node]) -> None:
        self._head = _union(self._head, head)
        if self._head is None:
            return
        prev: Optional[_Node] = None
        cur = self._head
        nxt = cur.sibling
        while nxt is not None:
            if cur.degree != nxt.degree or (
                nxt.sibling is not None and nxt.sibling.degree == cur.degree
            ):
                prev, cur = cur, nxt
            elif cur.edge.weight <= nxt.edge.weight:
                cur.sibling = nxt.sibling
                _merge_trees(cur, nxt)
            else:
                if prev is None:
                    self._head = nxt
                else:
                    prev.sibling = nxt
                _merge_trees(nxt, cur)
                cur = nxt
            nxt = cur.sibling

    def insert(self, edge: Edge) -> None:
        self._absorb(_Node(edge))

    def merge(self, other: "EdgeBinomialHeap") -> None:
        """Move every edge of ``other`` into this heap, leaving ``other`` empty."""
        head, other._head = other._head, None
        self._absorb(head)

    def _min_root(self) -> Optional[_Node]:
        best: Optional[_Node] = None
        for root in self._roots():
            if best is None or root.edge.weight < best.edge.weight:
                best = root
        return best

    def find_min(self) -> Edge:
        """The lightest edge; raise StructureError when empty."""
        best = self._min_root()
        if best is None:
            raise StructureError("Heap is empty")
        return best.edge

    def delete_min(self) -> Optional[Edge]:
        """Remove and return the lightest edge; None when the heap is empty."""
        min_node = self._min_root()
        if min_node is None:
            return None
        prev: Optional[_Node] = None
        for root in self._roots():
            if root is min_node:
                break
            prev = root
        if prev is None:
            self._head = min_node.sibling
        else:
            prev.sibling = min_node.sibling
        self._absorb(_reverse(min_node.child))
        return min_node.edge

    def _find(self, edge: Edge) -> Optional[_Node]:
        for node in _preorder(self._head):
            if node.edge == edge:
                return node
        return None

    def decrease_key(self, old_edge: Edge, new_edge: Edge) -> bool:
        """Replace ``old_edge`` by the no-heavier ``new_edge``; return whether it happened."""
        node = self._find(old_edge)
        if node is None or new_edge.weight > node.edge.weight:
            return False
        node.edge = new_edge
        current = node
        parent = current.parent
        while parent is not None and current.edge.weight < parent.edge.weight:
            current.edge, parent.edge = parent.edge, current.edge
            current = parent
            parent = current.parent
        return True

    def delete_key(self, edge: Edge) -> bool:
        """Remove ``edge``; return whether it was present."""
        lowered = Edge(edge.src, edge.dest, _MINUS_INFINITY)
        if not self.decrease_key(edge, lowered):
            return False
        self.delete_min()
        return True

    def render(self) -> str:
        parts = ["Binomial Heap:\n"]
        for root in self._roots():
            parts.append(f"B{root.degree}:\n")
            parts.extend(_tree_lines(root, 0))
        return "".join(parts)