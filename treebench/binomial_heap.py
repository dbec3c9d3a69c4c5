"""Binomial min-heap of integer keys."""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from treebench.errors import StructureError

_DELETE_SENTINEL = -999999


@dataclass(eq=False)
class BinomialNode:
    """A node of a binomial tree; nodes compare by identity."""

    key: int
    degree: int = 0
    parent: Optional["BinomialNode"] = field(default=None, repr=False)
    sibling: Optional["BinomialNode"] = field(default=None, repr=False)
    child: Optional["BinomialNode"] = field(default=None, repr=False)


def _union(a: Optional[BinomialNode], b: Optional[BinomialNode]) -> Optional[BinomialNode]:
    """Merge two root lists by ascending degree."""
    if a is None:
        return b
    if b is None:
        return a
    head: Optional[BinomialNode] = None
    tail: Optional[BinomialNode] = None
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


def _merge_trees(first: BinomialNode, second: BinomialNode) -> BinomialNode:
    if first.key > second.key:
        first, second = second, first
    second.parent = first
    second.sibling = first.child
    first.child = second
    first.degree += 1
    return first


def _children(node: BinomialNode) -> Iterator[BinomialNode]:
    child = node.child
    while child is not None:
        yield child
        child = child.sibling


def _tree_nodes(node: BinomialNode) -> Iterator[BinomialNode]:
    yield node
    for child in _children(node):
        yield from _tree_nodes(child)


def _tree_lines(node: BinomialNode, space: int) -> Iterator[str]:
    yield str(node.key).rjust(space * 2) + "\n"
    for child in _children(node):
        yield from _tree_lines(child, space + 3)


class BinomialHeap:
    """Binomial min-heap supporting merge, decrease-key and delete-by-key."""

    def __init__(self) -> None:
        self._head: Optional[BinomialNode] = None

    def _roots(self) -> Iterator[BinomialNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.sibling

    def _consolidate(self) -> None:
        if self._head is None or self._head.sibling is None:
            return
        prev: Optional[BinomialNode] = None
        cur = self._head
        nxt = cur.sibling
        while nxt is not None:
            if cur.degree != nxt.degree or (
                nxt.sibling is not None and nxt.sibling.degree == cur.degree
            ):
                prev, cur = cur, nxt
            elif cur.key <= nxt.key:
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

    def insert(self, key: int) -> BinomialNode:
        """Insert ``key`` and return the node that holds it."""
        node = BinomialNode(key)
        self._head = _union(self._head, node)
        self._consolidate()
        return node

    def merge(self, other: "BinomialHeap") -> None:
        """Move every key of ``other`` into this heap, leaving ``other`` empty."""
        self._head = _union(self._head, other._head)
        other._head = None
        self._consolidate()

    def find_min(self) -> BinomialNode:
        """Return the root holding the smallest key."""
        if self._head is None:
            raise StructureError("Heap is empty")
        best = self._head
        for root in self._roots():
            if root.key < best.key:
                best = root
        return best

    def delete_min(self) -> int:
        """Remove the smallest key and return it."""
        min_node = self.find_min()
        prev: Optional[BinomialNode] = None
        cur = self._head
        while cur is not None and cur is not min_node:
            prev, cur = cur, cur.sibling
        if prev is None:
            self._head = min_node.sibling
        else:
            prev.sibling = min_node.sibling

        reversed_children: Optional[BinomialNode] = None
        child = min_node.child
        while child is not None:
            following = child.sibling
            child.sibling = reversed_children
            child.parent = None
            reversed_children = child
            child = following

        self._head = _union(self._head, reversed_children)
        self._consolidate()
        return min_node.key

    def decrease_key(self, node: BinomialNode, new_key: int) -> None:
        """Give ``node`` a new key and bubble it up by swapping keys with parents."""
        node.key = new_key
        current = node
        parent = current.parent
        while parent is not None and current.key < parent.key:
            current.key, parent.key = parent.key, current.key
            current = parent
            parent = current.parent

    def delete_key(self, key: int) -> bool:
        """Remove one occurrence of ``key``; return whether it was found."""
        current = self._head
        while current is not None:
            node: Optional[BinomialNode] = current
            while node is not None:
                if node.key == key:
                    self.decrease_key(node, _DELETE_SENTINEL)
                    self.delete_min()
                    return True
                if node.child is not None:
                    node = node.child
                elif node.sibling is not None:
                    node = node.sibling
                else:
                    while node.parent is not None and node.parent.sibling is None:
                        node = node.parent
                    node = node.parent.sibling if node.parent is not None else None
            current = current.sibling
        return False

    def degrees(self) -> List[int]:
        """Degrees of the trees in root-list order."""
        return [root.degree for root in self._roots()]

    def keys(self) -> List[int]:
        """All keys, tree by tree, each tree listed depth first."""
        return [node.key for root in self._roots() for node in _tree_nodes(root)]

    def __len__(self) -> int:
        return sum(1 << root.degree for root in self._roots())

    def render(self) -> str:
        parts = ["Binomial Heap:\n"]
        for root in self._roots():
            parts.append(f"\nTree of degree {root.degree}\n")
            parts.extend(_tree_lines(root, 0))
        return "".join(parts)