"""Binary search tree rebalanced with the Day-Stout-Warren rotation scheme."""

import math
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from treebench.errors import StructureError
from treebench.render import render_sideways


@dataclass(eq=False)
class _Node:
    data: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _rotate_right(node: Optional[_Node]) -> Optional[_Node]:
    if node is None or node.left is None:
        return node
    left_child = node.left
    node.left = left_child.right
    left_child.right = node
    return left_child


def _rotate_left(node: Optional[_Node]) -> Optional[_Node]:
    if node is None or node.right is None:
        return node
    right_child = node.right
    node.right = right_child.left
    right_child.left = node
    return right_child


def _inorder_nodes(node: Optional[_Node]) -> Iterator[_Node]:
    stack: List[_Node] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


def _preorder_nodes(node: Optional[_Node]) -> Iterator[_Node]:
    stack = [node] if node is not None else []
    while stack:
        current = stack.pop()
        yield current
        if current.right is not None:
            stack.append(current.right)
        if current.left is not None:
            stack.append(current.left)


class DSWTree:
    """Unbalanced binary search tree with an in-place DSW balancing pass."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: Any) -> None:
        """Insert ``value`` as a leaf; raise if it equals the leaf's would-be parent."""
        new_node = _Node(value)
        if self._root is None:
            self._root = new_node
            return
        parent = self._root
        current: Optional[_Node] = self._root
        while current is not None:
            parent = current
            current = current.left if value < current.data else current.right
        if value < parent.data:
            parent.left = new_node
        elif value > parent.data:
            parent.right = new_node
        else:
            raise StructureError("Node already exists!")

    def _create_vine(self) -> None:
        grandparent: Optional[_Node] = None
        parent: Optional[_Node] = self._root
        child = parent.right
        while parent is not None:
            if child is not None:
                if child.left is not None or child.right is not None:
                    parent = _rotate_left(parent)
                    if grandparent is None:
                        self._root = parent
                    else:
                        grandparent.left = parent
                child = child.right
            else:
                grandparent = parent
                parent = parent.left
                if parent is not None:
                    child = parent.right

    def _rotate_every_other(self, count: int) -> None:
        grandparent: Optional[_Node] = None
        parent: Optional[_Node] = self._root
        child = parent.left
        for _ in range(count):
            if child is None or parent is None:
                break
            parent = _rotate_right(parent)
            if grandparent is None:
                self._root = parent
            else:
                grandparent.left = parent
            grandparent = parent
            parent = parent.left
            if parent is not None:
                child = parent.left

    def _rebuild(self, size: int) -> None:
        highest = int(math.pow(2, 2 * math.log2(size + 1)))
        extra = (size + 1) - highest
        self._rotate_every_other(extra)
        size = (size - extra) // 2
        while size > 0:
            self._rotate_every_other(size)
            size //= 2

    def balance(self) -> str:
        """Run both DSW phases; return the rendering of the tree after phase one."""
        if self._root is None:
            return ""
        self._create_vine()
        vine = self.render()
        size = 0
        node = self._root
        while node is not None:
            size += 1
            node = node.right
        self._rebuild(size)
        return vine

    def preorder(self) -> List[Any]:
        return [node.data for node in _preorder_nodes(self._root)]

    def inorder(self) -> List[Any]:
        return [node.data for node in _inorder_nodes(self._root)]

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        level = [self._root] if self._root is not None else []
        depth = 0
        while level:
            depth += 1
            level = [
                child
                for node in level
                for child in (node.left, node.right)
                if child is not None
            ]
        return depth

    def render(self) -> str:
        return render_sideways(self._root, lambda node: str(node.data))