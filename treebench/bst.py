"""Unbalanced binary search tree with unique values."""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from treebench.errors import StructureError


@dataclass
class _Node:
    info: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


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


def _postorder_nodes(node: Optional[_Node]) -> Iterator[_Node]:
    stack = [node] if node is not None else []
    reverse: List[_Node] = []
    while stack:
        current = stack.pop()
        reverse.append(current)
        if current.left is not None:
            stack.append(current.left)
        if current.right is not None:
            stack.append(current.right)
    yield from reversed(reverse)


class BinarySearchTree:
    """A plain binary search tree; duplicates are rejected."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: Any) -> None:
        """Insert ``value``; raise StructureError if it is already present."""
        new_node = _Node(value)
        if self._root is None:
            self._root = new_node
            return
        current = self._root
        while True:
            if current.info == value:
                raise StructureError("Node already exists")
            if current.info > value:
                if current.left is None:
                    current.left = new_node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = new_node
                    return
                current = current.right

    def delete(self, value: Any) -> None:
        """Remove ``value``; a node with two children takes its in-order predecessor."""
        if self._root is None:
            raise StructureError("Cannot delete from an empty tree!")
        parent: Optional[_Node] = None
        node: Optional[_Node] = self._root
        while node is not None and node.info != value:
            parent = node
            node = node.left if node.info > value else node.right
        if node is None:
            raise StructureError("The item is not in the tree!")
        replacement = self._detach(node)
        if parent is None:
            self._root = replacement
        elif parent.left is node:
            parent.left = replacement
        else:
            parent.right = replacement

    @staticmethod
    def _detach(node: _Node) -> Optional[_Node]:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        previous: Optional[_Node] = None
        current = node.left
        while current.right is not None:
            previous, current = current, current.right
        node.info = current.info
        if previous is None:
            node.left = current.left
        else:
            previous.right = current.left
        return node

    def search(self, value: Any) -> bool:
        """Return whether ``value`` is in the tree; raise if the tree is empty."""
        if self._root is None:
            raise StructureError("Cannot search in an empty tree")
        current = self._root
        while current is not None:
            if current.info == value:
                return True
            current = current.left if current.info > value else current.right
        return False

    def inorder(self) -> List[Any]:
        return [node.info for node in _inorder_nodes(self._root)]

    def preorder(self) -> List[Any]:
        return [node.info for node in _preorder_nodes(self._root)]

    def postorder(self) -> List[Any]:
        return [node.info for node in _postorder_nodes(self._root)]

    @staticmethod
    def _sum(node: Optional[_Node]) -> Any:
        return sum(n.info for n in _inorder_nodes(node))

    def tree_state(self) -> str:
        """Compare the value sums of the root's two subtrees."""
        if self._root is None:
            raise StructureError("The tree is empty")
        left = self._sum(self._root.left)
        right = self._sum(self._root.right)
        if left == right:
            return "Balanced Tree"
        if left > right:
            return "Left Heavy Tree"
        return "Right Heavy Tree"

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