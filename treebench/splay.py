"""Top-down recursive splay tree of unique keys."""

from dataclasses import dataclass
from typing import Any, List, Optional

from treebench.errors import StructureError
from treebench.render import render_sideways


@dataclass
class _Node:
    key: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _rotate_right(x: _Node) -> _Node:
    y = x.left
    x.left = y.right
    y.right = x
    return y


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    return y


def _splay(node: Optional[_Node], key: Any) -> Optional[_Node]:
    if node is None or node.key == key:
        return node

    if key < node.key:
        if node.left is None:
            return node
        if key < node.left.key:
            node.left.left = _splay(node.left.left, key)
            node = _rotate_right(node)
        elif key > node.left.key:
            node.left.right = _splay(node.left.right, key)
            if node.left.right is not None:
                node.left = _rotate_left(node.left)
        if node.left is None:
            return node
        return _rotate_right(node)

    if node.right is None:
        return node
    if key > node.right.key:
        node.right.right = _splay(node.right.right, key)
        node = _rotate_left(node)
    elif key < node.right.key:
        node.right.left = _splay(node.right.left, key)
        if node.right.left is not None:
            node.right = _rotate_right(node.right)
    if node.right is None:
        return node
    return _rotate_left(node)


class SplayTree:
    """Splay tree: every access moves the touched key (or its neighbour) to the root."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, key: Any) -> None:
        """Insert ``key`` as a leaf, then splay it to the root."""
        if self._root is None:
            self._root = _Node(key)
            return
        current = self._root
        while True:
            if key < current.key:
                if current.left is None:
                    current.left = _Node(key)
                    break
                current = current.left
            elif key > current.key:
                if current.right is None:
                    current.right = _Node(key)
                    break
                current = current.right
            else:
                break
        self._root = _splay(self._root, key)

    def remove(self, key: Any) -> None:
        """Remove ``key`` if present; raise StructureError on an empty tree."""
        if self._root is None:
            raise StructureError("Tree is empty.")
        root = _splay(self._root, key)
        if root.key != key:
            self._root = root
            return
        if root.left is None:
            self._root = root.right
        elif root.right is None:
            self._root = root.left
        else:
            left_tree = _splay(root.left, key)
            left_tree.right = root.right
            self._root = left_tree

    def search(self, key: Any) -> bool:
        """Splay toward ``key`` and report whether it is now at the root."""
        self._root = _splay(self._root, key)
        return self._root is not None and self._root.key == key

    def preorder(self) -> List[Any]:
        result: List[Any] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.key)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def render(self) -> str:
        return render_sideways(self._root, lambda node: str(node.key))