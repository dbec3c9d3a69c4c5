"""Self-balancing AVL tree of unique keys."""

from dataclasses import dataclass
from typing import Any, List, Optional

from treebench.render import render_sideways


@dataclass
class _Node:
    key: Any
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 0


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else -1


def _balance(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(y: _Node) -> _Node:
    x = y.right
    y.right = x.left
    x.left = y
    _update(y)
    _update(x)
    return x


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _insert(node: Optional[_Node], key: Any) -> _Node:
    if node is None:
        return _Node(key)
    if key < node.key:
        node.left = _insert(node.left, key)
    elif key > node.key:
        node.right = _insert(node.right, key)
    else:
        return node

    _update(node)
    balance = _balance(node)

    if balance > 1 and key < node.left.key:
        return _rotate_right(node)
    if balance < -1 and key > node.right.key:
        return _rotate_left(node)
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _remove(node: Optional[_Node], key: Any) -> Optional[_Node]:
    if node is None:
        return None
    if key < node.key:
        node.left = _remove(node.left, key)
    elif key > node.key:
        node.right = _remove(node.right, key)
    else:
        if node.left is None or node.right is None:
            return node.left if node.left is not None else node.right
        successor = _min_node(node.right)
        node.key = successor.key
        node.right = _remove(node.right, successor.key)

    _update(node)
    balance = _balance(node)

    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node)
    if balance > 1 and _balance(node.left) < 0:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node)
    if balance < -1 and _balance(node.right) > 0:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """AVL tree: duplicates are ignored on insert, missing keys on remove."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, key: Any) -> None:
        self._root = _insert(self._root, key)

    def remove(self, key: Any) -> None:
        self._root = _remove(self._root, key)

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

    def inorder(self) -> List[Any]:
        result: List[Any] = []
        stack: List[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result

    def height(self) -> int:
        """Height of the root in edges; -1 for an empty tree."""
        return _height(self._root)

    def render(self) -> str:
        return render_sideways(self._root, lambda node: str(node.key))