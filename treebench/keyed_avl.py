"""AVL tree mapping string keys to integer values."""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from treebench.render import render_sideways


@dataclass(eq=False)
class _Node:
    key: str
    value: int
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None
    height: int = 0


def _height(node: Optional[_Node]) -> int:
    return node.height if node is not None else -1


def _balance(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node is not None else 0


def _update(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _update(y)
    _update(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _update(x)
    _update(y)
    return y


def _insert(node: Optional[_Node], key: str, value: int) -> _Node:
    if node is None:
        return _Node(key, value)
    if key < node.key:
        node.left = _insert(node.left, key, value)
    elif key > node.key:
        node.right = _insert(node.right, key, value)
    else:
        node.value = value
        return node

    _update(node)
    balance = _balance(node)

    if balance > 1 and key < node.left.key:
        return _rotate_right(node)
    if balance > 1 and key > node.left.key:
        node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1 and key > node.right.key:
        return _rotate_left(node)
    if balance < -1 and key < node.right.key:
        node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


def _remove(node: Optional[_Node], key: str) -> Optional[_Node]:
    if node is None:
        return None
    if key < node.key:
        node.left = _remove(node.left, key)
    elif key > node.key:
        node.right = _remove(node.right, key)
    else:
        if node.left is None or node.right is None:
            return node.left if node.left is not None else node.right
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.key, node.value = successor.key, successor.value
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


def _inorder(node: Optional[_Node]) -> Iterator[_Node]:
    stack: List[_Node] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node
        node = node.right


class KeyedAVLTree:
    """Balanced search tree of (key, value) pairs; inserting a present key updates it."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, key: str, value: int) -> None:
        self._root = _insert(self._root, key, value)

    def remove(self, key: str) -> bool:
        """Delete ``key``; return whether it was present."""
        if self.search(key) is None:
            return False
        self._root = _remove(self._root, key)
        return True

    def search(self, key: str) -> Optional[int]:
        """The value stored under ``key``, or None if it is absent."""
        node = self._root
        while node is not None:
            if key == node.key:
                return node.value
            node = node.left if key < node.key else node.right
        return None

    def items(self) -> List[Tuple[str, int]]:
        """All pairs in ascending key order."""
        return [(node.key, node.value) for node in _inorder(self._root)]

    def __len__(self) -> int:
        return sum(1 for _ in _inorder(self._root))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.search(key) is not None

    def height(self) -> int:
        """Height of the root in edges; -1 for an empty tree."""
        return _height(self._root)

    def render(self) -> str:
        return render_sideways(self._root, lambda node: f"{node.key}: {node.value}")