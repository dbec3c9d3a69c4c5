"""Sideways text rendering of binary trees."""

from typing import Any, Callable, Iterator, Optional, Tuple

INDENT = 10


def _sideways(node: Optional[Any], depth: int) -> Iterator[Tuple[int, Any]]:
    if node is None:
        return
    yield from _sideways(node.right, depth + 1)
    yield depth, node
    yield from _sideways(node.left, depth + 1)


def render_sideways(root: Optional[Any], label: Callable[[Any], str]) -> str:
    """Render a tree rotated a quarter turn: right subtree on top, one line per node.

    Nodes need ``left`` and ``right`` attributes; ``label`` turns a node into text.
    Each level is indented by ten more spaces than its parent.
    """
    return "".join(
        " " * (INDENT * depth) + label(node) + "\n"
        for depth, node in _sideways(root, 0)
    )