"""Disjoint-set structures: weighted quick-union, plain quick-union, union by rank."""

from typing import List


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError("number of elements must not be negative")


def _check_index(index: int, n: int) -> None:
    if not 0 <= index < n:
        raise IndexError(f"element {index} out of range 0..{n - 1}")


class WeightedQuickUnion:
    """Union by size with path halving."""

    def __init__(self, n: int) -> None:
        _check_count(n)
        self.parent: List[int] = list(range(n))
        self.size: List[int] = [1] * n

    def find(self, p: int) -> int:
        _check_index(p, len(self.parent))
        parent = self.parent
        while p != parent[p]:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    def union(self, p: int, q: int) -> None:
        """Join the sets of ``p`` and ``q``; the smaller tree goes under the larger."""
        root_p = self.find(p)
        root_q = self.find(q)
        if root_p == root_q:
            return
        if self.size[root_p] < self.size[root_q]:
            self.parent[root_p] = root_q
            self.size[root_q] += self.size[root_p]
        else:
            self.parent[root_q] = root_p
            self.size[root_p] += self.size[root_q]

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def render(self) -> str:
        parents = "".join(f"{value} " for value in self.parent)
        sizes = "".join(f"{value} " for value in self.size)
        return f"Parent: {parents}\nSize:   {sizes}\n"


class QuickUnion:
    """Quick-union without balancing or compression."""

    def __init__(self, n: int) -> None:
        _check_count(n)
        self._parent: List[int] = list(range(n))

    def find(self, x: int) -> int:
        _check_index(x, len(self._parent))
        while x != self._parent[x]:
            x = self._parent[x]
        return x

    def union(self, x: int, y: int) -> None:
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x != root_y:
            self._parent[root_x] = root_y


class UnionFind:
    """Union by rank with full path compression."""

    def __init__(self, n: int) -> None:
        _check_count(n)
        self._parent: List[int] = list(range(n))
        self._rank: List[int] = [0] * n

    def find(self, x: int) -> int:
        _check_index(x, len(self._parent))
        root = x
        while root != self._parent[root]:
            root = self._parent[root]
        while x != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, x: int, y: int) -> None:
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return
        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1