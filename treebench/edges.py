"""Weighted, directed-as-stored graph edge."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Edge:
    """An edge between ``src`` and ``dest``.

    Edges are equal when all three fields match; they are ordered by weight alone.
    """

    src: int
    dest: int
    weight: int

    def __lt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight < other.weight

    def __gt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight > other.weight

    def __le__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight <= other.weight

    def __ge__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight >= other.weight