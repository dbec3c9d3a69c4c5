"""Kruskal minimum spanning tree with two heap / disjoint-set pairings."""

import argparse
import random
import sys
import time
from typing import Callable, List, Optional, Sequence

from treebench.edge_binomial_heap import EdgeBinomialHeap
from treebench.edge_heap import EdgeHeap
from treebench.edges import Edge
from treebench.errors import StructureError
from treebench.union_find import QuickUnion, UnionFind


class MST:
    """An undirected weighted graph on vertices 0..n-1."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError("number of vertices must not be negative")
        self.n = vertices
        self.edges: List[Edge] = []

    def add_edge(self, src: int, dest: int, weight: int) -> None:
        self.edges.append(Edge(src, dest, weight))

    def _needed(self) -> int:
        return max(self.n - 1, 0)

    def kruskal_v1(self) -> int:
        """MST weight using a binary heap and plain quick-union."""
        heap = EdgeHeap(len(self.edges))
        for edge in self.edges:
            heap.insert(edge)
        sets = QuickUnion(self.n)
        total = 0
        count = 0
        needed = self._needed()
        while count < needed and len(heap) > 0:
            edge = heap.delete_min()
            if sets.find(edge.src) != sets.find(edge.dest):
                sets.union(edge.src, edge.dest)
                total += edge.weight
                count += 1
        if count != needed:
            raise StructureError("Graph is not connected")
        return total

    def kruskal_v2(self) -> int:
        """MST weight using a binomial heap and union by rank with path compression."""
        heap = EdgeBinomialHeap()
        for edge in self.edges:
            heap.insert(edge)
        sets = UnionFind(self.n)
        total = 0
        count = 0
        needed = self._needed()
        while count < needed:
            try:
                edge = heap.find_min()
            except StructureError:
                raise StructureError("Graph is not connected") from None
            heap.delete_min()
            if sets.find(edge.src) != sets.find(edge.dest):
                sets.union(edge.src, edge.dest)
                total += edge.weight
                count += 1
        return total


def random_graph(num_nodes: int, num_edges: int, seed: Optional[int] = 42) -> MST:
    """A connected random graph: a weighted path plus random extra edges."""
    if num_nodes < 2 and num_edges > max(num_nodes - 1, 0):
        raise ValueError("extra edges need at least two vertices")
    rng = random.Random(seed)
    graph = MST(num_nodes)
    for i in range(num_nodes - 1):
        graph.add_edge(i, i + 1, rng.randint(1, 100))
    added = max(num_nodes - 1, 0)
    while added < num_edges:
        u = rng.randrange(num_nodes)
        v = rng.randrange(num_nodes)
        if u != v:
            graph.add_edge(u, v, rng.randint(1, 1000))
            added += 1
    return graph


def _small_graph() -> MST:
    graph = MST(6)
    for src, dest, weight in (
        (0, 1, 4), (0, 2, 4), (1, 2, 2), (1, 3, 5), (2, 3, 5),
        (2, 4, 11), (3, 4, 2), (4, 5, 1), (3, 5, 7),
    ):
        graph.add_edge(src, dest, weight)
    return graph


def _run(label: str, solver: Callable[[], int]) -> None:
    print(f"Running {label} MST...")
    start = time.perf_counter()
    try:
        cost = solver()
    except StructureError as error:
        print(error)
    else:
        print(f"MST Cost: {cost}")
    print(f"Time taken: {time.perf_counter() - start:g} seconds\n")


def _compare(graph: MST) -> None:
    _run("Baseline", graph.kruskal_v1)
    _run("Optimized", graph.kruskal_v2)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Compare both Kruskal variants on a small fixed graph and a large random one."""
    parser = argparse.ArgumentParser(description="Compare Kruskal MST variants.")
    parser.add_argument("--nodes", type=int, default=200000)
    parser.add_argument("--edges", type=int, default=500000)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args(argv)

    print("=== Small Graph Test ===")
    _compare(_small_graph())

    print(f"=== Large Graph Test ({args.nodes} nodes, {args.edges} edges) ===")
    _compare(random_graph(args.nodes, args.edges, args.seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())