import random

import pytest

from treebench.edge_heap import EdgeHeap
from treebench.edges import Edge
from treebench.errors import StructureError


def _edges(count, seed):
    rng = random.Random(seed)
    return [Edge(i, i + 1, rng.randint(1, 50)) for i in range(count)]


def test_pops_in_nondecreasing_weight_order():
    edges = _edges(40, 1)
    heap = EdgeHeap(len(edges))
    for edge in edges:
        heap.insert(edge)
    popped = [heap.delete_min() for _ in range(len(edges))]
    weights = [edge.weight for edge in popped]
    assert weights == sorted(weights)
    assert sorted(popped, key=lambda e: e.src) == sorted(edges, key=lambda e: e.src)
    assert len(heap) == 0


def test_peek_returns_lightest_without_removing():
    edges = _edges(10, 2)
    heap = EdgeHeap(10)
    for edge in edges:
        heap.insert(edge)
    top = heap.peek()
    assert top.weight == min(edge.weight for edge in edges)
    assert len(heap) == 10
    assert heap.delete_min() == top


def test_overflow_raises():
    heap = EdgeHeap(1)
    heap.insert(Edge(0, 1, 1))
    with pytest.raises(StructureError):
        heap.insert(Edge(1, 2, 2))
    assert len(heap) == 1


def test_empty_heap_raises():
    heap = EdgeHeap(3)
    with pytest.raises(StructureError):
        heap.peek()
    with pytest.raises(StructureError):
        heap.delete_min()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        EdgeHeap(-1)