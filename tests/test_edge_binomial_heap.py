import random

import pytest

from treebench.edge_binomial_heap import EdgeBinomialHeap
from treebench.edges import Edge
from treebench.errors import StructureError


def _edges(count, seed):
    rng = random.Random(seed)
    return [Edge(i, i + 1, rng.randint(1, 100)) for i in range(count)]


def _drain(heap):
    result = []
    while len(heap):
        result.append(heap.delete_min())
    return result


def test_drains_in_weight_order():
    edges = _edges(37, 3)
    heap = EdgeBinomialHeap()
    for edge in edges:
        heap.insert(edge)
    assert len(heap) == 37
    drained = _drain(heap)
    assert [e.weight for e in drained] == sorted(e.weight for e in edges)
    assert set(drained) == set(edges)


def test_find_min_matches_lightest():
    edges = _edges(12, 4)
    heap = EdgeBinomialHeap()
    for edge in edges:
        heap.insert(edge)
    assert heap.find_min().weight == min(e.weight for e in edges)
    assert len(heap) == 12


def test_empty_heap_behaviour():
    heap = EdgeBinomialHeap()
    with pytest.raises(StructureError):
        heap.find_min()
    assert heap.delete_min() is None
    assert len(heap) == 0


def test_merge_moves_everything():
    first, second = EdgeBinomialHeap(), EdgeBinomialHeap()
    a, b = _edges(5, 5), _edges(6, 6)
    for edge in a:
        first.insert(edge)
    for edge in b:
        second.insert(edge)
    first.merge(second)
    assert len(first) == 11
    assert len(second) == 0
    assert sorted(e.weight for e in _drain(first)) == sorted(e.weight for e in a + b)


def test_decrease_key_brings_edge_to_top():
    edges = _edges(16, 7)
    heap = EdgeBinomialHeap()
    for edge in edges:
        heap.insert(edge)
    target = edges[9]
    lowered = Edge(target.src, target.dest, -5)
    assert heap.decrease_key(target, lowered) is True
    assert heap.find_min() == lowered


def test_decrease_key_refuses_increase_and_missing():
    heap = EdgeBinomialHeap()
    edge = Edge(0, 1, 10)
    heap.insert(edge)
    assert heap.decrease_key(edge, Edge(0, 1, 20)) is False
    assert heap.decrease_key(Edge(5, 6, 1), Edge(5, 6, 0)) is False
    assert heap.find_min() == edge


def test_delete_key_removes_only_that_edge():
    edges = _edges(20, 8)
    heap = EdgeBinomialHeap()
    for edge in edges:
        heap.insert(edge)
    victim = edges[13]
    assert heap.delete_key(victim) is True
    remaining = _drain(heap)
    assert len(remaining) == 19
    assert victim not in remaining
    assert heap.delete_key(Edge(99, 98, 1)) is False


def test_render_lists_every_edge():
    heap = EdgeBinomialHeap()
    for edge in (Edge(0, 1, 4), Edge(1, 2, 2), Edge(4, 5, 1)):
        heap.insert(edge)
    text = heap.render()
    assert text.startswith("Binomial Heap:\n")
    for fragment in ("(0, 1, 4)", "(1, 2, 2)", "(4, 5, 1)"):
        assert fragment in text