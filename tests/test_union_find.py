import pytest

from treebench.union_find import QuickUnion, UnionFind, WeightedQuickUnion


def test_weighted_example_render():
    uf = WeightedQuickUnion(10)
    for p, q in [(1, 2), (1, 3), (2, 6), (3, 9), (0, 7)]:
        uf.union(p, q)
    assert uf.render() == (
        "Parent: 0 1 1 1 4 5 1 0 8 1 \nSize:   2 5 1 1 1 1 1 1 1 1 \n"
    )


def test_weighted_fresh_render():
    assert WeightedQuickUnion(3).render() == "Parent: 0 1 2 \nSize:   1 1 1 \n"


def test_weighted_connected_is_transitive():
    uf = WeightedQuickUnion(6)
    uf.union(0, 1)
    uf.union(1, 2)
    assert uf.connected(0, 2)
    assert not uf.connected(0, 3)


def test_weighted_tie_keeps_first_root():
    uf = WeightedQuickUnion(4)
    uf.union(2, 3)
    assert uf.find(3) == 2


def test_weighted_smaller_goes_under_larger():
    uf = WeightedQuickUnion(5)
    uf.union(0, 1)
    uf.union(0, 2)
    uf.union(4, 0)
    assert uf.find(4) == 0
    assert uf.size[0] == 4


def test_weighted_out_of_range():
    with pytest.raises(IndexError):
        WeightedQuickUnion(3).find(3)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        UnionFind(-1)


def test_quick_union_links_first_root_under_second():
    qu = QuickUnion(4)
    qu.union(0, 1)
    assert qu.find(0) == 1
    qu.union(1, 3)
    assert qu.find(0) == 3


def test_quick_union_negative_index():
    with pytest.raises(IndexError):
        QuickUnion(4).find(-1)


def test_union_find_tie_keeps_first_root():
    uf = UnionFind(4)
    uf.union(0, 1)
    assert uf.find(1) == 0


def test_union_find_rank_decides_root():
    uf = UnionFind(5)
    uf.union(0, 1)
    uf.union(2, 0)
    assert uf.find(2) == 0
    assert uf.find(1) == uf.find(2)


@pytest.mark.parametrize("cls", [QuickUnion, UnionFind, WeightedQuickUnion])
def test_all_connect_chain(cls):
    sets = cls(8)
    for i in range(7):
        sets.union(i, i + 1)
    roots = {sets.find(i) for i in range(8)}
    assert len(roots) == 1