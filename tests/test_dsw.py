import pytest

from treebench.dsw import DSWTree
from treebench.errors import StructureError

SAMPLE = [10, 14, 23, 8, 7, 9, 20, 25]


def build(values):
    tree = DSWTree()
    for value in values:
        tree.insert(value)
    return tree


def test_inorder_is_sorted_after_insert():
    assert build(SAMPLE).inorder() == sorted(SAMPLE)


def test_preorder_starts_with_first_insert():
    assert build(SAMPLE).preorder()[0] == SAMPLE[0]


def test_balance_preserves_order_and_contents():
    tree = build(SAMPLE)
    tree.balance()
    assert tree.inorder() == sorted(SAMPLE)
    assert sorted(tree.preorder()) == sorted(SAMPLE)


def test_balance_returns_vine_with_one_line_per_node():
    tree = build(SAMPLE)
    vine = tree.balance()
    assert len(vine.splitlines()) == len(SAMPLE)


def test_balance_on_empty_tree():
    tree = DSWTree()
    assert tree.balance() == ""
    assert tree.inorder() == []
    assert tree.height() == 0


@pytest.mark.parametrize("values", [[1], [1, 2], [3, 2, 1], list(range(1, 16))])
def test_balance_keeps_all_values(values):
    tree = build(values)
    tree.balance()
    assert tree.inorder() == sorted(values)


def test_height_of_sorted_chain():
    tree = build([1, 2, 3, 4])
    assert tree.height() == 4


def test_duplicate_of_parent_raises():
    tree = build([10])
    with pytest.raises(StructureError):
        tree.insert(10)


def test_duplicate_deeper_is_accepted():
    tree = build([10, 14])
    tree.insert(10)
    assert tree.inorder() == [10, 10, 14]


def test_render_layout():
    assert build([2, 1, 3]).render() == "          3\n2\n          1\n"