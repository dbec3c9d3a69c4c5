import math
import random

import pytest

from treebench.keyed_avl import KeyedAVLTree


def build(pairs):
    tree = KeyedAVLTree()
    for key, value in pairs:
        tree.insert(key, value)
    return tree


def test_empty_tree():
    tree = KeyedAVLTree()
    assert tree.height() == -1
    assert tree.items() == []
    assert tree.search("a") is None
    assert tree.render() == ""


def test_items_are_sorted_by_key():
    pairs = [("delta", 4), ("alpha", 1), ("echo", 5), ("charlie", 3), ("bravo", 2)]
    tree = build(pairs)
    assert tree.items() == sorted(pairs)
    assert len(tree) == 5


def test_ascending_inserts_rotate_to_balance():
    tree = build([("a", 1), ("b", 2), ("c", 3)])
    assert tree.height() == 1
    assert tree.render() == "          c: 3\nb: 2\n          a: 1\n"


def test_double_rotation_case():
    tree = build([("c", 3), ("a", 1), ("b", 2)])
    assert tree.height() == 1
    assert tree.render().splitlines()[1] == "b: 2"


def test_insert_existing_key_updates_value():
    tree = build([("k", 1)])
    tree.insert("k", 9)
    assert tree.search("k") == 9
    assert tree.items() == [("k", 9)]


def test_remove_present_and_missing():
    tree = build([("a", 1), ("b", 2), ("c", 3)])
    assert tree.remove("b") is True
    assert tree.search("b") is None
    assert tree.items() == [("a", 1), ("c", 3)]
    assert tree.remove("b") is False
    assert "a" in tree
    assert "b" not in tree


def test_remove_from_empty_tree():
    assert KeyedAVLTree().remove("x") is False


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_random_operations_match_dict_and_stay_balanced(seed):
    rng = random.Random(seed)
    tree = KeyedAVLTree()
    reference = {}
    for _ in range(400):
        key = f"k{rng.randrange(120)}"
        if rng.random() < 0.65:
            value = rng.randrange(1000)
            tree.insert(key, value)
            reference[key] = value
        else:
            assert tree.remove(key) == (key in reference)
            reference.pop(key, None)
    assert tree.items() == sorted(reference.items())
    for key, value in reference.items():
        assert tree.search(key) == value
    n = len(reference)
    if n:
        assert tree.height() <= 1.45 * math.log2(n + 2)
    else:
        assert tree.height() == -1


def test_render_has_one_line_per_pair():
    pairs = [(f"key{i:02d}", i) for i in range(15)]
    tree = build(pairs)
    lines = tree.render().splitlines()
    assert len(lines) == 15
    assert sorted(line.strip() for line in lines) == sorted(f"{k}: {v}" for k, v in pairs)