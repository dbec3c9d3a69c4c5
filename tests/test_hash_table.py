import random

import pytest

from treebench.hash_table import (
    BenchmarkResult,
    CollisionHandling,
    HashTable,
    TableStats,
    benchmark_dict,
    benchmark_table,
    main,
    read_data,
)

ALL_METHODS = list(CollisionHandling)
PROBING = [m for m in CollisionHandling if m.probing]
NAMES = ["Alice", "Bob", "Charlie", "David", "Eve"]


@pytest.mark.parametrize("method", ALL_METHODS)
def test_insert_then_search(method):
    table = HashTable(11, method)
    for position, name in enumerate(NAMES):
        assert table.insert(name, position * 5)
    for position, name in enumerate(NAMES):
        assert table.search(name) == position * 5
    assert table.search("Mallory") is None


@pytest.mark.parametrize("method", ALL_METHODS)
def test_remove(method):
    table = HashTable(11, method)
    for name in NAMES:
        table.insert(name, len(name))
    assert table.remove("Bob") is True
    assert table.search("Bob") is None
    assert table.remove("Bob") is False
    assert "Alice" in table
    assert len(table) == len(NAMES) - 1


@pytest.mark.parametrize("method", ALL_METHODS)
def test_growth_keeps_every_key(method):
    initial = 4
    table = HashTable(initial, method)
    keys = [f"key{n}" for n in range(20)]
    for n, key in enumerate(keys):
        table.insert(key, n)
    assert table.size > initial
    assert table.size % initial == 0
    assert [table.search(key) for key in keys] == list(range(20))
    assert table.stats().total_elements == len(keys)


@pytest.mark.parametrize("method", ALL_METHODS)
def test_doubles_when_load_exceeds_threshold(method):
    table = HashTable(4, method)
    for key in ["a", "b", "c", "d"]:
        table.insert(key, 1)
    assert table.size == 4
    table.insert("e", 1)
    assert table.size == 2 * 4


def test_vector_chaining_appends_repeated_key():
    table = HashTable(10, CollisionHandling.CHAINING_VECTOR)
    table.insert("a", 1)
    table.insert("a", 2)
    assert table.search("a") == 2
    assert table.stats().total_elements == 2


def test_tree_chaining_updates_repeated_key():
    table = HashTable(10, CollisionHandling.CHAINING_BST)
    table.insert("a", 1)
    table.insert("a", 2)
    assert table.search("a") == 2
    assert table.stats().total_elements == 1
    assert len(table) == 1


@pytest.mark.parametrize("method", PROBING)
def test_colliding_keys_both_found(method):
    # "a" and "k" share a home slot in a ten-slot table
    table = HashTable(10, method)
    table.insert("a", 1)
    table.insert("k", 2)
    assert table.search("a") == 1
    assert table.search("k") == 2
    assert table.remove("a")
    assert table.search("k") == 2


@pytest.mark.parametrize("method", PROBING)
def test_probing_stats(method):
    table = HashTable(10, method)
    for name in NAMES[:3]:
        table.insert(name, 0)
    stats = table.stats()
    assert stats.total_elements == 3
    assert stats.total_elements + stats.empty_buckets == table.size
    assert stats.max_chain_length is None
    assert "Max chain length" not in stats.render()


@pytest.mark.parametrize(
    "method",
    [CollisionHandling.CHAINING_VECTOR, CollisionHandling.CHAINING_LIST, CollisionHandling.CHAINING_BST],
)
def test_chaining_stats(method):
    table = HashTable(10, method)
    for name in NAMES[:3]:
        table.insert(name, 0)
    stats = table.stats()
    assert stats.total_elements == 3
    assert stats.load_factor == pytest.approx(3 / table.size)
    assert 1 <= stats.max_chain_length <= 3
    assert table.size - 3 <= stats.empty_buckets < table.size
    assert "Total elements: 3\n" in stats.render()


def test_stats_render_format():
    stats = TableStats(total_elements=5, load_factor=0.5, empty_buckets=6, max_chain_length=2)
    assert stats.render() == (
        "Total elements: 5\nLoad factor: 0.5\nEmpty buckets: 6\nMax chain length: 2\n"
    )


def test_non_ascii_key():
    table = HashTable(7, CollisionHandling.DOUBLE_HASHING)
    table.insert("café", 3)
    assert table.search("café") == 3


def test_invalid_sizes():
    with pytest.raises(ValueError):
        HashTable(0)
    with pytest.raises(ValueError):
        HashTable(1, CollisionHandling.DOUBLE_HASHING)


def test_method_accepts_int():
    table = HashTable(5, 3)
    assert table.method is CollisionHandling.LINEAR_PROBING


def test_read_data(tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("alice 25\nbob 30\ncarol oops\ndave 7\n")
    assert read_data(str(path)) == [("alice", 25), ("bob", 30)]


def test_read_data_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_data(str(tmp_path / "absent.txt"))


def test_benchmark_table_fills_table():
    data = [(f"k{n}", n) for n in range(50)]
    table = HashTable(101, CollisionHandling.CHAINING_LIST)
    result = benchmark_table(table, data, 25, 0, random.Random(1))
    assert min(result.insert_us, result.search_us, result.delete_us) >= 0
    assert all(table.search(key) == value for key, value in data)


def test_benchmark_table_deletes():
    data = [(f"k{n}", n) for n in range(50)]
    table = HashTable(101, CollisionHandling.LINEAR_PROBING)
    benchmark_table(table, data, 0, 10, random.Random(2))
    assert 40 <= len(table) < 50


def test_benchmark_empty_data_rejected():
    with pytest.raises(ValueError):
        benchmark_table(HashTable(5), [], 0, 1, random.Random(0))
    with pytest.raises(ValueError):
        benchmark_dict([], 1, 0, random.Random(0))


def test_benchmark_result_render():
    text = BenchmarkResult(1, 2, 3).render()
    assert text.splitlines() == [
        "Insertion time: 1 microseconds",
        "Search time: 2 microseconds",
        "Deletion time: 3 microseconds",
    ]


def test_benchmark_dict():
    data = [(f"k{n}", n) for n in range(30)]
    result = benchmark_dict(data, 15, 5, random.Random(3))
    assert min(result.insert_us, result.search_us, result.delete_us) >= 0


def test_main_runs_every_method(tmp_path, capsys):
    path = tmp_path / "small.txt"
    path.write_text("\n".join(f"key{n} {n}" for n in range(40)))
    assert main([str(path), "--size", "16", "--deletes", "3", "--seed", "0"]) == 0
    out = capsys.readouterr().out
    assert f"Benchmarking with data from: {path}" in out
    for method in CollisionHandling:
        assert f"Running benchmark for method: {method.value}" in out
    assert "dict Benchmark Results:" in out
    assert out.count("Total elements:") == len(CollisionHandling)