import io

import pytest

from treebench.array_list import ArrayList, main
from treebench.errors import StructureError


def filled(values, capacity=10):
    array = ArrayList(capacity)
    for value in values:
        array.insert(value)
    return array


def test_display_keeps_insertion_order():
    assert filled([4, 8, 15]).display() == "4 8 15 "


def test_insert_beyond_capacity_raises():
    array = filled([1, 2], capacity=2)
    with pytest.raises(StructureError):
        array.insert(3)
    assert list(array) == [1, 2]


def test_remove_shifts_elements():
    array = filled([5, 6, 7])
    array.remove(1)
    assert list(array) == [5, 7]
    assert len(array) == 2


@pytest.mark.parametrize("index", [-1, 3])
def test_remove_out_of_bounds(index):
    array = filled([5, 6, 7])
    with pytest.raises(IndexError):
        array.remove(index)


def test_search_first_occurrence():
    array = filled([3, 9, 3])
    assert array.search(3) == 0
    assert array.search(9) == 1
    assert array.search(42) is None


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        ArrayList(-1)


def run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_main_insert_search_display(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "1 5\n1 7\n4\n3 7\n5\n")
    assert code == 0
    assert "5 7 " in out
    assert "Found at:  1" in out
    assert "See you" in out


def test_main_reports_missing_and_invalid(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "3 99\n9\n2 4\n5\n")
    assert code == 0
    assert "Found at:  -1" in out
    assert "Invalid choice" in out
    assert "Index is out of bounds" in out


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    code, out = run(monkeypatch, capsys, "1 3\n")
    assert code == 0
    assert "See you" not in out
    assert "Array Implementation of Lists :)" in out