import pytest

from lollykit.hashmap import HashMap
from lollykit.rel_hashmap import RelativeHashMap


def _base():
    m = HashMap(0)
    m["a"] = 1
    m["b"] = 2
    return RelativeHashMap(m)


def test_default_value_construction():
    r = RelativeHashMap(7)
    assert r["missing"] == 7
    assert "missing" not in r


def test_lookup_falls_through_to_parent():
    r = _base()
    r.extend()
    assert r["a"] == 1
    assert "a" in r
    assert "a" not in r.item
    r.item["a"] = 10
    assert r["a"] == 10
    assert r.parent["a"] == 1


def test_shorten_discards_changes():
    r = _base()
    r.extend()
    r.item["a"] = 10
    r.shorten()
    assert r["a"] == 1
    assert r.parent is None


def test_merge_keeps_changes():
    r = _base()
    r.extend()
    r.item["a"] = 10
    r.item["c"] = 3
    r.merge()
    assert r.parent is None
    assert r["a"] == 10
    assert r["c"] == 3
    assert r["b"] == 2


def test_shorten_and_merge_without_parent_raise():
    r = _base()
    with pytest.raises(ValueError):
        r.shorten()
    with pytest.raises(ValueError):
        r.merge()


def test_get_or_insert_copies_from_parent():
    m = HashMap([])
    m["k"] = [1]
    r = RelativeHashMap(m)
    r.extend()
    value = r.get_or_insert("k")
    assert value == [1]
    value.append(2)
    assert r["k"] == [1, 2]
    assert r.parent["k"] == [1]


def test_get_or_insert_stores_default():
    r = RelativeHashMap(0)
    assert r.get_or_insert("x") == 0
    assert "x" in r.item


def test_find_changes_removes_unchanged():
    r = _base()
    ch = HashMap(0)
    ch["a"] = 1
    ch["b"] = 5
    r.find_changes(ch)
    assert "a" not in ch
    assert ch["b"] == 5
    assert len(ch) == 1


def test_find_differences_records_parent_values():
    r = _base()
    r.extend()
    r.item["a"] = 10
    ch = HashMap(0)
    r.find_differences(ch)
    assert ch["a"] == 1
    assert len(ch) == 1


def test_change_then_undo_round_trip():
    r = _base()
    r.extend()
    r.item["a"] = 10
    undo = HashMap(0)
    r.find_differences(undo)
    r.merge()
    assert r["a"] == 10
    r.change(undo)
    assert r["a"] == 1


def test_str_has_one_line_per_layer():
    r = _base()
    r.extend()
    text = str(r)
    assert text.endswith("{ a->1, b->2 }\n")
    assert text.startswith("{  }\n")
    assert text.count("\n") == 3