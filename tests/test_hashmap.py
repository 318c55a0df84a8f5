import pytest

from lollykit.hashmap import HashMap, changes, invert


def make(default, **entries):
    m = HashMap(default)
    for key, value in entries.items():
        m[key] = value
    return m


def test_missing_key_gives_default_without_inserting():
    m = HashMap(7)
    assert m["x"] == 7
    assert len(m) == 0
    assert "x" not in m


def test_get_or_insert_stores_default():
    m = HashMap(7)
    assert m.get_or_insert("x") == 7
    assert "x" in m
    assert len(m) == 1


def test_get_or_insert_copies_mutable_default():
    m = HashMap([])
    m.get_or_insert("a").append(1)
    assert m["b"] == []
    assert m.get_or_insert("b") == []
    assert m["a"] == [1]


def test_set_and_get():
    m = HashMap(0)
    m["a"] = 3
    m["a"] = 4
    assert m["a"] == 4
    assert len(m) == 1


def test_reset_and_is_empty():
    m = make(0, a=1)
    assert not m.is_empty()
    m.reset("missing")
    assert len(m) == 1
    m.reset("a")
    assert m.is_empty()
    assert m["a"] == 0


def test_iteration_yields_keys():
    m = make(0, a=1, b=2, c=3)
    assert sorted(m) == ["a", "b", "c"]


def test_equality():
    assert make(0, a=1, b=2) == make(0, b=2, a=1)
    assert make(0, a=1) != make(0, a=2)
    assert make(0, a=1) != make(0, a=1, b=2)


def test_equality_uses_other_default_for_missing_keys():
    assert make(0, x=0) == make(0, y=1)


def test_str():
    assert str(HashMap(0)) == "{  }"
    assert str(make(0, a=1)) == "{ a->1 }"


def test_join_copies_values():
    source = make(None, a=[1])
    target = make(None, b=[2])
    target.join(source)
    source["a"].append(9)
    assert target["a"] == [1]
    assert target["b"] == [2]
    assert len(target) == 2


def test_write_back():
    base = make("d", a="base")
    m = make("m", present="mine")
    m.write_back("present", base)
    m.write_back("a", base)
    m.write_back("z", base)
    assert m["present"] == "mine"
    assert m["a"] == "base"
    assert m["z"] == "d"
    assert len(m) == 3


def test_post_patch():
    base = make(0, a=1, b=2)
    m = make(0, a=5, c=7)
    patch = make(0, a=1, b=3)
    m.post_patch(patch, base)
    assert "a" not in m
    assert m["b"] == 3
    assert m["c"] == 7


def test_pre_patch_prefers_current_values():
    base = make(0, a=1, b=2, c=4)
    m = make(0, a=9, b=2)
    patch = make(0, a=1, b=5, c=6)
    m.pre_patch(patch, base)
    assert m["a"] == 9
    assert "b" not in m
    assert m["c"] == 6


def test_copy_is_independent():
    m = make(0, a=1)
    c = m.copy()
    c["b"] = 2
    c["a"] = 5
    assert m == make(0, a=1)
    assert c.default == m.default
    assert len(c) == 2


def test_changes_and_invert():
    base = make(0, a=1, b=2)
    patch = make(-1, a=1, b=3, c=4)
    diff = changes(patch, base)
    assert diff == make(0, b=3, c=4)
    assert diff.default == base.default
    back = invert(patch, base)
    assert back == make(0, b=2, c=0)
    assert len(back) == 2


def test_changes_then_post_patch_round_trip():
    base = make(0, a=1, b=2)
    target = make(0, a=1, b=7, c=3)
    applied = base.copy()
    applied.join(changes(target, base))
    assert applied == target


@pytest.mark.parametrize("other", [1, "x", {"a": 1}])
def test_equality_with_non_hashmap(other):
    assert (make(0, a=1) == other) is False