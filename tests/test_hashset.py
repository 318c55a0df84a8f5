import pytest

from lollykit.hashset import HashSet


def test_insert_and_contains():
    s = HashSet()
    s.insert(1).insert(2)
    assert 1 in s
    assert 2 in s
    assert 3 not in s
    assert len(s) == 2


def test_duplicate_insert_keeps_size():
    s = HashSet([1, 1, 2, 2, 2])
    assert len(s) == 2
    assert sorted(s) == [1, 2]


def test_remove_present_and_absent():
    s = HashSet(["a", "b"])
    s.remove("a")
    assert "a" not in s
    assert len(s) == 1
    s.remove("zzz")
    assert len(s) == 1


def test_subset_ordering():
    small = HashSet([1, 2])
    big = HashSet([1, 2, 3])
    other = HashSet([1, 4])
    assert small <= big
    assert small < big
    assert not big <= small
    assert not other <= big
    assert not big < big
    assert big <= big


def test_equality():
    assert HashSet([1, 2, 3]) == HashSet([3, 2, 1])
    assert not HashSet([1, 2]) == HashSet([1, 3])
    assert not HashSet([1]) == HashSet([1, 2])


def test_str_format():
    assert str(HashSet()) == "{  }"
    assert str(HashSet([7])) == "{ 7 }"
    text = str(HashSet([1, 2]))
    assert text in ("{ 1, 2 }", "{ 2, 1 }")


def test_copy_is_independent():
    s = HashSet([1, 2])
    c = s.copy()
    c.insert(3)
    s.remove(1)
    assert sorted(c) == [1, 2, 3]
    assert sorted(s) == [2]


def test_not_hashable():
    with pytest.raises(TypeError):
        hash(HashSet([1]))