import pytest

from lollykit.linked_list import LinkedList


def test_construct_and_iterate():
    lst = LinkedList(1, 2, 3)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert lst.is_nil()
    assert len(lst) == 0
    assert str(lst) == "[ ]"


def test_str_format():
    assert str(LinkedList(1, 2, 3)) == "[ 1, 2, 3 ]"


def test_getitem():
    lst = LinkedList("a", "b", "c")
    assert [lst[i] for i in range(3)] == ["a", "b", "c"]
    with pytest.raises(IndexError):
        lst[3]
    with pytest.raises(IndexError):
        lst[-1]


def test_equality():
    assert LinkedList(1, 2) == LinkedList(1, 2)
    assert not LinkedList(1, 2) == LinkedList(1, 2, 3)
    assert not LinkedList(1, 2) == LinkedList(1, 3)
    assert LinkedList() == LinkedList()


def test_prefix_ordering():
    assert LinkedList(1) < LinkedList(1, 2)
    assert not LinkedList(1, 2) < LinkedList(1, 2)
    assert LinkedList(1, 2) <= LinkedList(1, 2)
    assert LinkedList() < LinkedList(5)
    assert not LinkedList(2) <= LinkedList(1, 2)
    assert not LinkedList(1, 2, 3) <= LinkedList(1, 2)


def test_add_concatenates_and_appends():
    a = LinkedList(1, 2)
    b = LinkedList(3)
    assert list(a + b) == [1, 2, 3]
    assert list(a + 4) == [1, 2, 4]
    assert list(a) == [1, 2]


def test_contains():
    lst = LinkedList(1, 2, 3)
    assert 2 in lst
    assert 5 not in lst


def test_append_and_extend_in_place():
    lst = LinkedList()
    lst.append(1)
    lst.extend(LinkedList(2, 3))
    assert list(lst) == [1, 2, 3]


def test_push_and_pop_front():
    lst = LinkedList(2)
    lst.push_front(1)
    assert list(lst) == [1, 2]
    assert lst.pop_front() == 1
    assert list(lst) == [2]
    lst.pop_front()
    with pytest.raises(IndexError):
        lst.pop_front()


def test_is_atom():
    assert LinkedList(1).is_atom()
    assert not LinkedList().is_atom()
    assert not LinkedList(1, 2).is_atom()


def test_head_and_tail():
    lst = LinkedList(1, 2, 3, 4)
    assert list(lst.head(2)) == [1, 2]
    assert list(lst.tail(2)) == [3, 4]
    assert lst.head(0).is_nil()
    assert list(lst.head()) == [1]
    assert list(lst.tail()) == [2, 3, 4]
    with pytest.raises(IndexError):
        lst.head(5)
    with pytest.raises(IndexError):
        lst.tail(5)


def test_head_plus_tail_round_trip():
    lst = LinkedList(*range(7))
    for n in range(8):
        assert lst.head(n) + lst.tail(n) == lst


def test_last_item_and_suppress_last():
    lst = LinkedList(1, 2, 3)
    assert lst.last_item() == 3
    lst.suppress_last()
    assert list(lst) == [1, 2]
    lst.suppress_last().suppress_last()
    assert lst.is_nil()
    with pytest.raises(IndexError):
        lst.suppress_last()
    with pytest.raises(IndexError):
        lst.last_item()


def test_reversed():
    lst = LinkedList(1, 2, 3)
    assert list(lst.reversed()) == [3, 2, 1]
    assert lst.reversed().reversed() == lst


def test_remove():
    lst = LinkedList(1, 2, 1, 3)
    assert list(lst.remove(1)) == [2, 3]
    assert list(lst) == [1, 2, 1, 3]


def test_copy_is_independent():
    lst = LinkedList(1, 2)
    dup = lst.copy()
    dup.append(3)
    assert list(lst) == [1, 2]
    assert list(dup) == [1, 2, 3]


def test_unhashable():
    with pytest.raises(TypeError):
        hash(LinkedList(1))