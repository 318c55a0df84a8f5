import pytest

from lollykit.hashtree import HashTree


def _insert(root, word, value):
    node = root
    for ch in word:
        node = node.ensure(ch)
    node.label = value


def _lookup(root, word):
    node = root
    for ch in word:
        node = node[ch]
    return node.label


@pytest.fixture
def dictionary():
    root = HashTree()
    for word, value in [
        ("he", "er"),
        ("head", "Kopf"),
        ("heaven", "Himmel"),
        ("hell", "Hoelle"),
        ("hello", "hallo"),
    ]:
        _insert(root, word, value)
    return root


@pytest.mark.parametrize(
    "word, value",
    [("he", "er"), ("head", "Kopf"), ("heaven", "Himmel"),
     ("hell", "Hoelle"), ("hello", "hallo")],
)
def test_lookup_words(dictionary, word, value):
    assert _lookup(dictionary, word) == value


def test_intermediate_nodes_have_no_label(dictionary):
    assert _lookup(dictionary, "h") is None
    assert _lookup(dictionary, "hea") is None


def test_branching_counts(dictionary):
    assert len(dictionary) == 1
    assert len(dictionary["h"]["e"]) == 2
    assert len(dictionary["h"]["e"]["a"]) == 2


def test_missing_child_raises(dictionary):
    with pytest.raises(KeyError):
        dictionary["x"]
    with pytest.raises(KeyError):
        _lookup(dictionary, "hex")
    assert dictionary.contains("x") is False
    assert dictionary["h"]["e"].contains("x") is False
    assert len(dictionary) == 1


def test_ensure_creates_once():
    root = HashTree()
    child = root.ensure("a")
    assert root.contains("a")
    assert root.ensure("a") is child
    assert len(root) == 1
    assert child.label is None


def test_add_child_replaces():
    root = HashTree()
    root.add_child("k", HashTree(1))
    root.add_child("k", HashTree(2))
    assert root["k"].label == 2
    assert len(root) == 1


def test_add_new_child_is_empty():
    root = HashTree("root")
    root.add_new_child("k")
    assert root.label == "root"
    assert len(root["k"]) == 0
    assert root["k"].label is None


def test_contains_false_for_fresh_node():
    assert HashTree().contains("a") is False
    assert len(HashTree()) == 0