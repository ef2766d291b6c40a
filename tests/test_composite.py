import pytest

from patternkit.composite import Component, File, Folder


@pytest.fixture
def tree():
    root = Folder("ROOT")
    fo1 = Folder("A")
    fo2 = Folder("B")
    root.add(fo1)
    root.add(fo2)
    f1 = File("a.txt", 10)
    f2 = File("b.txt", 20)
    fo1.add(f1)
    root.add(f2)
    return root, fo1, fo2, f1, f2


def test_sizes_from_example(tree):
    root, fo1, _, _, f2 = tree
    assert f2.size() == 20
    assert fo1.size() == 10
    assert root.size() == 30


def test_empty_folder_has_zero_size(tree):
    _, _, fo2, _, _ = tree
    assert fo2.size() == 0


def test_folder_size_is_sum_of_children(tree):
    root, *_ = tree
    assert root.size() == sum(child.size() for child in root.children)


def test_names_kept(tree):
    root, fo1, _, f1, _ = tree
    assert (root.name, fo1.name, f1.name) == ("ROOT", "A", "a.txt")


def test_nested_folder_updates():
    outer = Folder("outer")
    inner = Folder("inner")
    outer.add(inner)
    inner.add(File("x", 7))
    assert outer.size() == inner.size() == 7


def test_component_is_abstract():
    with pytest.raises(TypeError):
        Component("x")