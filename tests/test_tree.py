import pytest

from edakit.tree import Tree, TreeNode


@pytest.fixture
def sample_tree():
    tree = Tree()
    tree.set_root(TreeNode(10))
    tree.insert(5, 10)
    tree.insert(6, 5)
    tree.insert(7, 10)
    tree.insert(17, 7)
    tree.insert(71, 7)
    tree.insert(41, 7)
    return tree


def test_traverse_lists_newest_children_first(sample_tree):
    expected = (
        "--10 at level 1\n"
        "----7 at level 2\n"
        "------41 at level 3\n"
        "------71 at level 3\n"
        "------17 at level 3\n"
        "----5 at level 2\n"
        "------6 at level 3\n"
    )
    assert sample_tree.traverse() == expected


def test_children_of_root(sample_tree):
    node = sample_tree.find(10)
    assert [child.value for child in node.children] == [7, 5]


def test_find_deep_node_and_parent(sample_tree):
    node = sample_tree.find(71)
    assert node.value == 71
    assert node.parent is sample_tree.find(7)


def test_find_missing_returns_none(sample_tree):
    assert sample_tree.find(99) is None


def test_insert_under_missing_parent_does_nothing(sample_tree):
    before = sample_tree.traverse()
    assert sample_tree.insert(3, 1000) is None
    assert sample_tree.traverse() == before


def test_insert_returns_new_node(sample_tree):
    node = sample_tree.insert(8, 6)
    assert node is sample_tree.find(8)
    assert sample_tree.find(6).children == [node]


def test_set_root_keeps_first_root():
    tree = Tree()
    first = TreeNode(1)
    tree.set_root(first)
    tree.set_root(TreeNode(2))
    assert tree.root is first
    assert tree.traverse() == "--1 at level 1\n"


def test_empty_tree():
    tree = Tree()
    assert tree.traverse() == ""
    assert tree.find(1) is None
    assert tree.insert(1, 1) is None


def test_remove_child_drops_all_matches():
    node = TreeNode(0)
    for value in (1, 2, 1, 3):
        node.add_child(TreeNode(value))
    node.remove_child(1)
    assert [child.value for child in node.children] == [3, 2]


def test_find_child():
    node = TreeNode(0)
    child = TreeNode(4)
    node.add_child(child)
    assert node.find_child(4) is child
    with pytest.raises(KeyError):
        node.find_child(5)