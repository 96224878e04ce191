import pytest

from bstree.tree import Node


@pytest.fixture
def sample():
    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    return root


def _collect(node):
    if node is None:
        return []
    return [node.value] + _collect(node.left) + _collect(node.right)


def test_add_children_sets_parent(sample):
    assert sample.left.parent is sample
    assert sample.right.parent is sample
    assert sample.left.value == 3
    assert sample.right.value == 7


def test_add_child_replaces_existing():
    root = Node(1)
    root.add_left_child(2)
    root.add_left_child(9)
    assert root.left.value == 9
    assert root.count_nodes() == len(_collect(root))


def test_count_nodes_matches_collected(sample):
    assert sample.count_nodes() == len(_collect(sample))
    assert sample.count_nodes() == 1 + sample.left.count_nodes() + sample.right.count_nodes()


def test_leaf_count_and_depth():
    leaf = Node(42)
    assert leaf.count_nodes() == 1
    assert leaf.depth() == 0


def test_chain_depth_and_count():
    values = [1, 2, 3, 4, 5]
    root = Node(values[0])
    node = root
    for value in values[1:]:
        node = node.add_right_child(value)
    assert root.depth() == len(values) - 1
    assert root.count_nodes() == len(values)


def test_depth_is_one_more_than_deepest_child(sample):
    assert sample.depth() == 1 + max(sample.left.depth(), sample.right.depth())


def test_sibling(sample):
    assert sample.left.sibling() is sample.right
    assert sample.right.sibling() is sample.left
    assert sample.sibling() is None


def test_sibling_missing_right():
    root = Node(1)
    only = root.add_left_child(0)
    assert only.sibling() is None


def test_copy_shares_links(sample):
    duplicate = sample.copy()
    assert duplicate is not sample
    assert duplicate.value == sample.value
    assert duplicate.left is sample.left
    assert duplicate.right is sample.right


def test_find_by_value(sample):
    found = sample.find_by_value(3)
    assert found.value == 3
    assert found.left is sample.left.left
    assert found is not sample.left
    assert sample.find_by_value(5).value == 5
    assert sample.find_by_value(2).value == 2


def test_find_by_value_follows_left_path(sample):
    assert sample.find_by_value(7) is None
    assert sample.find_by_value(99) is None


def test_find_by_full_property(sample):
    found = sample.find_by_full_property(sample.left)
    assert found.value == 3
    assert found.parent is sample


def test_find_by_full_property_mismatch(sample):
    impostor = Node(3)
    assert sample.find_by_full_property(impostor) is None


def test_discard_by_value_on_copy(sample):
    original_left = sample.left
    duplicate = sample.copy()
    assert duplicate.discard_by_value(3) is True
    assert duplicate.left is None
    assert original_left.parent is None
    assert sample.left is original_left
    assert duplicate.count_nodes() == 1 + sample.right.count_nodes()
    assert duplicate.depth() == 1 + sample.right.depth()


def test_discard_missing_value_cuts_path():
    root = Node(5)
    root.add_left_child(3)
    assert root.discard_by_value(99) is False
    assert root.left is None
    assert root.count_nodes() == 1


def test_discard_root_value():
    root = Node(5)
    child = root.add_left_child(3)
    assert root.discard_by_value(5) is True
    assert root.left is child