from pathlib import Path

import pytest

from bstree.bst import BstNode, tree_insert
from bstree.dot import render_bst, render_tree, write_bst_dot, write_tree_dot
from bstree.tree import Node


@pytest.fixture
def plain_tree() -> Node:
    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    return root


@pytest.fixture
def search_tree() -> BstNode:
    root = None
    for key in (15, 6, 18, 3, 7):
        root = tree_insert(root, key)
    return root


def test_single_node_tree_has_no_edges():
    assert render_tree(Node(1)) == "graph tree{\n}"
    assert render_bst(BstNode(1)) == "graph tree{\n}"


def test_render_tree_order(plain_tree):
    expected = (
        "graph tree{\n"
        "\t5--3;\n"
        "\t5--7;\n"
        "\t3--2;\n"
        "\t3--4;\n"
        "\t7--10;\n"
        "}"
    )
    assert render_tree(plain_tree) == expected


def test_render_bst_order(search_tree):
    expected = (
        "graph tree{\n"
        "\t15--6;\n"
        "\t15--18;\n"
        "\t6--3;\n"
        "\t6--7;\n"
        "}"
    )
    assert render_bst(search_tree) == expected


def test_edge_count_matches_node_count(plain_tree):
    text = render_tree(plain_tree)
    edges = [line for line in text.splitlines() if "--" in line]
    assert len(edges) == plain_tree.count_nodes() - 1


def test_only_right_child_is_rendered():
    root = BstNode(1)
    root.add_right_child(2)
    assert render_bst(root) == "graph tree{\n\t1--2;\n}"


def test_write_tree_dot_round_trip(tmp_path: Path, plain_tree):
    target = tmp_path / "tree.dot"
    write_tree_dot(plain_tree, target)
    assert target.read_text(encoding="utf-8") == render_tree(plain_tree)


def test_write_bst_dot_round_trip(tmp_path: Path, search_tree):
    target = tmp_path / "bst.dot"
    write_bst_dot(search_tree, str(target))
    assert target.read_text(encoding="utf-8") == render_bst(search_tree)


def test_write_into_missing_directory_fails(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        write_bst_dot(BstNode(1), tmp_path / "missing" / "bst.dot")