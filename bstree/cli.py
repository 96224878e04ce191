"""Command that builds example trees, queries them and writes dot files."""

from __future__ import annotations

import argparse
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from bstree.bst import BstNode, tree_delete, tree_insert
from bstree.dot import write_bst_dot, write_tree_dot
from bstree.tree import Node

_INSERT_KEYS = (6, 18, 3, 7, 17, 20, 2, 4, 13, 9)
_SEARCH_KEYS = (15, 9, 22)
_SUCCESSOR_KEYS = (2, 20, 15, 13, 9, 7, 22)


def _build_search_tree() -> BstNode:
    root = BstNode(15)
    left = root.add_left_child(6)
    right = root.add_right_child(18)
    right.add_left_child(17)
    right.add_right_child(20)
    three = left.add_left_child(3)
    seven = left.add_right_child(7)
    three.add_left_child(2)
    three.add_right_child(4)
    thirteen = seven.add_right_child(13)
    thirteen.add_left_child(9)
    return root


def demo_binary_search_tree(output_dir: Union[str, PathLike] = ".") -> list[Path]:
    """Run the search tree demonstration and return the dot files written."""
    out = Path(output_dir)
    written: list[Path] = []

    root = _build_search_tree()
    graph_path = out / "bst_graph.dot"
    write_bst_dot(root, graph_path)
    written.append(graph_path)

    for key in _SEARCH_KEYS:
        found = root.search(key)
        result = f"found -> {found.key}" if found is not None else "not found"
        print(f"tree search result of key {key} is {result}")

    print(f"minimum result {root.minimum().key}")
    maximum = root.maximum()
    print(f"maximum result {maximum.key}")
    print(f"root node {maximum.root().key}")

    for key in _SUCCESSOR_KEYS:
        node = root.search(key)
        if node is None:
            print(f"node with key of {key} does not exist, failed to get successor")
            continue
        successor = node.successor_simpler()
        shown = successor.key if successor is not None else "not found"
        print(f"successor of node ({key}) is {shown}")

    inserted: Optional[BstNode] = tree_insert(None, 15)
    for key in _INSERT_KEYS:
        inserted = tree_insert(inserted, key)
    insert_path = out / "bst.dot"
    write_bst_dot(inserted, insert_path)
    written.append(insert_path)

    replacement = tree_delete(inserted)
    if replacement is not None:
        delete_path = out / "bst_delete_root.dot"
        write_bst_dot(replacement, delete_path)
        written.append(delete_path)

    return written


def demo_binary_tree(output_dir: Union[str, PathLike] = ".") -> list[Path]:
    """Run the plain binary tree demonstration and return the dot files written."""
    out = Path(output_dir)
    written: list[Path] = []

    def dump(tree: Node, name: str) -> None:
        path = out / name
        write_tree_dot(tree, path)
        written.append(path)

    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    dump(root, "prime.dot")

    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    dump(root, "prime_t2.dot")

    print(f"Current tree depth: {root.depth()}")
    print(f"Amount of nodes in current tree: {root.count_nodes()}")
    print(f"Amount of nodes in current subtree: {right.count_nodes()}")

    left.sibling()

    by_value = root.find_by_value(3)
    print(f"left subtree seek by value {by_value!r}")
    by_property = root.find_by_full_property(by_value) if by_value is not None else None
    print(f"left subtree seek by full property {by_property!r}")

    trimmed = root.copy()
    flag = trimmed.discard_by_value(3)
    print(f"status of node deletion: {flag}")
    dump(trimmed, "prime_t3.dot")

    print(f"Depth after discard {trimmed.depth()}")
    print(f"Count nodes after discard {trimmed.count_nodes()}")
    dump(root, "prime_t4.dot")

    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point of the command."""
    parser = argparse.ArgumentParser(
        prog="bstree",
        description="Build example trees, query them and write Graphviz files.",
    )
    parser.add_argument(
        "-o", "--output-dir", default=".", help="directory for the dot files (default: .)"
    )
    parser.add_argument(
        "--binary-tree",
        action="store_true",
        help="also run the plain binary tree demonstration",
    )
    args = parser.parse_args(argv)

    out = Path(args.output_dir)
    out.mkdir(parents=True, exist_ok=True)
    if args.binary_tree:
        demo_binary_tree(out)
    demo_binary_search_tree(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())