"""Graphviz output for binary trees."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from os import PathLike
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from bstree.bst import BstNode
from bstree.tree import Node

_GRAPH_HEADER = "graph tree{\n"
_GRAPH_FOOTER = "}"

T = TypeVar("T", Node, BstNode)


def _edges(node: T, label: Callable[[T], Any]) -> Iterator[str]:
    """Yield one edge line per child, then descend left before right."""
    children: list[Optional[T]] = [node.left, node.right]
    for child in children:
        if child is not None:
            yield f"\t{label(node)}--{label(child)};\n"
    for child in children:
        if child is not None:
            yield from _edges(child, label)


def _render(root: T, label: Callable[[T], Any]) -> str:
    return _GRAPH_HEADER + "".join(_edges(root, label)) + _GRAPH_FOOTER


def render_tree(root: Node) -> str:
    """Return the dot text of a plain binary tree, labelled by node values."""
    return _render(root, lambda node: node.value)


def render_bst(root: BstNode) -> str:
    """Return the dot text of a binary search tree, labelled by node keys."""
    return _render(root, lambda node: node.key)


def write_tree_dot(root: Node, path: Union[str, PathLike]) -> None:
    """Write the dot text of a plain binary tree to ``path``."""
    Path(path).write_text(render_tree(root), encoding="utf-8")


def write_bst_dot(root: BstNode, path: Union[str, PathLike]) -> None:
    """Write the dot text of a binary search tree to ``path``."""
    Path(path).write_text(render_bst(root), encoding="utf-8")