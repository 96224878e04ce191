"""Linked binary trees and binary search trees with Graphviz dot output."""

__version__ = "0.1.0"
__all__ = ["tree", "bst", "dot", "cli"]