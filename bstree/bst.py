"""Binary search tree nodes with parent links, insertion, search and deletion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class BstNode:
    """A binary search tree node keyed by an integer."""

    key: int
    parent: Optional["BstNode"] = field(default=None, repr=False)
    left: Optional["BstNode"] = None
    right: Optional["BstNode"] = None

    def add_left_child(self, key: int) -> "BstNode":
        """Attach a new left child with ``key``, replacing any existing one."""
        child = BstNode(key, parent=self)
        self.left = child
        return child

    def add_right_child(self, key: int) -> "BstNode":
        """Attach a new right child with ``key``, replacing any existing one."""
        child = BstNode(key, parent=self)
        self.right = child
        return child

    def copy(self) -> "BstNode":
        """Return a new node sharing this node's key, parent and children."""
        return BstNode(self.key, parent=self.parent, left=self.left, right=self.right)

    def search(self, value: int) -> Optional["BstNode"]:
        """Return a copy of the node holding ``value``, or None.

        The search goes left when ``value`` is smaller than the current key
        and a left child exists; otherwise it continues to the right.
        """
        node: Optional[BstNode] = self
        while node is not None:
            if node.key == value:
                return node.copy()
            if value < node.key and node.left is not None:
                node = node.left
            else:
                node = node.right
        return None

    def _leftmost(self) -> "BstNode":
        node = self
        while node.left is not None:
            node = node.left
        return node

    def _rightmost(self) -> "BstNode":
        node = self
        while node.right is not None:
            node = node.right
        return node

    def minimum(self) -> "BstNode":
        """Return a copy of the node with the smallest key in this subtree."""
        return self._leftmost().copy()

    def maximum(self) -> "BstNode":
        """Return a copy of the node with the largest key in this subtree."""
        return self._rightmost().copy()

    def root(self) -> "BstNode":
        """Return the topmost ancestor, or this node if it has no parent."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def successor(self) -> Optional["BstNode"]:
        """Return the node with the next larger key, or None for the largest."""
        if self.right is not None:
            return self.right.minimum()
        child: BstNode = self
        ancestor = self.parent
        while ancestor is not None:
            if ancestor.left is not None and ancestor.left.key == child.key:
                return ancestor
            child, ancestor = ancestor, ancestor.parent
        return None

    def successor_simpler(self) -> Optional["BstNode"]:
        """Successor lookup through a shortcut walk.

        The right subtree is used only when the right child has a parent and
        two children. Otherwise the walk climbs while the ancestor lacks a
        link and the node matches the first parent's right child, and gives
        None when it ends at the root or runs out of ancestors.
        """
        right = self.right
        if not _is_nil(right):
            return right.minimum()
        current: BstNode = self
        ancestor = current.parent
        first_right = ancestor.right if ancestor is not None else None
        while (
            ancestor is not None
            and _is_nil(ancestor)
            and first_right is not None
            and first_right.key == current.key
        ):
            current, ancestor = ancestor, ancestor.parent
        if ancestor is None or ancestor.key == current.root().key:
            return None
        return ancestor


def _is_nil(node: Optional[BstNode]) -> bool:
    """True for a missing node or one lacking a parent or either child."""
    if node is None:
        return True
    return node.parent is None or node.left is None or node.right is None


def tree_insert(node: Optional[BstNode], key: int) -> BstNode:
    """Insert ``key`` below ``node`` and return the root of the tree.

    Keys not larger than a node's key go to its left. With no ``node`` a new
    single-node tree is returned.
    """
    if node is None:
        return BstNode(key)
    current = node
    while True:
        if current.key < key:
            if current.right is None:
                current.add_right_child(key)
                break
            current = current.right
        else:
            if current.left is None:
                current.add_left_child(key)
                break
            current = current.left
    return node.root()


def _transplant(old: BstNode, new: Optional[BstNode]) -> None:
    """Put ``new`` where ``old`` hangs from its parent."""
    parent = old.parent
    if parent is not None:
        if parent.left is not None and parent.left.key == old.key:
            parent.left = new
        else:
            parent.right = new
    if new is not None:
        new.parent = parent


def tree_delete(node: BstNode) -> Optional[BstNode]:
    """Remove ``node`` from its tree.

    Returns the node that took its place, which is the new root when the
    root was removed, or None when a leaf was removed.
    """
    if node.right is None:
        replacement = node.left
        _transplant(node, replacement)
        return replacement
    if node.left is None:
        replacement = node.right
        _transplant(node, replacement)
        return replacement

    successor = node.right._leftmost()
    if successor.parent is not None and successor.parent.key != node.key:
        _transplant(successor, successor.right)
        successor.right = node.right
        successor.right.parent = successor
    _transplant(node, successor)
    successor.left = node.left
    successor.left.parent = successor
    return successor