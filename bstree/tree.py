"""A plain binary tree whose nodes keep a link back to their parent."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


def _same_value(a: Optional["Node"], b: Optional["Node"]) -> bool:
    """True when both nodes are missing, or both exist with equal values."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.value == b.value


@dataclass(eq=False)
class Node:
    """A binary tree node holding an integer value."""

    value: int
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = None
    right: Optional["Node"] = None

    def add_left_child(self, value: int) -> "Node":
        """Attach a new left child with ``value``, replacing any existing one."""
        child = Node(value, parent=self)
        self.left = child
        return child

    def add_right_child(self, value: int) -> "Node":
        """Attach a new right child with ``value``, replacing any existing one."""
        child = Node(value, parent=self)
        self.right = child
        return child

    def copy(self) -> "Node":
        """Return a new node sharing this node's value, parent and children."""
        return Node(self.value, parent=self.parent, left=self.left, right=self.right)

    def find_by_value(self, value: int) -> Optional["Node"]:
        """Return a copy of the node holding ``value``.

        The search descends into the left child whenever one exists and only
        falls back to the right child when there is no left child.
        """
        node: Optional[Node] = self
        while node is not None:
            if node.value == value:
                return node.copy()
            node = node.left if node.left is not None else node.right
        return None

    def _matches(self, other: "Node") -> bool:
        return (
            self.value == other.value
            and _same_value(other.parent, self.parent)
            and _same_value(other.left, self.left)
            and _same_value(other.right, self.right)
        )

    def find_by_full_property(self, node: "Node") -> Optional["Node"]:
        """Return a copy of the node whose value, parent and children match ``node``.

        Parents and children are compared by value. The search follows the
        same path as :meth:`find_by_value`.
        """
        current: Optional[Node] = self
        while current is not None:
            if current._matches(node):
                return current.copy()
            current = current.left if current.left is not None else current.right
        return None

    def discard_by_value(self, value: int) -> bool:
        """Detach the subtree rooted at the node holding ``value``.

        The matching node loses its parent link, and every node on the way
        down loses the child link it was followed through. Returns whether a
        matching node was reached.
        """
        if self.value == value:
            self.parent = None
            return True
        if self.left is not None:
            found = self.left.discard_by_value(value)
            self.left = None
            return found
        if self.right is not None:
            found = self.right.discard_by_value(value)
            self.right = None
            return found
        return False

    def count_nodes(self) -> int:
        """Number of nodes in the subtree rooted here, this node included."""
        return 1 + sum(child.count_nodes() for child in (self.left, self.right) if child is not None)

    def depth(self) -> int:
        """Length of the longest downward path in edges; a leaf has depth 0."""
        return max(
            (child.depth() + 1 for child in (self.left, self.right) if child is not None),
            default=0,
        )

    def sibling(self) -> Optional["Node"]:
        """The other child of this node's parent, or None for a root."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is not None and parent.left.value == self.value:
            return parent.right
        return parent.left