"""Binary trees: nodes, traversals, depth and a binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values root first, then left subtree, then right subtree."""
    if root is None:
        return
    yield root.data
    yield from preorder(root.left)
    yield from preorder(root.right)


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values of the left subtree, the root, then the right subtree."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.data
    yield from inorder(root.right)


def postorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values of both subtrees before the root."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.data


def max_depth(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


class BinarySearchTree:
    """A binary search tree that ignores duplicate keys."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless it is already present."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            elif value > node.data:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            else:
                return

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key == node.data:
                return True
            node = node.left if key < node.data else node.right
        return False

    def __iter__(self) -> Iterator[Any]:
        return inorder(self.root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"