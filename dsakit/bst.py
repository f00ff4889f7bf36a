"""Binary tree nodes, traversals, and binary-search-tree lookup and deletion."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import pairwise
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    data: Any
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree first, then the node, then the right subtree."""
    if root is not None:
        yield from inorder(root.left)
        yield root.data
        yield from inorder(root.right)


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values node first, then the left subtree, then the right subtree."""
    if root is not None:
        yield root.data
        yield from preorder(root.left)
        yield from preorder(root.right)


def postorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield values left subtree first, then the right subtree, then the node."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.data


def is_bst(root: TreeNode | None) -> bool:
    """Return True if the in-order values never decrease."""
    return all(a <= b for a, b in pairwise(inorder(root)))


def find(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Return the node holding ``key`` in a search tree, or None (recursive)."""
    if root is None:
        return None
    if key > root.data:
        return find(root.right, key)
    if key < root.data:
        return find(root.left, key)
    return root


def find_iterative(root: TreeNode | None, key: Any) -> TreeNode | None:
    """Return the node holding ``key`` in a search tree, or None (iterative)."""
    node = root
    while node is not None and node.data != key:
        node = node.right if node.data < key else node.left
    return node


def in_order_predecessor(root: TreeNode | None) -> TreeNode | None:
    """Return the rightmost node of ``root``'s left subtree, or None if there is none."""
    if root is None or root.left is None:
        return None
    node = root.left
    while node.right is not None:
        node = node.right
    return node


def delete(root: TreeNode | None, value: Any) -> TreeNode | None:
    """Remove one node holding ``value`` from a search tree; return the new root.

    A node with a left subtree takes its in-order predecessor's value, and
    the predecessor is removed instead. A tree without ``value`` is unchanged.
    """
    if root is None:
        return None
    if root.data < value:
        root.right = delete(root.right, value)
    elif root.data > value:
        root.left = delete(root.left, value)
    else:
        predecessor = in_order_predecessor(root)
        if predecessor is None:
            return root.right
        root.data = predecessor.data
        root.left = delete(root.left, predecessor.data)
    return root