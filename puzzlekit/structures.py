"""Linked-list and binary-tree nodes with puzzles over them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: ListNode | None = None


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by absorbing its successor.

    The node must not be the tail.
    """
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the tail node")
    node.val = successor.val
    node.next = successor.next


def smallest_from_leaf(root: TreeNode | None) -> str:
    """Lexicographically smallest leaf-to-root string, values mapped 0 -> 'a'."""
    best = ""
    stack = [(root, "")] if root is not None else []
    while stack:
        node, suffix = stack.pop()
        current = chr(node.val + ord("a")) + suffix
        children = [child for child in (node.left, node.right) if child is not None]
        if not children and (not best or current < best):
            best = current
        stack.extend((child, current) for child in children)
    return best