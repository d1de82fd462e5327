"""In-place conversion of a binary tree into a doubly linked list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """Binary tree node; after conversion ``left``/``right`` act as prev/next."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _convert(root: TreeNode) -> TreeNode:
    if root.left is not None:
        predecessor = _convert(root.left)
        while predecessor.right is not None:
            predecessor = predecessor.right
        predecessor.right = root
        root.left = predecessor
    if root.right is not None:
        successor = _convert(root.right)
        while successor.left is not None:
            successor = successor.left
        successor.left = root
        root.right = successor
    return root


def tree_to_list(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Relink the tree in place into an in-order doubly linked list.

    Returns the head of the list, or ``None`` for an empty tree.
    """
    if root is None:
        return None
    head = _convert(root)
    while head.left is not None:
        head = head.left
    return head


def iter_list(head: Optional[TreeNode]) -> Iterator[Any]:
    """Yield values from ``head`` following ``right`` links."""
    node = head
    while node is not None:
        yield node.data
        node = node.right