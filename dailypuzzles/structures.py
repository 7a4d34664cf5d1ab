"""Node types for binary trees and singly linked lists, with builders."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


@dataclass
class ListNode:
    """A singly linked list node."""

    val: int = 0
    next: ListNode | None = None


def build_tree(values: Iterable[int | None]) -> TreeNode | None:
    """Build a tree from level-order values, where None marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        for side in ("left", "right"):
            try:
                value = next(items)
            except StopIteration:
                return root
            if value is not None:
                child = TreeNode(value)
                setattr(node, side, child)
                queue.append(child)
    return root


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding the given values in order."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values