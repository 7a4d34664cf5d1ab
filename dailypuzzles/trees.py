"""Binary tree puzzles."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import pairwise

from dailypuzzles.structures import TreeNode


def _inorder(root: TreeNode | None) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def get_minimum_difference(root: TreeNode | None) -> int:
    """Return the smallest difference between values of a binary search tree."""
    values = list(_inorder(root))
    if len(values) < 2:
        raise ValueError("need at least two nodes")
    return min(b - a for a, b in pairwise(values))


def max_level_sum(root: TreeNode | None) -> int:
    """Return the first 1-based level whose values have the largest sum."""
    if root is None:
        return 0
    best_level = 1
    best_sum: int | None = None
    level = [root]
    depth = 1
    while level:
        total = sum(node.val for node in level)
        if best_sum is None or total > best_sum:
            best_sum = total
            best_level = depth
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
        depth += 1
    return best_level


def longest_zigzag(root: TreeNode | None) -> int:
    """Return the number of edges in the longest zigzag path of the tree."""
    best = 0
    stack = [(root, True, 0), (root, False, 0)] if root is not None else []
    while stack:
        node, go_left, length = stack.pop()
        best = max(best, length)
        if go_left:
            moves = ((node.left, False, length + 1), (node.right, True, 1))
        else:
            moves = ((node.right, True, length + 1), (node.left, False, 1))
        stack.extend(move for move in moves if move[0] is not None)
    return best


def width_of_binary_tree(root: TreeNode | None) -> int:
    """Return the widest level, counting gaps between its end nodes."""
    if root is None:
        return 0
    best = 1
    level = [(root, 0)]
    while level:
        base = level[0][1]
        best = max(best, level[-1][1] - base + 1)
        following = []
        for node, pos in level:
            offset = pos - base
            if node.left is not None:
                following.append((node.left, 2 * offset + 1))
            if node.right is not None:
                following.append((node.right, 2 * offset + 2))
        level = following
    return best