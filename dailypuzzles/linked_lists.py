"""Singly linked list puzzles."""

from __future__ import annotations

from collections.abc import Iterator

from dailypuzzles.structures import ListNode, list_values


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def swap_nodes(head: ListNode | None, k: int) -> ListNode | None:
    """Swap the values of the k-th node from the start and from the end."""
    nodes = list(_nodes(head))
    if not 1 <= k <= len(nodes):
        raise IndexError("k is outside the list")
    front, back = nodes[k - 1], nodes[-k]
    front.val, back.val = back.val, front.val
    return head


def swap_pairs(head: ListNode | None) -> ListNode | None:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(0, head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def pair_sum(head: ListNode | None) -> int:
    """Return the largest sum of a node and its twin from the other end."""
    values = list_values(head)
    half = len(values) // 2
    if not half:
        raise ValueError("need at least two nodes")
    return max(values[i] + values[-1 - i] for i in range(half))