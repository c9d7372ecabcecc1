"""Singly linked lists and cycle detection."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int
    next: Optional[ListNode] = None


def build_list(values: Sequence[int], pos: int = -1) -> Optional[ListNode]:
    """Build a list from values; the tail links back to index pos unless pos is -1."""
    if pos < -1 or pos >= len(values):
        if not (pos == -1 and not values):
            raise ValueError(f"cycle position {pos} out of range for {len(values)} nodes")
    nodes = [ListNode(value) for value in values]
    if not nodes:
        return None
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    if pos != -1:
        nodes[-1].next = nodes[pos]
    return nodes[0]


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Node where the cycle begins, or None if the list ends."""
    slow = fast = head
    while True:
        if fast is None or fast.next is None:
            return None
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            break
    fast = head
    while fast is not slow:
        fast = fast.next
        slow = slow.next
    return fast