"""Singly linked lists: construction, partitioning and cycle detection."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def from_values(values: Iterable[int]) -> ListNode | None:
    """Build a list holding ``values`` in order; return its head."""
    sentinel = ListNode()
    tail = sentinel
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return sentinel.next


def to_values(head: ListNode | None) -> list[int]:
    """Values of an acyclic list, head first."""
    if has_cycle(head):
        raise ValueError("list contains a cycle")
    values: list[int] = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def partition_list(head: ListNode | None, x: int) -> ListNode | None:
    """Relink so nodes below ``x`` come first, keeping relative order within each part."""
    small_head = ListNode()
    big_head = ListNode()
    small, big = small_head, big_head
    node = head
    while node is not None:
        if node.val < x:
            small.next = node
            small = node
        else:
            big.next = node
            big = node
        node = node.next
    big.next = None
    small.next = big_head.next
    return small_head.next


def has_cycle(head: ListNode | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False