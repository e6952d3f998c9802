"""Singly linked list nodes and operations on them."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: ListNode | None = None


def build_list(values: Iterable[Any]) -> ListNode | None:
    """Build a linked list holding ``values`` in order and return its head."""
    head: ListNode | None = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: ListNode | None) -> list[Any]:
    """Return the values of an acyclic linked list in order."""
    values = []
    while head is not None:
        values.append(head.val)
        head = head.next
    return values


def has_cycle(head: ListNode | None) -> bool:
    """Return whether following ``next`` from ``head`` ever loops."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_two_lists(list1: ListNode | None, list2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list and return its head."""
    dummy = ListNode()
    tail = dummy
    first, second = list1, list2
    while first is not None and second is not None:
        if first.val <= second.val:
            tail.next = first
            tail = first
            first = first.next
        else:
            tail.next = second
            tail = second
            first, second = second.next, first
    tail.next = first if first is not None else second
    return dummy.next


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse a linked list in place and return the new head."""
    previous = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous