"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list holding ``values`` in order; empty input gives None."""
        head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def _nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list, taking ``list1`` first on ties."""
    dummy = ListNode(-1)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink repeated values from a sorted list in place and return its head."""
    current = head
    while current is not None and current.next is not None:
        if current.val == current.next.val:
            current.next = current.next.next
        else:
            current = current.next
    return head


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops back."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None if they never meet."""
    a, b = head_a, head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a