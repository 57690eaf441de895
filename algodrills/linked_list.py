"""Singly linked lists of integers and a few classic operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list. Nodes compare by identity."""

    val: int
    next: Optional["ListNode"] = None

    def __iter__(self):
        """Yield the nodes from this one to the end of the list."""
        node: Optional[ListNode] = self
        seen: set[int] = set()
        while node is not None:
            if id(node) in seen:
                raise ValueError("the list contains a cycle")
            seen.add(id(node))
            yield node
            node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a list holding ``values`` in order; an empty input gives ``None``."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list in order. Raises ValueError on a cycle."""
    if head is None:
        return []
    return [node.val for node in head]


def add_two_numbers(
    first: Optional[ListNode], second: Optional[ListNode]
) -> Optional[ListNode]:
    """Add two numbers stored as lists of digits, least significant first."""

    def digits():
        a, b = first, second
        carry = 0
        while a is not None or b is not None:
            total = carry
            if a is not None:
                total += a.val
                a = a.next
            if b is not None:
                total += b.val
                b = b.next
            carry = 0
            if total > 9:
                total -= 10
                carry = 1
            yield total
        if carry:
            yield 1

    return from_values(digits())


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether following ``next`` from ``head`` ever revisits a node."""
    visited: set[int] = set()
    node = head
    while node is not None:
        if id(node) in visited:
            return True
        visited.add(id(node))
        node = node.next
    return False


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, previous, current = previous, current, current.next
    return previous