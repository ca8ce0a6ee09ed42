"""Singly linked list drills: cycle detection, middle node, palindromes, intersection."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: int
    next: Optional["ListNode"] = None

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def _iter_nodes(head: Optional[ListNode]) -> Iterator[ListNode]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _copy(head: Optional[ListNode]) -> Optional[ListNode]:
    return build_list(node.val for node in _iter_nodes(head))


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order and return its head."""
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
    """Return the values of an acyclic linked list as a Python list."""
    return [node.val for node in _iter_nodes(head)]


def linked_list_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list starting at ``head`` contains a cycle."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def middle_linkedlist(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the middle node; for even lengths the second of the two middles."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev: Optional[ListNode] = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def palindrome_linked_list(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same both ways, using fast and slow pointers."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    second_half = reverse_list(_copy(slow))
    return all(
        first.val == second.val
        for first, second in zip(_iter_nodes(head), _iter_nodes(second_half))
    )


def palindrome_linked_list_best(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same both ways, using its length."""
    length = sum(1 for _ in _iter_nodes(head))
    if length <= 1:
        return True
    mid = length // 2
    current = head
    for _ in range(mid):
        current = current.next
    second_half = reverse_list(_copy(current))
    pairs = zip(_iter_nodes(head), _iter_nodes(second_half))
    return all(first.val == second.val for first, second in list(pairs)[:mid])


def intersection(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or None if they never meet."""
    if head_a is None or head_b is None:
        return None
    a, b = head_a, head_b
    while a is not b:
        a = a.next if a is not None else head_b
        b = b.next if b is not None else head_a
    return a