"""Whole-list transformations of singly linked lists."""

from __future__ import annotations

from algokit.linked_list import Node


def add_two_numbers(l1: Node | None, l2: Node | None) -> Node | None:
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = Node(-1)
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.data
            l1 = l1.next
        if l2 is not None:
            total += l2.data
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = Node(digit)
        tail = tail.next
    return dummy.next


def delete_duplicates(head: Node | None) -> Node | None:
    """Drop repeated values from a sorted list, keeping one of each."""
    if head is None:
        return None
    prev = head
    node = head.next
    while node is not None:
        if node.data != prev.data:
            prev.next = node
            prev = node
        node = node.next
    prev.next = None
    return head


def delete_middle(head: Node | None) -> Node | None:
    """Remove the node at index ``length // 2`` and return the head."""
    if head is None or head.next is None:
        return None
    dummy = Node(0, head)
    slow: Node = dummy
    fast: Node | None = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next  # type: ignore[assignment]
    slow.next = slow.next.next  # type: ignore[union-attr]
    return dummy.next


def reverse_list(head: Node | None) -> Node | None:
    """Reverse the list in place and return the new head."""
    prev: Node | None = None
    node = head
    while node is not None:
        node.next, prev, node = prev, node, node.next
    return prev


def middle_node(head: Node | None) -> Node | None:
    """Return the middle node; the second of two middles for even lengths."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    return slow