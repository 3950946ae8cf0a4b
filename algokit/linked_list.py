"""Singly linked list nodes with building, searching, insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class Node:
    """One node of a singly linked list."""

    data: int
    next: Node | None = None

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: Node | None = self
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def _nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def from_list(values: Iterable[int]) -> Node | None:
    """Build a linked list holding ``values`` in order; None when empty."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Node | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return [] if head is None else list(head)


def length(head: Node | None) -> int:
    """Return the number of nodes in the list."""
    return sum(1 for _ in _nodes(head))


def contains(head: Node | None, value: int) -> bool:
    """Tell whether ``value`` occurs in the list."""
    return any(node.data == value for node in _nodes(head))


def insert_first(head: Node | None, value: int) -> Node:
    """Put ``value`` at the front and return the new head."""
    return Node(value, head)


def insert_last(head: Node | None, value: int) -> Node:
    """Append ``value`` at the end and return the head."""
    if head is None:
        return Node(value)
    tail = head
    while tail.next is not None:
        tail = tail.next
    tail.next = Node(value)
    return head


def insert_at(head: Node | None, value: int, k: int) -> Node | None:
    """Insert ``value`` so that it becomes the ``k``-th node (1-based).

    A position past one beyond the end leaves the list unchanged.
    """
    if k == 1:
        return Node(value, head)
    for position, node in enumerate(_nodes(head), start=1):
        if position == k - 1:
            node.next = Node(value, node.next)
            break
    return head


def insert_before(head: Node | None, element: int, value: int) -> Node | None:
    """Insert ``element`` before the first node holding ``value``.

    The list is unchanged when ``value`` is absent.
    """
    if head is None:
        return None
    if head.data == value:
        return Node(element, head)
    for node in _nodes(head):
        if node.next is not None and node.next.data == value:
            node.next = Node(element, node.next)
            break
    return head


def delete_first(head: Node | None) -> Node | None:
    """Remove the first node and return the new head."""
    return None if head is None else head.next


def delete_last(head: Node | None) -> Node | None:
    """Remove the last node and return the head (None once empty)."""
    if head is None or head.next is None:
        return None
    node = head
    while node.next is not None and node.next.next is not None:
        node = node.next
    node.next = None
    return head


def delete_at(head: Node | None, k: int) -> Node | None:
    """Remove the ``k``-th node (1-based); out-of-range positions do nothing."""
    if head is None:
        return None
    if k == 1:
        return head.next
    prev: Node | None = None
    for position, node in enumerate(_nodes(head), start=1):
        if position == k and prev is not None:
            prev.next = node.next
            break
        prev = node
    return head


def delete_value(head: Node | None, value: int) -> Node | None:
    """Remove the first node holding ``value``; absent values do nothing."""
    if head is None:
        return None
    if head.data == value:
        return head.next
    prev = head
    for node in _nodes(head.next):
        if node.data == value:
            prev.next = node.next
            break
        prev = node
    return head