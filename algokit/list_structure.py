"""Linked list structure: cycles, intersections, reordering and sorting."""

from __future__ import annotations

from algokit.linked_list import Node
from algokit.list_ops import reverse_list


def has_cycle(head: Node | None) -> bool:
    """Tell whether following ``next`` from ``head`` ever loops back."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Node | None) -> Node | None:
    """Return the node where a cycle begins, or None when there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
        if slow is fast:
            slow = head
            while slow is not fast:
                slow = slow.next  # type: ignore[union-attr]
                fast = fast.next  # type: ignore[union-attr]
            return slow
    return None


def get_intersection_node(
    head_a: Node | None, head_b: Node | None
) -> Node | None:
    """Return the first node shared by two lists, or None if they never meet."""
    if head_a is None or head_b is None:
        return None
    a: Node | None = head_a
    b: Node | None = head_b
    while a is not b:
        a = head_b if a is None else a.next
        b = head_a if b is None else b.next
    return a


def is_palindrome(head: Node | None) -> bool:
    """Tell whether the list's values read the same both ways.

    The second half is reversed for the comparison and restored afterwards.
    """
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second_head = reverse_list(slow.next)
    first: Node | None = head
    second = second_head
    result = True
    while second is not None:
        if first.data != second.data:  # type: ignore[union-attr]
            result = False
            break
        first = first.next  # type: ignore[union-attr]
        second = second.next
    slow.next = reverse_list(second_head)
    return result


def odd_even_list(head: Node | None) -> Node | None:
    """Group the nodes at odd positions before those at even positions."""
    if head is None or head.next is None:
        return head
    odd = head
    even: Node | None = head.next
    even_head = even
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def remove_nth_from_end(head: Node | None, n: int) -> Node | None:
    """Remove the ``n``-th node counted from the end (1-based)."""
    if n < 1:
        raise ValueError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n is larger than the list")
        fast = fast.next
    if fast is None:
        return head.next  # type: ignore[union-attr]
    slow = head
    while fast.next is not None:
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next
    slow.next = slow.next.next  # type: ignore[union-attr]
    return head


def reorder_list(head: Node | None) -> None:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    if head is None:
        return
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    second = reverse_list(slow.next)
    slow.next = None
    first: Node | None = head
    while second is not None:
        first_next = first.next  # type: ignore[union-attr]
        second_next = second.next
        first.next = second  # type: ignore[union-attr]
        second.next = first_next
        first = first_next
        second = second_next


def _nth_node(head: Node, k: int) -> Node:
    node = head
    for _ in range(k - 1):
        node = node.next  # type: ignore[assignment]
    return node


def rotate_right(head: Node | None, k: int) -> Node | None:
    """Rotate the list to the right by ``k`` places and return the new head."""
    if k < 0:
        raise ValueError("k must not be negative")
    if head is None:
        return None
    size = 1
    tail = head
    while tail.next is not None:
        tail = tail.next
        size += 1
    k %= size
    if k == 0:
        return head
    tail.next = head
    new_last = _nth_node(head, size - k)
    new_head = new_last.next
    new_last.next = None
    return new_head


def merge_sorted_lists(list1: Node | None, list2: Node | None) -> Node | None:
    """Merge two ascending lists into one, reusing their nodes."""
    dummy = Node(-1)
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.data <= list2.data:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def _find_middle(head: Node) -> Node:
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    return slow


def sort_list(head: Node | None) -> Node | None:
    """Sort the list ascending by merge sort and return the new head."""
    if head is None or head.next is None:
        return head
    middle = _find_middle(head)
    right = middle.next
    middle.next = None
    return merge_sorted_lists(sort_list(head), sort_list(right))