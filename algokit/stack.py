"""Stack-based algorithms: next greater elements, reversing and sorting."""

from __future__ import annotations

import bisect
from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass
class SortedStack:
    """A stack of integers, bottom first, that can sort itself."""

    items: list[int] = field(default_factory=list)

    def push(self, value: int) -> None:
        """Push ``value`` on top of the stack."""
        self.items.append(value)

    def sort(self) -> None:
        """Sort the stack so that the largest value is on top."""
        ordered: list[int] = []
        while self.items:
            bisect.insort_right(ordered, self.items.pop())
        self.items = ordered


def next_greater_element(
    nums1: Sequence[int], nums2: Sequence[int]
) -> list[int | None]:
    """For each value of ``nums1``, the next greater value after it in ``nums2``.

    None stands where there is no such value.
    """
    stack: list[int] = []
    greater: dict[int, int | None] = {}
    for value in reversed(nums2):
        while stack and value > stack[-1]:
            stack.pop()
        greater[value] = stack[-1] if stack else None
        stack.append(value)
    return [greater.get(value) for value in nums1]


def next_greater_elements(nums: Sequence[int]) -> list[int | None]:
    """Next strictly greater value for each position, searching circularly."""
    n = len(nums)
    result: list[int | None] = [None] * n
    stack: list[int] = []
    for i in range(2 * n - 1, -1, -1):
        value = nums[i % n]
        while stack and stack[-1] <= value:
            stack.pop()
        if i < n and stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def reverse_stack(stack: list[int]) -> None:
    """Reverse a stack held as a list (bottom first), in place."""
    popped: list[int] = []
    while stack:
        popped.append(stack.pop())
    stack.extend(popped)