"""Single-pass and small-state algorithms over integer lists."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import groupby


def max_subarray_sum(nums: Iterable[int]) -> int:
    """Return the largest sum of any non-empty contiguous run (Kadane)."""
    best: int | None = None
    current = 0
    for value in nums:
        current += value
        best = current if best is None else max(best, current)
        if current < 0:
            current = 0
    if best is None:
        raise ValueError("sequence is empty")
    return best


def max_profit(prices: Sequence[int]) -> int:
    """Return the best profit from one buy followed by one later sale."""
    if not prices:
        raise ValueError("no prices given")
    best_buy = prices[0]
    profit = 0
    for price in prices[1:]:
        if price > best_buy:
            profit = max(profit, price - best_buy)
        best_buy = min(best_buy, price)
    return profit


def is_sorted_rotated(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is a rotation of a non-decreasing sequence."""
    n = len(nums)
    drops = 0
    for i, value in enumerate(nums):
        if value > nums[(i + 1) % n]:
            drops += 1
            if drops > 1:
                return False
    return True


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Tell whether any value occurs more than once."""
    seen: set[int] = set()
    for value in nums:
        if value in seen:
            return True
        seen.add(value)
    return False


def find_kth_largest(nums: Sequence[int], k: int) -> int:
    """Return the k-th largest value using a min-heap of size ``k``."""
    if not 1 <= k <= len(nums):
        raise ValueError(f"k must be between 1 and {len(nums)}, got {k}")
    heap: list[int] = []
    for value in nums:
        if len(heap) < k:
            heapq.heappush(heap, value)
        elif value > heap[0]:
            heapq.heapreplace(heap, value)
    return heap[0]


def get_common(nums1: Iterable[int], nums2: Iterable[int]) -> int | None:
    """Return the smallest value present in both inputs, or None."""
    second = set(nums2)
    common = [value for value in nums1 if value in second]
    return min(common, default=None)


def second_order_elements(nums: Sequence[int]) -> tuple[int | None, int | None]:
    """Return ``(second_largest, second_smallest)``; None where there is none."""
    if not nums:
        return None, None
    largest = max(nums)
    smallest = min(nums)
    second_largest = max((v for v in nums if v != largest), default=None)
    second_smallest = min((v for v in nums if v != smallest), default=None)
    return second_largest, second_smallest


def largest_element(nums: Iterable[int]) -> int:
    """Return the largest value."""
    result = max(nums, default=None)
    if result is None:
        raise ValueError("sequence is empty")
    return result


def majority_element(nums: Sequence[int]) -> int | None:
    """Return the value occurring more than ``len(nums) // 2`` times, or None."""
    candidate = None
    votes = 0
    for value in nums:
        if votes == 0:
            candidate = value
        votes += 1 if value == candidate else -1
    if candidate is not None and nums.count(candidate) > len(nums) // 2:
        return candidate
    return None


def move_zeroes(nums: Sequence[int]) -> list[int]:
    """Return a copy with all zeros moved to the end, others kept in order."""
    result = list(nums)
    zeros = 0
    for i, value in enumerate(result):
        if value == 0:
            zeros += 1
        elif zeros:
            result[i] = 0
            result[i - zeros] = value
    return result


def plus_one(digits: Sequence[int]) -> list[int]:
    """Return the decimal digits of the number ``digits`` plus one."""
    result = list(digits)
    for i in range(len(result) - 1, -1, -1):
        if result[i] != 9:
            result[i] += 1
            return result
        result[i] = 0
    return [1] + result


def my_pow(x: float, n: int) -> float:
    """Return ``x`` raised to the integer power ``n`` by repeated squaring."""
    if n == 0:
        return 1.0
    if x == 0:
        return 0.0
    if x == 1:
        return 1.0
    if x == -1:
        return 1.0 if n % 2 == 0 else -1.0
    if n < 0:
        x = 1 / x
        n = -n
    result = 1.0
    while n:
        if n & 1:
            result *= x
        x *= x
        n >>= 1
    return result


def rearrange_array(nums: Sequence[int]) -> list[int]:
    """Interleave positives (even indices) and non-positives (odd indices).

    Both groups keep their relative order and must be the same size.
    """
    positives = [v for v in nums if v > 0]
    others = [v for v in nums if v <= 0]
    if len(positives) != len(others):
        raise ValueError("positive and non-positive counts must be equal")
    result: list[int] = []
    for pos, neg in zip(positives, others):
        result.extend((pos, neg))
    return result


def remove_duplicates(nums: Sequence[int]) -> int:
    """Return how many distinct values a sorted sequence holds."""
    return sum(1 for _ in groupby(nums))


def remove_element(nums: Iterable[int], val: int) -> int:
    """Return how many values differ from ``val``."""
    return sum(1 for value in nums if value != val)