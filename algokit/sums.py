"""Pair, triplet and product problems over integer lists."""

from __future__ import annotations

from collections.abc import Sequence


def pair_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find indices ``(i, j)``, ``i < j``, of a pair summing to ``target``.

    ``nums`` must be sorted ascending. Returns None when no pair exists.
    """
    i, j = 0, len(nums) - 1
    while i < j:
        total = nums[i] + nums[j]
        if total > target:
            j -= 1
        elif total < target:
            i += 1
        else:
            return i, j
    return None


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find indices ``(i, j)``, ``i < j``, whose values sum to ``target``.

    Works on unsorted input. Returns None when no pair exists.
    """
    seen: dict[int, int] = {}
    for i, value in enumerate(nums):
        needed = target - value
        if needed in seen:
            return seen[needed], i
        seen[value] = i
    return None


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct triplet, each sorted ascending, that sums to zero."""
    ordered = sorted(nums)
    n = len(ordered)
    result: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        j, k = i + 1, n - 1
        while j < k:
            total = first + ordered[j] + ordered[k]
            if total > 0:
                k -= 1
            elif total < 0:
                j += 1
            else:
                result.append([first, ordered[j], ordered[k]])
                j += 1
                k -= 1
                while j < k and ordered[j] == ordered[j - 1]:
                    j += 1
                while j < k and ordered[k] == ordered[k + 1]:
                    k -= 1
    return result


def max_water(height: Sequence[int]) -> int:
    """Return the largest area held between two of the given wall heights."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        area = (right - left) * min(height[left], height[right])
        best = max(best, area)
        if height[left] < height[right]:
            left += 1
        else:
            right -= 1
    return best


def product_except_self(nums: Sequence[int]) -> list[int]:
    """Return, for each position, the product of all the other values."""
    n = len(nums)
    result = [1] * n
    for i in range(1, n):
        result[i] = result[i - 1] * nums[i - 1]
    suffix = 1
    for i in range(n - 2, -1, -1):
        suffix *= nums[i + 1]
        result[i] *= suffix
    return result