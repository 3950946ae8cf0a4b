"""Searching in sorted, rotated and two-dimensional sequences."""

from __future__ import annotations

from collections.abc import Sequence


def binary_search(arr: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``arr``, or -1 if absent."""
    start, end = 0, len(arr) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if target > arr[mid]:
            start = mid + 1
        elif target < arr[mid]:
            end = mid - 1
        else:
            return mid
    return -1


def recursive_binary_search(
    arr: Sequence[int], target: int, start: int = 0, end: int | None = None
) -> int:
    """Recursive binary search over ``arr[start:end + 1]``; -1 if absent."""
    if end is None:
        end = len(arr) - 1
    if start > end:
        return -1
    mid = start + (end - start) // 2
    if target > arr[mid]:
        return recursive_binary_search(arr, target, mid + 1, end)
    if target < arr[mid]:
        return recursive_binary_search(arr, target, start, mid - 1)
    return mid


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Find ``target`` in a rotated sorted sequence; -1 if absent."""
    start, end = 0, len(nums) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if nums[mid] == target:
            return mid
        if nums[start] <= nums[mid]:
            if nums[start] <= target <= nums[mid]:
                end = mid - 1
            else:
                start = mid + 1
        else:
            if nums[mid] <= target <= nums[end]:
                start = mid + 1
            else:
                end = mid - 1
    return -1


def find_rotated_minimum(nums: Sequence[int]) -> int:
    """Return the smallest value of a rotated sorted sequence."""
    if not nums:
        raise ValueError("sequence is empty")
    if nums[0] < nums[-1]:
        return nums[0]
    start, end = 0, len(nums) - 1
    smallest = nums[0]
    while start <= end:
        mid = start + (end - start) // 2
        if nums[start] <= nums[mid]:
            smallest = min(smallest, nums[start])
            start = mid + 1
        else:
            smallest = min(smallest, nums[mid])
            end = mid - 1
    return smallest


def peak_index_in_mountain(arr: Sequence[int]) -> int:
    """Return the index of the peak of a mountain array, or -1 if none."""
    start, end = 1, len(arr) - 2
    while start <= end:
        mid = start + (end - start) // 2
        if arr[mid - 1] < arr[mid] > arr[mid + 1]:
            return mid
        if arr[mid - 1] < arr[mid]:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` or where it would be inserted."""
    left, right = 0, len(nums) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return left


def single_element(nums: Sequence[int]) -> int:
    """Return the one value that is not paired in a sorted sequence of pairs.

    Returns -1 when no such value is found.
    """
    n = len(nums)
    if n == 1:
        return nums[0]
    start, end = 0, n - 1
    while start <= end:
        mid = start + (end - start) // 2
        differs_left = mid == 0 or nums[mid - 1] != nums[mid]
        differs_right = mid == n - 1 or nums[mid] != nums[mid + 1]
        if differs_left and differs_right:
            return nums[mid]
        if mid % 2 == 0:
            pair_on_right = mid + 1 < n and nums[mid + 1] == nums[mid]
        else:
            pair_on_right = nums[mid - 1] == nums[mid]
        if pair_on_right:
            start = mid + 1
        else:
            end = mid - 1
    return -1


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Search a matrix whose rows and columns are sorted ascending."""
    if not matrix or not matrix[0]:
        return False
    rows = len(matrix)
    i, j = 0, len(matrix[0]) - 1
    while i < rows and j >= 0:
        value = matrix[i][j]
        if value == target:
            return True
        if value > target:
            j -= 1
        else:
            i += 1
    return False


def is_valid_allocation(pages: Sequence[int], students: int, max_pages: int) -> bool:
    """Tell whether books can go to ``students`` with no one over ``max_pages``."""
    needed, current = 1, 0
    for count in pages:
        if count > max_pages:
            return False
        if current + count <= max_pages:
            current += count
        else:
            needed += 1
            current = count
    return needed <= students


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible maximum of pages any one student reads."""
    if students < 1:
        raise ValueError("at least one student is required")
    if students > len(pages):
        raise ValueError("more students than books")
    answer = -1
    start, end = 0, sum(pages)
    while start <= end:
        mid = start + (end - start) // 2
        if is_valid_allocation(pages, students, mid):
            answer = mid
            end = mid - 1
        else:
            start = mid + 1
    return answer


def linear_search_2d(
    matrix: Sequence[Sequence[int]], key: int
) -> tuple[int, int] | None:
    """Return the (row, column) of the first ``key`` in ``matrix``, or None."""
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == key:
                return i, j
    return None


def diagonal_sum(matrix: Sequence[Sequence[int]]) -> int:
    """Sum both diagonals of a square matrix, counting the centre once."""
    n = len(matrix)
    total = 0
    for i, row in enumerate(matrix):
        total += row[i]
        if i != n - i - 1:
            total += row[n - i - 1]
    return total