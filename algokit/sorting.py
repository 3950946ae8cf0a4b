"""In-place sorting and rearranging of lists."""

from __future__ import annotations


def bubble_sort(arr: list[int]) -> None:
    """Sort ``arr`` in place by repeated adjacent swaps."""
    n = len(arr)
    for i in range(n):
        swapped = False
        for j in range(n - i - 1):
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                swapped = True
        if not swapped:
            break


def selection_sort(arr: list[int]) -> None:
    """Sort ``arr`` in place by selecting the smallest remaining value."""
    n = len(arr)
    for i in range(n - 1):
        smallest = min(range(i, n), key=arr.__getitem__)
        arr[i], arr[smallest] = arr[smallest], arr[i]


def insertion_sort(arr: list[int]) -> None:
    """Sort ``arr`` in place by inserting each value into the sorted prefix."""
    for i in range(1, len(arr)):
        current = arr[i]
        prev = i - 1
        while prev >= 0 and arr[prev] > current:
            arr[prev + 1] = arr[prev]
            prev -= 1
        arr[prev + 1] = current


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in one pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[high], nums[mid] = nums[mid], nums[high]
            high -= 1


def merge_sorted(nums1: list[int], m: int, nums2: list[int], n: int) -> None:
    """Merge sorted ``nums2[:n]`` into ``nums1``, whose first ``m`` are sorted.

    ``nums1`` must have room for ``m + n`` values.
    """
    idx, i, j = m + n - 1, m - 1, n - 1
    while i >= 0 and j >= 0:
        if nums1[i] > nums2[j]:
            nums1[idx] = nums1[i]
            i -= 1
        else:
            nums1[idx] = nums2[j]
            j -= 1
        idx -= 1
    while j >= 0:
        nums1[idx] = nums2[j]
        j -= 1
        idx -= 1


def reverse_array(arr: list) -> None:
    """Reverse ``arr`` in place by swapping from both ends."""
    start, end = 0, len(arr) - 1
    while start < end:
        arr[start], arr[end] = arr[end], arr[start]
        start += 1
        end -= 1


def next_permutation(nums: list[int]) -> None:
    """Rearrange ``nums`` into its next lexicographic permutation, wrapping."""
    n = len(nums)
    pivot = next((i for i in range(n - 2, -1, -1) if nums[i] < nums[i + 1]), -1)
    if pivot == -1:
        nums.reverse()
        return
    swap = next(i for i in range(n - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[swap] = nums[swap], nums[pivot]
    nums[pivot + 1:] = nums[pivot + 1:][::-1]


def rotate(nums: list[int], k: int) -> None:
    """Rotate ``nums`` to the right by ``k`` places, in place."""
    n = len(nums)
    if n == 0 or k == 0:
        return
    k %= n
    if k == 0:
        return
    nums[:] = nums[-k:] + nums[:-k]