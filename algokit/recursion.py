"""Backtracking enumerations: combinations, subsets and generated strings."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import product

_KEYPAD = ("", "", "abc", "def", "ghi", "jkl", "mno", "pqrs", "tuv", "wxyz")


def binary_strings_without_consecutive_ones(n: int) -> list[str]:
    """Return all binary strings of length ``n`` with no two adjacent 1s.

    The strings come in ascending order.
    """
    if n < 1:
        raise ValueError("length must be at least 1")

    def extend(prefix: str) -> Iterator[str]:
        if len(prefix) == n:
            yield prefix
            return
        yield from extend(prefix + "0")
        if prefix[-1] != "1":
            yield from extend(prefix + "1")

    return [*extend("0"), *extend("1")]


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the combinations of ``candidates``, each usable any number of
    times, that sum to ``target``."""
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    results: list[list[int]] = []
    path: list[int] = []

    def search(index: int, remaining: int) -> None:
        if index == len(values):
            if remaining == 0:
                results.append(list(path))
            return
        value = values[index]
        if value <= remaining:
            path.append(value)
            search(index, remaining - value)
            path.pop()
        search(index + 1, remaining)

    search(0, target)
    return results


def combination_sum2(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct combinations of ``candidates``, each used at most
    once, that sum to ``target``."""
    values = sorted(candidates)
    results: list[list[int]] = []
    path: list[int] = []

    def search(start: int, remaining: int) -> None:
        if remaining == 0:
            results.append(list(path))
            return
        for i in range(start, len(values)):
            if i > start and values[i] == values[i - 1]:
                continue
            if values[i] > remaining:
                break
            path.append(values[i])
            search(i + 1, remaining - values[i])
            path.pop()

    search(0, target)
    return results


def generate_parenthesis(n: int) -> list[str]:
    """Return every balanced string of ``n`` pairs of parentheses."""
    results: list[str] = []

    def build(current: str, opened: int, closed: int) -> None:
        if len(current) == 2 * n:
            results.append(current)
            return
        if opened < n:
            build(current + "(", opened + 1, closed)
        if closed < opened:
            build(current + ")", opened, closed + 1)

    build("", 0, 0)
    return results


def letter_combinations(digits: str) -> list[str]:
    """Return the letter strings a phone keypad digit string can spell."""
    if not digits:
        return []
    if not all("0" <= d <= "9" for d in digits):
        raise ValueError(f"not a digit string: {digits!r}")
    letters = [_KEYPAD[ord(d) - ord("0")] for d in digits]
    return ["".join(combo) for combo in product(*letters)]


def subset_sums(nums: Sequence[int]) -> list[int]:
    """Return the sum of every subset, in the order ``subsets`` lists them."""
    values = list(nums)
    results: list[int] = []

    def walk(index: int, total: int) -> None:
        results.append(total)
        for i in range(index, len(values)):
            walk(i + 1, total + values[i])

    walk(0, 0)
    return results


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``, each keeping the input order."""
    values = list(nums)
    results: list[list[int]] = []
    current: list[int] = []

    def backtrack(index: int) -> None:
        results.append(list(current))
        for i in range(index, len(values)):
            current.append(values[i])
            backtrack(i + 1)
            current.pop()

    backtrack(0)
    return results


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Return every distinct subset of ``nums``, each sorted ascending."""
    values = sorted(nums)
    results: list[list[int]] = []
    current: list[int] = []

    def backtrack(index: int) -> None:
        results.append(list(current))
        for i in range(index, len(values)):
            if i != index and values[i] == values[i - 1]:
                continue
            current.append(values[i])
            backtrack(i + 1)
            current.pop()

    backtrack(0)
    return results