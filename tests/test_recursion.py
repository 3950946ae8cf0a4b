from collections import Counter

import pytest

from algokit.recursion import (
    binary_strings_without_consecutive_ones,
    combination_sum,
    combination_sum2,
    generate_parenthesis,
    letter_combinations,
    subset_sums,
    subsets,
    subsets_with_dup,
)


def _balanced(text):
    depth = 0
    for ch in text:
        depth += 1 if ch == "(" else -1
        if depth < 0:
            return False
    return depth == 0


def _is_subsequence(part, whole):
    it = iter(whole)
    return all(any(x == y for y in it) for x in part)


@pytest.mark.parametrize("n", [1, 2, 3, 5, 7])
def test_binary_strings_invariants(n):
    result = binary_strings_without_consecutive_ones(n)
    assert all(len(s) == n for s in result)
    assert all(set(s) <= {"0", "1"} for s in result)
    assert all("11" not in s for s in result)
    assert result == sorted(set(result))


def test_binary_strings_include_extremes():
    result = binary_strings_without_consecutive_ones(4)
    assert result[0] == "0" * 4
    assert "1010" in result and "0101" in result


@pytest.mark.parametrize("n", [3, 4, 6, 8])
def test_binary_strings_count_follows_fibonacci(n):
    current = len(binary_strings_without_consecutive_ones(n))
    previous = len(binary_strings_without_consecutive_ones(n - 1))
    before = len(binary_strings_without_consecutive_ones(n - 2))
    assert current == previous + before


def test_binary_strings_reject_zero_length():
    with pytest.raises(ValueError):
        binary_strings_without_consecutive_ones(0)


def test_combination_sum_known_example():
    assert combination_sum([2, 3, 6, 7], 7) == [[2, 2, 3], [7]]


def test_combination_sum_invariants():
    candidates = [2, 3, 5]
    result = combination_sum(candidates, 8)
    assert result
    assert all(sum(c) == 8 for c in result)
    assert all(set(c) <= set(candidates) for c in result)
    assert all(c == sorted(c) for c in result)
    assert len({tuple(c) for c in result}) == len(result)


def test_combination_sum_unreachable_target():
    assert combination_sum([4, 6], 3) == []


def test_combination_sum_rejects_non_positive():
    with pytest.raises(ValueError):
        combination_sum([0, 2], 4)


def test_combination_sum2_known_example():
    assert combination_sum2([10, 1, 2, 7, 6, 1, 5], 8) == [
        [1, 1, 6],
        [1, 2, 5],
        [1, 7],
        [2, 6],
    ]


def test_combination_sum2_invariants():
    candidates = [2, 5, 2, 1, 2, 3, 3]
    available = Counter(candidates)
    result = combination_sum2(candidates, 6)
    assert result
    assert all(sum(c) == 6 for c in result)
    assert all(not (Counter(c) - available) for c in result)
    assert all(c == sorted(c) for c in result)
    assert len({tuple(c) for c in result}) == len(result)
    assert result == sorted(result)


def test_combination_sum2_leaves_input_unchanged():
    candidates = [3, 1, 2]
    combination_sum2(candidates, 3)
    assert candidates == [3, 1, 2]


def test_generate_parenthesis_single_pair():
    assert generate_parenthesis(1) == ["()"]


@pytest.mark.parametrize("n", [2, 3, 4])
def test_generate_parenthesis_invariants(n):
    result = generate_parenthesis(n)
    assert all(len(s) == 2 * n for s in result)
    assert all(_balanced(s) for s in result)
    assert len(set(result)) == len(result)
    assert result[0] == "(" * n + ")" * n
    assert result == sorted(result)


def test_generate_parenthesis_zero_pairs():
    assert generate_parenthesis(0) == [""]


def test_letter_combinations_single_digit():
    assert "".join(letter_combinations("2")) == "abc"


def test_letter_combinations_two_digits():
    result = letter_combinations("23")
    assert len(result) == len("abc") * len("def")
    assert all(len(s) == 2 and s[0] in "abc" and s[1] in "def" for s in result)
    assert result == sorted(set(result))


def test_letter_combinations_empty_and_letterless():
    assert letter_combinations("") == []
    assert letter_combinations("1") == []


def test_letter_combinations_rejects_non_digits():
    with pytest.raises(ValueError):
        letter_combinations("2a")


def test_subsets_invariants():
    nums = [1, 2, 3, 4]
    result = subsets(nums)
    assert len(result) == 2 ** len(nums)
    assert len({tuple(s) for s in result}) == len(result)
    assert all(_is_subsequence(s, nums) for s in result)
    assert result[0] == []
    assert nums in result


def test_subset_sums_match_subsets():
    nums = [5, 6, 7]
    sums = subset_sums(nums)
    assert len(sums) == 2 ** len(nums)
    assert sums == [sum(s) for s in subsets(nums)]
    assert sums[0] == 0
    assert max(sums) == sum(nums)


def test_subsets_with_dup_invariants():
    nums = [4, 4, 4, 1, 4]
    result = subsets_with_dup(nums)
    counts = Counter(nums)
    expected_count = 1
    for c in counts.values():
        expected_count *= c + 1
    assert len(result) == expected_count
    assert len({tuple(s) for s in result}) == len(result)
    assert all(s == sorted(s) for s in result)
    assert all(not (Counter(s) - counts) for s in result)
    assert [] in result and sorted(nums) in result


def test_subsets_with_dup_no_duplicates_matches_subsets():
    nums = [1, 2, 3]
    assert sorted(subsets_with_dup(nums)) == sorted(subsets(nums))