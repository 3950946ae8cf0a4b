import pytest

from algokit.arrays import (
    contains_duplicate,
    find_kth_largest,
    get_common,
    is_sorted_rotated,
    largest_element,
    majority_element,
    max_profit,
    max_subarray_sum,
    move_zeroes,
    my_pow,
    plus_one,
    rearrange_array,
    remove_duplicates,
    remove_element,
    second_order_elements,
)


def test_max_subarray_sum_example():
    assert max_subarray_sum([-1, 2, -3, 4, 5]) == 9


def test_max_subarray_sum_all_positive_is_total():
    nums = [3, 1, 4, 1, 5]
    assert max_subarray_sum(nums) == sum(nums)


def test_max_subarray_sum_all_negative_is_max():
    nums = [-8, -3, -6, -2, -5]
    assert max_subarray_sum(nums) == max(nums)


def test_max_subarray_sum_empty_raises():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_max_profit_falling_prices():
    assert max_profit([7, 6, 4, 3, 1]) == 0


def test_max_profit_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_max_profit_rising_prices():
    prices = [2, 4, 7, 11]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_max_profit_empty_raises():
    with pytest.raises(ValueError):
        max_profit([])


@pytest.mark.parametrize(
    "nums, expected",
    [([3, 4, 5, 1, 2], True), ([2, 1, 3, 4], False), ([1, 2, 3], True), ([], True)],
)
def test_is_sorted_rotated(nums, expected):
    assert is_sorted_rotated(nums) is expected


def test_contains_duplicate():
    assert contains_duplicate([1, 2, 3, 1]) is True
    assert contains_duplicate([1, 2, 3, 4]) is False


@pytest.mark.parametrize("k", [1, 2, 3, 4, 5, 6])
def test_find_kth_largest_matches_sorted(k):
    nums = [3, 2, 1, 5, 6, 4]
    assert find_kth_largest(nums, k) == sorted(nums)[-k]


@pytest.mark.parametrize("k", [0, 7])
def test_find_kth_largest_bad_k(k):
    with pytest.raises(ValueError):
        find_kth_largest([3, 2, 1, 5, 6, 4], k)


def test_get_common_none():
    assert get_common([1, 2, 3, 6], [7, 8, 9, 10]) is None


def test_get_common_smallest():
    assert get_common([6, 3, 2, 1], [2, 3, 6]) == 2


def test_second_order_elements():
    assert second_order_elements([3, 7, 2, 1, 6, 5, 4]) == (6, 2)


def test_second_order_elements_all_equal():
    assert second_order_elements([5, 5, 5]) == (None, None)


def test_largest_element():
    nums = [5, 9, 3, 4, 8, 4, 3, 10]
    assert largest_element(nums) == 10


def test_largest_element_empty_raises():
    with pytest.raises(ValueError):
        largest_element([])


def test_majority_element_found():
    assert majority_element([1, 2, 2, 1, 1, 1, 3]) == 1


def test_majority_element_absent():
    assert majority_element([1, 2, 3]) is None
    assert majority_element([]) is None


def test_move_zeroes():
    nums = [0, 1, 0, 3, 12]
    assert move_zeroes(nums) == [1, 3, 12, 0, 0]
    assert nums == [0, 1, 0, 3, 12]


@pytest.mark.parametrize("number", [0, 9, 99, 129, 6145390195186705542])
def test_plus_one_matches_integer_increment(number):
    digits = [int(c) for c in str(number)]
    assert plus_one(digits) == [int(c) for c in str(number + 1)]


def test_plus_one_leaves_input_alone():
    digits = [9, 9]
    plus_one(digits)
    assert digits == [9, 9]


def test_my_pow_example():
    assert my_pow(2.0, 10) == 1024.0


@pytest.mark.parametrize("x, n", [(2.0, -2), (1.5, 7), (-3.0, 5), (0.5, 20)])
def test_my_pow_matches_builtin(x, n):
    assert my_pow(x, n) == pytest.approx(x**n)


def test_my_pow_special_cases():
    assert my_pow(5.0, 0) == 1.0
    assert my_pow(0.0, -3) == 0.0
    assert my_pow(-1.0, 5) == -1.0
    assert my_pow(-1.0, 4) == 1.0


def test_rearrange_array():
    assert rearrange_array([3, 1, -2, -5, 2, -4]) == [3, -2, 1, -5, 2, -4]


def test_rearrange_array_unbalanced_raises():
    with pytest.raises(ValueError):
        rearrange_array([1, 2, -3])


def test_remove_duplicates_counts_distinct():
    nums = [0, 0, 1, 1, 1, 2, 2, 3, 3, 4]
    assert remove_duplicates(nums) == len(set(nums))


def test_remove_duplicates_empty():
    assert remove_duplicates([]) == 0


def test_remove_element():
    nums = [0, 1, 2, 2, 3, 0, 4, 2]
    assert remove_element(nums, 2) == len(nums) - nums.count(2)
    assert remove_element(nums, 7) == len(nums)