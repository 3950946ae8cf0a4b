# algokit

Classic algorithms on arrays, strings, stacks, linked lists and recursion,
written in plain Python with no dependencies outside the standard library.

## Install

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

- `algokit.search` – `binary_search`, `recursive_binary_search`,
  `search_rotated`, `find_rotated_minimum`, `peak_index_in_mountain`,
  `search_insert`, `single_element`, `search_matrix` (rows and columns sorted),
  `allocate_books` with `is_valid_allocation`, `linear_search_2d` and
  `diagonal_sum`.
- `algokit.sorting` – in-place `bubble_sort`, `selection_sort`,
  `insertion_sort`, `sort_colors` (0/1/2 in one pass), `merge_sorted`,
  `reverse_array`, `next_permutation` and `rotate`.
- `algokit.arrays` – `max_subarray_sum` (Kadane), `max_profit`,
  `is_sorted_rotated`, `contains_duplicate`, `find_kth_largest`, `get_common`,
  `second_order_elements`, `largest_element`, `majority_element`,
  `move_zeroes`, `plus_one`, `my_pow`, `rearrange_array`, `remove_duplicates`
  and `remove_element`.
- `algokit.sums` – `pair_sum` (sorted input), `two_sum`, `three_sum`,
  `max_water` and `product_except_self`.
- `algokit.stack` – `next_greater_element`, `next_greater_elements`
  (circular), `reverse_stack` and the `SortedStack` class.
- `algokit.strings` – `beauty_sum`, `check_inclusion`, `compress`, `mod_exp`,
  `count_good_numbers`, `frequency_sort`, `is_anagram`, `largest_odd_number`,
  `longest_palindrome`, `max_depth`, `my_atoi` (clamped to 32 bits),
  `remove_occurrences`, `reverse_words`, `roman_to_int`, `rotate_string` and
  `is_palindrome`.
- `algokit.recursion` – `binary_strings_without_consecutive_ones`,
  `combination_sum`, `combination_sum2`, `generate_parenthesis`,
  `letter_combinations`, `subset_sums`, `subsets` and `subsets_with_dup`.
- `algokit.linked_list` – the `Node` type (iterating a node yields the values
  from it to the end) plus `from_list`, `to_list`, `length`, `contains`,
  `insert_first`, `insert_last`, `insert_at`, `insert_before`,
  `delete_first`, `delete_last`, `delete_at` and `delete_value`.
- `algokit.list_ops` – `add_two_numbers`, `delete_duplicates`,
  `delete_middle`, `reverse_list` and `middle_node`.
- `algokit.list_structure` – `has_cycle`, `detect_cycle`,
  `get_intersection_node`, `is_palindrome`, `odd_even_list`,
  `remove_nth_from_end`, `reorder_list`, `rotate_right`,
  `merge_sorted_lists` and `sort_list` (merge sort).

Index searches such as `binary_search` and `search_rotated` return -1 when the
value is absent; functions that look up values, such as `get_common`,
`majority_element`, `two_sum` and `linear_search_2d`, return `None` instead.
Invalid input, such as an empty sequence where a value is required, raises
`ValueError`.

Linked list functions take and return the head `Node` (or `None` for an empty
list) and change the nodes in place.

## Examples

```python
from algokit.search import binary_search, search_rotated
from algokit.arrays import max_subarray_sum
from algokit.sums import three_sum
from algokit.strings import roman_to_int
from algokit.recursion import generate_parenthesis
from algokit.stack import next_greater_element

binary_search([-1, 0, 3, 4, 5, 9, 12], 12)     # 6
search_rotated([4, 5, 6, 7, 0, 1, 2], 0)        # 4
max_subarray_sum([-1, 2, -3, 4, 5])             # 9
three_sum([-1, 0, 1, 2, -1, -4])                # [[-1, -1, 2], [-1, 0, 1]]
roman_to_int("MCMXCIV")                         # 1994
generate_parenthesis(3)
# ['((()))', '(()())', '(())()', '()(())', '()()()']
next_greater_element([4, 1, 2], [1, 3, 4, 2])   # [None, 3, None]
```

```python
from algokit.linked_list import from_list, to_list
from algokit.list_ops import reverse_list
from algokit.list_structure import sort_list

to_list(reverse_list(from_list([1, 2, 3, 4])))  # [4, 3, 2, 1]
to_list(sort_list(from_list([4, 2, 1, 3])))     # [1, 2, 3, 4]
```

```python
from algokit.stack import SortedStack

stack = SortedStack()
for value in (7, 3, 6, 22, 5, 77):
    stack.push(value)
stack.sort()
stack.items                                     # [3, 5, 6, 7, 22, 77], top last
```

## What it does not do

algokit is a library only: it has no command-line program. Linked lists are
plain chains of `Node` objects; there is no list container class that keeps a
head or a length for you.