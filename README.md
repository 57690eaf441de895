# algodrills

Solutions to well-known algorithm exercises, written as plain Python
functions. The package uses only the standard library.

## Installation

```
pip install .
```

## Modules

| Module | Functions |
| --- | --- |
| `algodrills.linked_list` | `ListNode`, `from_values`, `to_values`, `add_two_numbers`, `has_cycle`, `reverse_list` |
| `algodrills.dp` | `climb_stairs`, `coin_change`, `min_cost_climbing_stairs`, `fib`, `can_jump` |
| `algodrills.searching` | `search_insert`, `binary_search`, `find_peak_element`, `min_subarray_len`, `first_missing_positive` |
| `algodrills.stacks` | `is_valid_parentheses`, `cal_points`, `asteroid_collision`, `backspace_compare`, `remove_stars`, `daily_temperatures` |
| `algodrills.ordering` | `find_relative_ranks`, `sorted_squares`, `minimum_boxes`, `height_checker`, `sort_people`, `sort_colors`, `maximum_units` |
| `algodrills.numbers` | `is_palindrome_number`, `roman_to_int`, `plus_one`, `title_to_number`, `is_happy`, `is_power_of_two`, `add_digits`, `add_strings`, `construct_rectangle`, `complex_number_multiply`, `maximum_69_number`, `num_water_bottles`, `is_same_after_reversals`, `find_delayed_arrival_time`, `separate_digits`, `single_number` |
| `algodrills.matrix` | `flip_and_invert_image`, `min_time_to_visit_all_points`, `diagonal_sum`, `maximum_wealth` |
| `algodrills.text` | `length_of_longest_substring`, `longest_common_prefix`, `str_str`, `is_palindrome`, `reverse_string`, `fizz_buzz`, `detect_capital_use`, `to_lower_case`, `defang_ip_addr` |
| `algodrills.words` | `length_of_last_word`, `reverse_words`, `reverse_each_word`, `truncate_sentence`, `sort_sentence`, `decode_message`, `find_words`, `num_unique_emails`, `array_strings_are_equal` |
| `algodrills.counting` | `majority_element`, `is_anagram`, `find_duplicate`, `single_number_iii`, `top_k_frequent`, `can_construct`, `first_uniq_char`, `find_the_difference`, `longest_palindrome`, `find_lhs`, `find_special_integer`, `num_identical_pairs`, `sum_of_unique`, `finding_users_active_minutes`, `dest_city` |
| `algodrills.setops` | `two_sum`, `two_out_of_three`, `find_difference` |
| `algodrills.arrays` | `remove_duplicates`, `remove_element`, `remove_duplicates_at_most_twice`, `merge`, `rotate`, `move_zeroes`, `find_poisoned_duration`, `can_place_flowers`, `lemonade_change`, `is_monotonic`, `rearrange_barcodes`, `shuffle`, `largest_altitude` |
| `algodrills.membership` | `contains_duplicate`, `missing_number`, `find_disappeared_numbers`, `distribute_candies`, `num_jewels_in_stones`, `check_if_exist`, `longest_consecutive` |

## Examples

```python
from algodrills.setops import two_sum
from algodrills.numbers import roman_to_int
from algodrills.dp import coin_change
from algodrills.linked_list import from_values, to_values, add_two_numbers

two_sum([1, 3, 4, 5, 8], 11)        # [1, 4]
roman_to_int("MCMXCVIII")           # 1998
coin_change([1, 2, 5], 11)          # 3

total = add_two_numbers(from_values([2, 4, 3]), from_values([5, 6, 9]))
to_values(total)                    # [7, 0, 3, 1]
```

## Behaviour worth knowing

Some functions change the object they are given, as the exercise asks:
`sort_colors`, `reverse_string`, `remove_duplicates`, `remove_element`,
`remove_duplicates_at_most_twice`, `merge`, `rotate`, `move_zeroes` work on
the list in place, and `reverse_list` relinks the nodes of the list.

Input that an exercise cannot accept raises `ValueError`: for example a
character other than a bracket in `is_valid_parentheses`, a bill other than
5, 10 or 20 in `lemonade_change`, or `two_sum` when no pair exists.
`to_values` also raises `ValueError` on a list that contains a cycle.

## What the package does not do

It is a library only. There is no command-line program: call the
functions from your own code or an interactive session.

## Running the tests

```
pip install .[test]
pytest
```