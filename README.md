# algosolve

Well-known algorithm problems solved in plain Python, with no third-party
dependencies. It is a library only: it has no command-line interface.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `algosolve.arrays`: `two_sum`, `two_sum_brute_force` and
  `two_sum_two_pointers` (each returns an index pair `(i, j)` with `i < j`, or
  `None` when no pair exists), `max_area`, `three_sum`, `three_sum_closest`,
  `four_sum`, `remove_duplicates` and `remove_element` (both edit the list in
  place and return the new length), `next_permutation` (in place; the last
  permutation wraps around to ascending order), `first_missing_positive`.
- `algosolve.searching`: `find_median_sorted_arrays`, `search_rotated`,
  `search_range` (returns `(first, last)` or `(-1, -1)`), `search_insert`.
- `algosolve.linked_list`: the `ListNode` dataclass (iterable over its
  values), the `build_list` and `to_list` helpers, and `add_two_numbers`,
  `remove_nth_from_end`, `merge_two_lists`, `merge_k_lists`, `swap_pairs`,
  `reverse_k_group`. An empty list is `None`.
- `algosolve.strings`: `length_of_longest_substring`, `longest_palindrome`,
  `zigzag_convert`, `longest_common_prefix`, `is_valid_parentheses`,
  `str_str`, `find_substring`, `longest_valid_parentheses`, `count_and_say`.
- `algosolve.numbers`: `reverse_integer`, `my_atoi`, `is_palindrome_number`,
  `int_to_roman`, `roman_to_int`, `divide`. `reverse_integer` returns 0 when
  the result leaves the signed 32-bit range; `my_atoi` and `divide` clamp to
  it. The limits are exposed as `INT_MIN` and `INT_MAX`.
- `algosolve.backtracking`: `is_match` (patterns with `.` and `*` matched
  against the whole string), `letter_combinations`, `generate_parenthesis`,
  `combination_sum`, `combination_sum2`.
- `algosolve.sudoku`: `is_valid_sudoku` and `solve_sudoku`, which fills a
  9×9 board of one-character strings in place. Empty cells are written as
  `"."`.

## Examples

```python
from algosolve.arrays import two_sum, three_sum
from algosolve.numbers import int_to_roman, roman_to_int
from algosolve.linked_list import build_list, to_list, add_two_numbers

two_sum([2, 7, 11, 15], 9)          # (0, 1)
three_sum([-1, 0, 1, 2, -1, -4])    # [[-1, -1, 2], [-1, 0, 1]]
int_to_roman(1994)                  # "MCMXCIV"
roman_to_int("LVIII")               # 58

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
to_list(total)                      # [7, 0, 8]
```

## Errors

Input the algorithms cannot handle raises an exception:

- `divide(1, 0)` raises `ZeroDivisionError`.
- `ValueError` is raised by `roman_to_int` for a character that is not a
  Roman numeral, by `three_sum_closest` for fewer than three numbers, by
  `find_median_sorted_arrays` when both arrays are empty, by
  `zigzag_convert` for fewer than one row, by `remove_nth_from_end` and
  `reverse_k_group` for a count below 1 (or, for `remove_nth_from_end`,
  larger than the list), by `combination_sum` for non-positive candidates,
  and by `solve_sudoku` when the board has no solution (the board is then
  left unchanged).