# interview_drills

Small, self-contained solutions to classic coding-interview exercises,
grouped by technique. Every function takes plain Python values (lists,
strings, integers) and returns new plain Python values; inputs are not
modified, except where a linked-list function says it relinks nodes.
Several exercises come with more than one implementation so the
approaches can be compared side by side.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## `interview_drills.arrays`

- `check_if_array_sorted_rotated(nums)` / `alt_check_if_array_sorted_rotated(nums)`:
  whether `nums` is a rotation of a non-decreasing sequence.
- `concat_array(nums)`, `concat_array1(nums)`, `concat_array2(nums)`:
  `nums` followed by itself.
- `contains_key(nums)`: whether any value occurs more than once.
- `diagonal_longest(dimensions)`: area of the rectangle with the longest
  diagonal, ties broken by the larger area.
- `find_town_judge(n, trust)` / `single_find_town_judge(n, trust)`: the
  person trusted by everyone else who trusts nobody, or `-1`.
- `folder_count(logs)`: folder depth after `"../"`, `"./"` and
  `"name/"` operations, never going below zero.
- `interval_problem_meeting(intervals)`: returns `True` for zero or one
  interval and `False` for anything longer, overlapping or not.
- `left_right(nums)`, `left_right_two_pass(nums)`, `one_pass_soln(nums)`:
  `|left sum - right sum|` at every index.
- `lost_stone_weight(stones)`: repeatedly smash the two heaviest stones;
  returns the last stone's weight and raises `ValueError` if none is left.
- `generate(num_rows)`: the first rows of Pascal's triangle.
  `generate_opt(num_rows)` builds the same rows but leaves the first row
  empty.
- `plus_one(digits)` / `plus_one_inplace(digits)`: add one to a number
  given as decimal digits. `plus_one_inplace` raises `ValueError` for an
  empty list.
- `shortest_distance_to_char(s, c)`: distance from each position to the
  nearest `c`; raises `ValueError` if a non-empty `s` has no `c`.
- `two_sum(nums, target)`: indices of the first pair summing to `target`,
  or `[]`.
- `width_of_matrix(grid)`: printed width of the widest number in each
  column, minus sign included.

```python
from interview_drills.arrays import generate, two_sum

generate(3)              # [[1], [1, 1], [1, 2, 1]]
two_sum([2, 7, 11], 9)   # [0, 1]
```

## `interview_drills.linked_lists`

`ListNode` is a singly linked node with `val` and `next`. Nodes compare by
identity. `build_list(values)` builds a list and returns its head;
`to_values(head)` turns an acyclic list back into a Python list.

- `linked_list_cycle(head)`: whether the list loops.
- `middle_linkedlist(head)`: the middle node (the second one for even
  lengths).
- `reverse_list(head)`: reverses the list in place and returns the new head.
- `palindrome_linked_list(head)` / `palindrome_linked_list_best(head)`:
  whether the values read the same both ways; the input list is left intact.
- `intersection(head_a, head_b)`: the first node shared by both lists, or
  `None`.

```python
from interview_drills.linked_lists import build_list, to_values, reverse_list

to_values(reverse_list(build_list([1, 2, 3])))   # [3, 2, 1]
```

## `interview_drills.two_pointers`

- `TwoSum`: `add(number)` stores a number; `find(value)` tells whether two
  stored occurrences add up to `value`.
- `index_haystack(haystack, needle)`: UTF-8 byte offset of the first
  occurrence of `needle`, `0` for an empty needle, `-1` if absent.
- `invert_image(image)` / `invert_image_2(image)`: flip each row
  horizontally and invert its 0/1 values.
- `sort_parity(a)`: stable sort by the signed remainder by 2, so odd
  negatives come first, then evens, then odd positives.
- `sort_parity_two(a)`: moves even numbers ahead of odd ones by swapping
  from both ends.
- `strobogrammatic(num)`: whether the outer digit pairs read the same
  upside down (`0-0`, `1-1`, `6-9`, `8-8`, `9-6`). The middle digit of an
  odd-length number is not checked. Raises `ValueError` for an empty string.

## `interview_drills.sliding_window`

- `contains_dup_2(nums, k)`: its membership test looks at the whole input,
  so it returns `True` for any non-empty `nums` and `False` for an empty
  one, whatever `k` is.
- `diet_plan_performance(calories, k, lower, upper)`: scores each run of
  `k` days, `-1` below `lower`, `+1` above `upper`; `0` if there are fewer
  than `k` days.
- `harmonious_seq(nums)`: longest subsequence whose max and min differ by
  exactly one.
- `max_avg_subarray(nums, k)`: best average over runs of length `k`, or
  `0.0` if none fits.
- `min_pos_sum_array(nums, l, r)`: smallest positive sum of a subarray with
  length between `l` and `r`, or `-1`.
- `x_sum(nums, k, x)`: for each window of length `k`, the sum of the `x`
  most frequent values (ties favour the larger value); windows with fewer
  than `x` distinct values are summed whole.

## What this package does not do

It is a library of functions only: there is no command-line program, and
nothing reads input files or keeps state between calls apart from a
`TwoSum` instance.