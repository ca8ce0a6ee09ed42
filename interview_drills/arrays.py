"""Array drills: rotation checks, prefix sums, Pascal's triangle and more."""

from __future__ import annotations

import heapq
from collections.abc import Sequence
from itertools import accumulate, cycle, islice, pairwise


def _sorted_rotated(nums: Sequence[int], breaks: int) -> bool:
    if breaks == 0:
        return True
    if breaks == 1:
        return nums[-1] <= nums[0]
    return False


def check_if_array_sorted_rotated(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is a rotation of a non-decreasing sequence."""
    if len(nums) <= 1:
        return True
    breaks = 0
    for left, right in pairwise(nums):
        if left > right:
            breaks += 1
    return _sorted_rotated(nums, breaks)


def alt_check_if_array_sorted_rotated(nums: Sequence[int]) -> bool:
    """Same check as :func:`check_if_array_sorted_rotated`, counted in one expression."""
    if len(nums) <= 1:
        return True
    return _sorted_rotated(nums, sum(a > b for a, b in pairwise(nums)))


def concat_array(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by itself."""
    return list(nums) * 2


def concat_array1(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by itself, by unpacking twice."""
    return [*nums, *nums]


def concat_array2(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by itself, by cycling over it."""
    return list(islice(cycle(nums), 2 * len(nums)))


def contains_key(nums: Sequence[int]) -> bool:
    """Tell whether any value occurs more than once."""
    return len(set(nums)) != len(nums)


def diagonal_longest(dimensions: Sequence[Sequence[int]]) -> int:
    """Area of the rectangle with the longest diagonal, ties broken by larger area."""
    best_diagonal_sq = 0
    best_area = 0
    for length, breadth, *_ in dimensions:
        diagonal_sq = length * length + breadth * breadth
        area = length * breadth
        if (diagonal_sq, area) > (best_diagonal_sq, best_area):
            best_diagonal_sq, best_area = diagonal_sq, area
    return best_area


def find_town_judge(n: int, trust: Sequence[Sequence[int]]) -> int:
    """Return the person trusted by all others and trusting nobody, or -1."""
    in_degree = [0] * (n + 1)
    out_degree = [0] * (n + 1)
    for a, b, *_ in trust:
        out_degree[a] += 1
        in_degree[b] += 1
    for person in range(1, n + 1):
        if in_degree[person] == n - 1 and out_degree[person] == 0:
            return person
    return -1


def single_find_town_judge(n: int, trust: Sequence[Sequence[int]]) -> int:
    """Find the town judge with a single net-trust tally."""
    net_trust = [0] * (n + 1)
    for a, b, *_ in trust:
        net_trust[a] -= 1
        net_trust[b] += 1
    return next(
        (person for person in range(1, n + 1) if net_trust[person] == n - 1), -1
    )


def folder_count(logs: Sequence[str]) -> int:
    """Depth below the main folder after applying the change-folder operations."""
    depth = 0
    for op in logs:
        if op == "../":
            depth = max(0, depth - 1)
        elif op != "./":
            depth += 1
    return depth


def interval_problem_meeting(intervals: Sequence[Sequence[int]]) -> bool:
    """Meeting-room check: True only for zero or one interval, False otherwise."""
    if len(intervals) <= 1:
        return True
    ordered = sorted(intervals, key=lambda interval: interval[0])
    for previous, current in pairwise(ordered):
        if previous[1] > current[0]:
            return False
    return False


def left_right(nums: Sequence[int]) -> list[int]:
    """|left sum - right sum| for every index, using two prefix arrays."""
    n = len(nums)
    left_sums = list(accumulate(nums, initial=0))[:n]
    right_sums = list(accumulate(reversed(nums), initial=0))[:n][::-1]
    return [abs(left - right) for left, right in zip(left_sums, right_sums)]


def left_right_two_pass(nums: Sequence[int]) -> list[int]:
    """|left sum - right sum| for every index, with a running right sum."""
    answer = list(accumulate(nums, initial=0))[: len(nums)]
    right_sum = 0
    for i in reversed(range(len(nums))):
        answer[i] = abs(answer[i] - right_sum)
        right_sum += nums[i]
    return answer


def one_pass_soln(nums: Sequence[int]) -> list[int]:
    """|left sum - right sum| for every index, derived from the total."""
    total = sum(nums)
    answer = []
    left_sum = 0
    for num in nums:
        right_sum = total - left_sum - num
        answer.append(abs(left_sum - right_sum))
        left_sum += num
    return answer


def lost_stone_weight(stones: Sequence[int]) -> int:
    """Smash the two heaviest stones until at most one is left and return its weight.

    Raises ValueError if no stone is left at the end.
    """
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, -(heaviest - second))
    if not heap:
        raise ValueError("no stone left")
    return -heap[0]


def generate(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    triangle: list[list[int]] = []
    for row_num in range(max(num_rows, 0)):
        if row_num == 0:
            triangle.append([1])
            continue
        previous = triangle[-1]
        inner = [a + b for a, b in pairwise(previous)]
        triangle.append([1, *inner, 1])
    return triangle


def generate_opt(num_rows: int) -> list[list[int]]:
    """Pascal's triangle built from each previous row; the first row is left empty."""
    triangle: list[list[int]] = []
    for row_num in range(max(num_rows, 0)):
        if row_num == 0:
            row: list[int] = []
        else:
            previous = triangle[-1]
            row = [
                1 if col in (0, row_num) else previous[col - 1] + previous[col]
                for col in range(row_num + 1)
            ]
        triangle.append(row)
    return triangle


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to the number whose decimal digits are ``digits``."""
    result = list(digits)
    for i in reversed(range(len(result))):
        if result[i] < 9:
            result[i] += 1
            return result
        result[i] = 0
    return [1, *result]


def plus_one_inplace(digits: Sequence[int]) -> list[int]:
    """Add one by bumping the last digit and carrying left.

    Raises ValueError for an empty digit list.
    """
    if not digits:
        raise ValueError("digits must not be empty")
    result = list(digits)
    result[-1] += 1
    for i in reversed(range(len(result))):
        if result[i] < 10:
            break
        result[i] = 0
        if i == 0:
            result.insert(0, 1)
        else:
            result[i - 1] += 1
    return result


def shortest_distance_to_char(s: str, c: str) -> list[int]:
    """Distance from every character of ``s`` to the nearest occurrence of ``c``.

    Raises ValueError if ``s`` is not empty and does not contain ``c``.
    """
    positions = [i for i, ch in enumerate(s) if ch == c]
    if s and not positions:
        raise ValueError(f"{c!r} does not occur in the string")
    return [min(abs(i - pos) for pos in positions) for i in range(len(s))]


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Indices of the first pair adding up to ``target``, or an empty list."""
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        complement = target - num
        if complement in seen:
            return [seen[complement], i]
        seen[num] = i
    return []


def width_of_matrix(grid: Sequence[Sequence[int]]) -> list[int]:
    """Widest printed number, minus sign included, in every column of ``grid``."""
    if not grid or not grid[0]:
        return []
    return [max(len(str(num)) for num in column) for column in zip(*grid)]