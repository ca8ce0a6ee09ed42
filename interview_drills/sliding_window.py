"""Sliding-window drills over integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def contains_dup_2(nums: Sequence[int], k: int) -> bool:
    """Duplicate-within-distance check whose membership test looks at the whole input.

    Because every value is always found in ``nums`` itself, the result is True
    for any non-empty input and False for an empty one, whatever ``k`` is.
    """
    return any(num in nums for num in nums)


def _points(window: int, lower: int, upper: int) -> int:
    if window < lower:
        return -1
    if window > upper:
        return 1
    return 0


def diet_plan_performance(calories: Sequence[int], k: int, lower: int, upper: int) -> int:
    """Score every run of ``k`` days: -1 below ``lower``, +1 above ``upper``, else 0."""
    if k < 0 or len(calories) < k:
        return 0
    window = sum(calories[:k])
    points = _points(window, lower, upper)
    for leaving, entering in zip(calories, calories[k:]):
        window += entering - leaving
        points += _points(window, lower, upper)
    return points


def harmonious_seq(nums: Sequence[int]) -> int:
    """Length of the longest subsequence whose max and min differ by exactly one."""
    freq = Counter(nums)
    return max(
        (count + freq[num + 1] for num, count in freq.items() if num + 1 in freq),
        default=0,
    )


def max_avg_subarray(nums: Sequence[int], k: int) -> float:
    """Largest average over contiguous runs of length ``k``; 0.0 if none fits."""
    if k < 0 or len(nums) < k:
        return 0.0
    window = sum(nums[:k])
    best = window
    for leaving, entering in zip(nums, nums[k:]):
        window += entering - leaving
        best = max(best, window)
    return best / k


def min_pos_sum_array(nums: Sequence[int], l: int, r: int) -> int:
    """Smallest positive sum of a subarray with length in [l, r], or -1."""
    n = len(nums)
    if n < l:
        return -1
    best: int | None = None
    for length in range(max(l, 0), min(r, n) + 1):
        current = sum(nums[:length])
        candidates = [current]
        for leaving, entering in zip(nums, nums[length:]):
            current += entering - leaving
            candidates.append(current)
        for total in candidates:
            if total > 0 and (best is None or total < best):
                best = total
    return -1 if best is None else best


def _window_x_sum(window: Sequence[int], x: int) -> int:
    freq = Counter(window)
    if len(freq) < x:
        return sum(window)
    ranked = sorted(freq.items(), key=lambda item: (item[1], item[0]), reverse=True)
    return sum(value * count for value, count in ranked[:x])


def x_sum(nums: Sequence[int], k: int, x: int) -> list[int]:
    """For every window of length ``k``, sum the ``x`` most frequent values.

    Ties in frequency favour the larger value; windows with fewer than ``x``
    distinct values are summed whole.
    """
    n = len(nums)
    if k < 0 or n < k:
        return []
    return [_window_x_sum(nums[i : i + k], x) for i in range(n - k + 1)]