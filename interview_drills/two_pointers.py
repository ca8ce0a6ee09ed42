"""Two-pointer drills: pair sums, substring search, image inversion, parity sort."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

_STROBOGRAMMATIC_PAIRS = frozenset({("0", "0"), ("1", "1"), ("6", "9"), ("8", "8"), ("9", "6")})


class TwoSum:
    """A multiset of numbers that answers whether any two of them add up to a value."""

    def __init__(self) -> None:
        self._counts: Counter[int] = Counter()

    def add(self, number: int) -> None:
        """Add one occurrence of ``number``."""
        self._counts[number] += 1

    def find(self, value: int) -> bool:
        """Tell whether two stored numbers (distinct occurrences) sum to ``value``."""
        for num, count in self._counts.items():
            complement = value - num
            if complement == num:
                if count >= 2:
                    return True
            elif complement in self._counts:
                return True
        return False


def index_haystack(haystack: str, needle: str) -> int:
    """Byte offset of the first occurrence of ``needle`` in ``haystack``, or -1.

    An empty needle is found at offset 0.
    """
    return haystack.encode("utf-8").find(needle.encode("utf-8"))


def invert_image(image: Sequence[Sequence[int]]) -> list[list[int]]:
    """Flip every row horizontally and invert its bits, swapping from both ends."""
    result = [list(row) for row in image]
    for row in result:
        left, right = 0, len(row) - 1
        while left <= right:
            row[left], row[right] = 1 - row[right], 1 - row[left]
            left += 1
            right -= 1
    return result


def invert_image_2(image: Sequence[Sequence[int]]) -> list[list[int]]:
    """Flip every row horizontally and invert its bits."""
    return [[1 - pixel for pixel in reversed(row)] for row in image]


def _truncated_rem2(x: int) -> int:
    """Remainder of ``x`` by 2 with the sign of ``x`` (so odd negatives give -1)."""
    return x % 2 if x >= 0 else -((-x) % 2)


def sort_parity(a: Sequence[int]) -> list[int]:
    """Stable sort by the signed remainder by 2: odd negatives, then evens, then odd positives."""
    return sorted(a, key=_truncated_rem2)


def sort_parity_two(a: Sequence[int]) -> list[int]:
    """Move even numbers before odd ones by swapping from both ends."""
    result = list(a)
    if not result:
        return result
    i, j = 0, len(result) - 1
    while i < j:
        left, right = _truncated_rem2(result[i]), _truncated_rem2(result[j])
        if left == 1 and right == 0:
            result[i], result[j] = result[j], result[i]
            i += 1
            j -= 1
        elif left == 0:
            i += 1
        elif left == 1 and right == 1:
            j -= 1
        else:
            i += 1
    return result


def strobogrammatic(num: str) -> bool:
    """Tell whether the outer digit pairs of ``num`` read the same upside down.

    The middle digit of an odd-length number is not checked.
    Raises ValueError for an empty string.
    """
    if not num:
        raise ValueError("num must not be empty")
    half = len(num) // 2
    return all(
        (left, right) in _STROBOGRAMMATIC_PAIRS
        for left, right in zip(num[:half], reversed(num[-half:] if half else ""))
    )