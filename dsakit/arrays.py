"""Array and list problems: pair sums, merging, set-like queries and digit arithmetic."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import groupby, zip_longest


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of every pair summing to ``target``, flattened in scan order."""
    result: list[int] = []
    for i, first in enumerate(nums):
        for j in range(i + 1, len(nums)):
            if first + nums[j] == target:
                result.extend((i, j))
    return result


def merge_sorted(nums1: Sequence[int], m: int, nums2: Sequence[int], n: int) -> list[int]:
    """Merge the first ``m`` items of ``nums1`` with the first ``n`` of ``nums2``, sorted."""
    return sorted([*nums1[:m], *nums2[:n]])


def concatenate(nums: Sequence[int]) -> list[int]:
    """Return ``nums`` followed by itself."""
    return [*nums, *nums]


def remove_duplicates(nums: Iterable[int]) -> list[int]:
    """Collapse runs of equal adjacent values, keeping one of each."""
    return [value for value, _ in groupby(nums)]


def is_subset(superset: Iterable[int], subset: Iterable[int]) -> bool:
    """Tell whether every value of ``subset`` occurs in ``superset``."""
    available = set(superset)
    return all(value in available for value in subset)


def difference(first: Iterable[int], second: Iterable[int]) -> list[int]:
    """Values of ``first`` that do not occur in ``second``, in their original order."""
    excluded = set(second)
    return [value for value in first if value not in excluded]


def missing_in_range(nums: Sequence[int]) -> int:
    """Find the one value of ``1..len(nums)+1`` that is absent from ``nums``."""
    size = len(nums)
    return (size + 1) * (size + 2) // 2 - sum(nums)


def missing_number(nums: Sequence[int]) -> int:
    """Find the one value of ``0..len(nums)`` that is absent from ``nums``."""
    answer = len(nums)
    for index, value in enumerate(nums):
        answer ^= value ^ index
    return answer


def h_index(citations: Sequence[int]) -> int:
    """Largest ``h`` such that ``h`` papers have at least ``h`` citations each."""
    size = len(citations)
    buckets = [0] * (size + 1)
    for count in citations:
        buckets[min(count, size)] += 1
    total = 0
    for h in range(size, -1, -1):
        total += buckets[h]
        if total >= h:
            return h
    return total


def frequencies(sorted_values: Iterable[int]) -> list[tuple[int, int]]:
    """Count each run of equal values in a sorted sequence as ``(value, count)`` pairs."""
    return [(value, sum(1 for _ in run)) for value, run in groupby(sorted_values)]


def four_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """All distinct sorted quadruples that sum to ``target``, in ascending order."""
    ordered = sorted(nums)
    size = len(ordered)
    found: set[tuple[int, int, int, int]] = set()
    for i in range(size):
        for j in range(i + 1, size):
            remaining = target - ordered[i] - ordered[j]
            lo, hi = j + 1, size - 1
            while lo < hi:
                pair = ordered[lo] + ordered[hi]
                if pair > remaining:
                    hi -= 1
                elif pair < remaining:
                    lo += 1
                else:
                    found.add((ordered[i], ordered[j], ordered[lo], ordered[hi]))
                    lo += 1
                    hi -= 1
    return [list(quad) for quad in sorted(found)]


def three_sum(nums: Sequence[int], target: int) -> list[list[int]]:
    """All distinct sorted triplets that sum to ``target``, in the order found."""
    ordered = sorted(nums)
    result: list[list[int]] = []
    for i, first in enumerate(ordered):
        if i > 0 and first == ordered[i - 1]:
            continue
        lo, hi = i + 1, len(ordered) - 1
        remaining = target - first
        while lo < hi:
            pair = ordered[lo] + ordered[hi]
            if pair == remaining:
                result.append([first, ordered[lo], ordered[hi]])
                while lo < hi and ordered[lo] == ordered[lo + 1]:
                    lo += 1
                while lo < hi and ordered[hi] == ordered[hi - 1]:
                    hi -= 1
                lo += 1
                hi -= 1
            elif pair < remaining:
                lo += 1
            else:
                hi -= 1
    return result


def add_digit_arrays(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Add two numbers given as lists of decimal digits, most significant first."""
    digits: list[int] = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        total = carry + x + y
        digits.append(total % 10)
        carry = 1 if total >= 10 else 0
    if carry:
        digits.append(carry)
    digits.reverse()
    return digits


def can_pair(values: Sequence[int], k: int, m: int) -> bool:
    """Tell whether ``values`` splits into pairs whose sum leaves remainder ``m`` mod ``k``."""
    if k == 0:
        raise ValueError("k must be non-zero")
    if len(values) % 2 == 1:
        return False
    remainders = Counter(value % k for value in values)
    return all(
        remainders.get((m - rem + k) % k, 0) == count
        for rem, count in remainders.items()
    )


def merge_intervals(intervals: Iterable[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals, sorted by start."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if not merged or start > merged[-1][1]:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged