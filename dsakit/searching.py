"""Binary-search style lookups over sorted sequences and sorted grids."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Sequence


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or the index where it would be inserted."""
    return bisect_left(nums, target)


def _staircase(matrix: Sequence[Sequence[int]], target: int) -> tuple[int, int] | None:
    if not matrix or not matrix[0]:
        return None
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        current = matrix[row][col]
        if current == target:
            return row, col
        if target > current:
            row += 1
        else:
            col -= 1
    return None


def find_in_sorted_grid(
    matrix: Sequence[Sequence[int]], target: int
) -> tuple[int, int] | None:
    """Locate ``target`` in a grid whose rows and columns are sorted ascending.

    Returns ``(row, column)`` of the match, or ``None`` when it is absent.
    """
    return _staircase(matrix, target)


def grid_contains(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` occurs in a grid with sorted rows and columns."""
    return _staircase(matrix, target) is not None


def flat_matrix_contains(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Tell whether ``target`` occurs in a grid that is sorted when read row by row."""
    if not matrix or not matrix[0]:
        return False
    cols = len(matrix[0])
    lo, hi = 0, len(matrix) * cols - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        element = matrix[mid // cols][mid % cols]
        if element == target:
            return True
        if element < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return False


def integer_sqrt(n: int) -> int:
    """Largest integer whose square does not exceed ``n``."""
    if n < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(n)


def fixed_point(values: Sequence[int]) -> int | None:
    """Smallest index ``i`` with ``values[i] == i`` in a sorted list of distinct values.

    Returns ``None`` when no such index exists.
    """
    lo, hi = 0, len(values) - 1
    best: int | None = None
    while lo <= hi:
        mid = (lo + hi) // 2
        if values[mid] == mid:
            best = mid
            hi = mid - 1
        elif values[mid] > mid:
            hi = mid - 1
        else:
            lo = mid + 1
    return best


def _fits(limit: int, days: int, times: Sequence[int]) -> bool:
    used = 1
    load = 0
    for time in times:
        if load + time <= limit:
            load += time
        else:
            used += 1
            load = time
    return used <= days


def min_max_daily_time(days: int, times: Sequence[int]) -> int:
    """Smallest possible largest daily total when ``times`` is split, in order, over ``days`` days."""
    if days < 1:
        raise ValueError("days must be at least 1")
    lo = max(times, default=0)
    hi = sum(times)
    answer = hi
    while lo <= hi:
        mid = (lo + hi) // 2
        if _fits(mid, days, times):
            answer = mid
            hi = mid - 1
        else:
            lo = mid + 1
    return answer