"""Sorting routines and the count of smaller elements to the right."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending, stopping early once a pass makes no swap."""
    items = list(values)
    for done in range(len(items)):
        swapped = False
        for j in range(len(items) - done - 1):
            if items[j + 1] < items[j]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted ascending, inserting each one before the first larger item."""
    items: list[int] = []
    for value in values:
        position = next(
            (index for index, current in enumerate(items) if value < current),
            len(items),
        )
        items.insert(position, value)
    return items


def radix_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by decimal digits, least significant first."""
    items = list(values)
    if not items:
        return items
    if min(items) < 0:
        raise ValueError("radix sort needs non-negative integers")
    passes = len(str(max(items)))
    divisor = 1
    for _ in range(passes):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // divisor) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        divisor *= 10
    return items


def count_smaller(values: Iterable[int]) -> list[int]:
    """For each position, how many later values are strictly smaller."""
    items = list(values)
    counts = [0] * len(items)

    def sort(pairs: list[tuple[int, int]]) -> list[tuple[int, int]]:
        if len(pairs) <= 1:
            return pairs
        middle = len(pairs) // 2
        left, right = sort(pairs[:middle]), sort(pairs[middle:])
        merged: list[tuple[int, int]] = []
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i][0] > right[j][0]:
                merged.append(right[j])
                j += 1
            else:
                counts[left[i][1]] += j
                merged.append(left[i])
                i += 1
        for pair in left[i:]:
            counts[pair[1]] += j
            merged.append(pair)
        merged.extend(right[j:])
        return merged

    sort([(value, index) for index, value in enumerate(items)])
    return counts