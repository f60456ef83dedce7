import random

import pytest

from dsakit.sorting import bubble_sort, count_smaller, insertion_sort, radix_sort

SAMPLES = [
    [5, 1, 4, 2, 8],
    [573, 25, 415, 12, 161, 6],
    [],
    [7],
    [3, 3, 1, 1, 2],
    [10, 9, 8, 7, 6, 5, 4, 3, 2, 1, 0],
    [100, 5, 1000, 0, 10],
]


@pytest.mark.parametrize("values", SAMPLES)
@pytest.mark.parametrize("sort", [bubble_sort, insertion_sort, radix_sort])
def test_sorts_match_builtin(sort, values):
    original = list(values)
    assert sort(values) == sorted(original)
    assert values == original


@pytest.mark.parametrize("sort", [bubble_sort, insertion_sort])
def test_sorts_handle_negatives(sort):
    values = [3, -1, 0, -7, 2]
    assert sort(values) == sorted(values)


def test_random_inputs():
    rng = random.Random(1234)
    for _ in range(50):
        values = [rng.randrange(0, 5000) for _ in range(rng.randrange(0, 40))]
        expected = sorted(values)
        assert bubble_sort(values) == expected
        assert insertion_sort(values) == expected
        assert radix_sort(values) == expected


def test_radix_sort_rejects_negatives():
    with pytest.raises(ValueError):
        radix_sort([3, -2, 1])


def test_count_smaller_example():
    assert count_smaller([5, 2, 6, 1]) == [2, 1, 1, 0]


def test_count_smaller_ascending_is_all_zero():
    assert count_smaller(list(range(10))) == [0] * 10


def test_count_smaller_descending():
    values = list(range(9, -1, -1))
    assert count_smaller(values) == values


def test_count_smaller_equal_values_not_counted():
    assert count_smaller([4, 4, 4]) == [0, 0, 0]


def test_count_smaller_empty_and_last():
    assert count_smaller([]) == []
    rng = random.Random(7)
    values = [rng.randrange(-50, 50) for _ in range(30)]
    counts = count_smaller(values)
    assert len(counts) == len(values)
    assert counts[-1] == 0
    assert all(0 <= c <= len(values) - 1 - i for i, c in enumerate(counts))
    minimum_index = values.index(min(values))
    assert counts[minimum_index] == 0