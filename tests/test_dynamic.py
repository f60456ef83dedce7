import itertools

import pytest

from dsakit.dynamic import (
    MOD,
    climb_stairs,
    count_change_ways,
    count_texts,
    cut_rod,
    edit_distance,
    longest_increasing_subsequence,
    max_envelopes,
    max_profit_with_cooldown,
    nth_ugly_number,
    task_scheduler_days,
)


def test_climb_stairs_base_cases():
    assert climb_stairs(1) == 1
    assert climb_stairs(2) == 2


@pytest.mark.parametrize("n", range(3, 40))
def test_climb_stairs_recurrence(n):
    assert climb_stairs(n) == climb_stairs(n - 1) + climb_stairs(n - 2)


def test_climb_stairs_rejects_zero():
    with pytest.raises(ValueError):
        climb_stairs(0)


def test_count_change_worked_example():
    assert count_change_ways([1, 2, 3], 4) == 4


@pytest.mark.parametrize("amount", [0, 1, 7, 25])
def test_count_change_single_unit_coin(amount):
    assert count_change_ways([1], amount) == 1


def test_count_change_independent_of_coin_order():
    coins = [2, 5, 3, 6]
    expected = count_change_ways(coins, 10)
    for order in itertools.permutations(coins):
        assert count_change_ways(list(order), 10) == expected


def test_count_change_rejects_zero_coin():
    with pytest.raises(ValueError):
        count_change_ways([0, 1], 3)


def test_count_change_unreachable_amount():
    assert count_change_ways([2], 3) == 0


@pytest.mark.parametrize("word", ["", "a", "kitten", "intention"])
def test_edit_distance_identity(word):
    assert edit_distance(word, word) == 0


@pytest.mark.parametrize("word", ["a", "horse", "execution"])
def test_edit_distance_from_empty(word):
    assert edit_distance("", word) == len(word)
    assert edit_distance(word, "") == len(word)


@pytest.mark.parametrize(
    "a,b", [("horse", "ros"), ("intention", "execution"), ("abc", "yabd")]
)
def test_edit_distance_symmetric_and_bounded(a, b):
    distance = edit_distance(a, b)
    assert distance == edit_distance(b, a)
    assert abs(len(a) - len(b)) <= distance <= max(len(a), len(b))


def test_edit_distance_triangle_inequality():
    words = ["horse", "ros", "rose", "house"]
    for a, b, c in itertools.product(words, repeat=3):
        assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)


def test_profit_with_cooldown_example():
    assert max_profit_with_cooldown([1, 2, 3, 0, 2]) == 3


def test_profit_falling_prices():
    assert max_profit_with_cooldown([9, 7, 4, 1]) == 0
    assert max_profit_with_cooldown([]) == 0


def test_profit_single_trade():
    prices = [1, 5]
    assert max_profit_with_cooldown(prices) == prices[1] - prices[0]


def test_first_ugly_number():
    assert nth_ugly_number(1) == 1


def test_ugly_numbers_increase_and_factor():
    sequence = [nth_ugly_number(n) for n in range(1, 60)]
    assert sequence == sorted(set(sequence))
    for value in sequence:
        for prime in (2, 3, 5):
            while value % prime == 0:
                value //= prime
        assert value == 1


def test_ugly_number_rejects_zero():
    with pytest.raises(ValueError):
        nth_ugly_number(0)


def test_count_texts_example():
    assert count_texts("22233") == 8


def test_count_texts_distinct_keys():
    assert count_texts("23456") == 1
    assert count_texts("") == 1


def test_count_texts_stays_below_modulus():
    assert 0 <= count_texts("7" * 5000) < MOD


def test_task_scheduler_distinct_tasks():
    tasks = [1, 2, 3, 4, 5]
    assert task_scheduler_days(tasks, 3) == len(tasks)


def test_task_scheduler_no_space():
    tasks = [1, 1, 2, 1, 2]
    assert task_scheduler_days(tasks, 0) == len(tasks)


@pytest.mark.parametrize("count,space", [(2, 1), (3, 2), (4, 5)])
def test_task_scheduler_repeated_task(count, space):
    assert task_scheduler_days([7] * count, space) == (count - 1) * (space + 1) + 1


def test_task_scheduler_at_least_task_count():
    tasks = [5, 8, 5, 9, 8, 5]
    assert task_scheduler_days(tasks, 2) >= len(tasks)


def test_cut_rod_proportional_prices():
    prices = [3 * length for length in range(1, 8)]
    assert cut_rod(prices) == prices[-1]


def test_cut_rod_unit_piece_best():
    prices = [10, 11, 12, 13]
    assert cut_rod(prices) == len(prices) * prices[0]


def test_cut_rod_empty():
    assert cut_rod([]) == 0


def test_lis_sorted_and_reversed():
    values = [1, 4, 9, 12, 30]
    assert longest_increasing_subsequence(values) == len(values)
    assert longest_increasing_subsequence(values[::-1]) == 1


def test_lis_is_strict():
    assert longest_increasing_subsequence([2, 2, 2]) == 1
    assert longest_increasing_subsequence([]) == 0


def test_envelopes_chain():
    sizes = [5, 2, 8, 3, 1]
    assert max_envelopes(sizes, sizes) == len(sizes)


def test_envelopes_same_height_do_not_nest():
    assert max_envelopes([4, 4, 4], [1, 2, 3]) == 1


def test_envelopes_length_mismatch():
    with pytest.raises(ValueError):
        max_envelopes([1, 2], [1])