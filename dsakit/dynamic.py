"""Dynamic-programming problems: counting paths, edit distance, scheduling and sequences."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence
from fractions import Fraction

MOD = 1_000_000_007


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` steps taking one or two steps at a time."""
    if n < 1:
        raise ValueError("n must be at least 1")
    previous, current = 1, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def count_change_ways(coins: Sequence[int], amount: int) -> int:
    """Number of coin multisets drawn from ``coins`` that add up to ``amount``."""
    if amount < 0:
        raise ValueError("amount must be non-negative")
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    ways = [1] + [0] * amount
    for coin in coins:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def edit_distance(a: str, b: str) -> int:
    """Fewest insertions, deletions and substitutions that turn ``a`` into ``b``."""
    previous = list(range(len(b) + 1))
    for i, left in enumerate(a, start=1):
        current = [i]
        for j, right in enumerate(b, start=1):
            if left == right:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def max_profit_with_cooldown(prices: Sequence[int]) -> int:
    """Best trading profit when every sale is followed by a one-day cooldown."""
    size = len(prices)
    can_buy = [0] * (size + 2)
    can_sell = [0] * (size + 2)
    for day in range(size - 1, -1, -1):
        price = prices[day]
        can_buy[day] = max(-price + can_sell[day + 1], can_buy[day + 1])
        can_sell[day] = max(price + can_buy[day + 2], can_sell[day + 1])
    return can_buy[0]


def nth_ugly_number(n: int) -> int:
    """The ``n``-th positive integer whose only prime factors are 2, 3 and 5."""
    if n < 1:
        raise ValueError("n must be at least 1")
    ugly = [1]
    i2 = i3 = i5 = 0
    while len(ugly) < n:
        nxt = min(2 * ugly[i2], 3 * ugly[i3], 5 * ugly[i5])
        ugly.append(nxt)
        if nxt == 2 * ugly[i2]:
            i2 += 1
        if nxt == 3 * ugly[i3]:
            i3 += 1
        if nxt == 5 * ugly[i5]:
            i5 += 1
    return ugly[n - 1]


def count_texts(pressed: str) -> int:
    """Number of messages a sequence of phone-keypad presses could spell, modulo 1e9+7."""
    ways = [1] * (len(pressed) + 1)
    for i, key in enumerate(pressed):
        count = ways[i]
        if i > 0 and key == pressed[i - 1]:
            count = (count + ways[i - 1]) % MOD
            if i > 1 and key == pressed[i - 2]:
                count = (count + ways[i - 2]) % MOD
                if i > 2 and key == pressed[i - 3] and key in "79":
                    count = (count + ways[i - 3]) % MOD
        ways[i + 1] = count
    return ways[-1]


def task_scheduler_days(tasks: Sequence[int], space: int) -> int:
    """Days needed to run ``tasks`` in order when equal tasks need ``space`` days between them."""
    day = 0
    last_run: dict[int, int] = {}
    for task in tasks:
        day += 1
        if task in last_run:
            day = max(day, last_run[task] + space + 1)
        last_run[task] = day
    return day


def cut_rod(prices: Sequence[int]) -> int:
    """Value of a rod of length ``len(prices)`` cut greedily by best price per unit length.

    ``prices[i]`` is the price of a piece of length ``i + 1``. Pieces are taken in order
    of falling price per unit length, the longer piece first on ties.
    """
    ranked = sorted(
        ((Fraction(price, length), length) for length, price in enumerate(prices, start=1)),
        reverse=True,
    )
    remaining = len(prices)
    total = 0
    for _, length in ranked:
        if remaining == 0:
            break
        pieces, remaining = divmod(remaining, length)
        total += pieces * prices[length - 1]
    return total


def longest_increasing_subsequence(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    tails: list[int] = []
    for value in values:
        position = bisect_left(tails, value)
        if position == len(tails):
            tails.append(value)
        else:
            tails[position] = value
    return len(tails)


def max_envelopes(heights: Sequence[int], widths: Sequence[int]) -> int:
    """Most envelopes that nest inside one another, each strictly smaller in both sides."""
    if len(heights) != len(widths):
        raise ValueError("heights and widths must have the same length")
    ordered = sorted(zip(heights, widths), key=lambda env: (env[0], -env[1]))
    return longest_increasing_subsequence([width for _, width in ordered])