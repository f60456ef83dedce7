"""Number problems: fast exponentiation, bit tricks, Pascal's triangle and digit sums."""

from __future__ import annotations

MOD = 1_000_000_007


def _check_power(base: int, exponent: int) -> None:
    if base == 0 and exponent == 0:
        raise ValueError("0 to the power 0 is undefined")
    if exponent < 0:
        raise ValueError("exponent must be non-negative")


def power(base: int, exponent: int) -> int:
    """``base`` raised to ``exponent`` by repeated squaring."""
    _check_power(base, exponent)
    result = 1
    while exponent:
        if exponent & 1:
            result *= base
        base *= base
        exponent >>= 1
    return result


def power_mod(base: int, exponent: int, modulus: int) -> int:
    """``base ** exponent`` modulo ``modulus`` by repeated squaring."""
    _check_power(base, exponent)
    if modulus <= 0:
        raise ValueError("modulus must be positive")
    result = 1
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def minimize_xor(num1: int, num2: int) -> int:
    """Number with as many set bits as ``num2`` whose XOR with ``num1`` is smallest."""
    if num1 < 0 or num2 < 0:
        raise ValueError("values must be non-negative")
    wanted = bin(num2).count("1")
    have = bin(num1).count("1")
    result = num1
    bit = 0
    if wanted <= have:
        to_drop = have - wanted
        while to_drop:
            if result >> bit & 1:
                result &= ~(1 << bit)
                to_drop -= 1
            bit += 1
    else:
        to_add = wanted - have
        while to_add:
            if not result >> bit & 1:
                result |= 1 << bit
                to_add -= 1
            bit += 1
    return result


def concatenated_binary(n: int) -> int:
    """Value of the binary forms of 1..n written one after another, modulo 1e9+7."""
    answer = 0
    for value in range(1, n + 1):
        answer = ((answer << value.bit_length()) + value) % MOD
    return answer


def pascal_triangle(rows: int) -> list[list[int]]:
    """The first ``rows`` rows of Pascal's triangle."""
    if rows < 0:
        raise ValueError("rows must be non-negative")
    triangle: list[list[int]] = []
    for index in range(rows):
        if index == 0:
            triangle.append([1])
        else:
            above = triangle[-1]
            triangle.append([1, *(a + b for a, b in zip(above, above[1:])), 1])
    return triangle


def rectangle_ways(length: int) -> int:
    """Ways to cut a stick into four parts forming a rectangle that is not a square."""
    if length <= 0:
        raise ValueError("length must be positive")
    if length % 2:
        return 0
    if length % 4 == 0:
        return length // 4 - 1
    return length // 4


def digit_sum(n: int) -> int:
    """Sum of the decimal digits of ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    return sum(int(digit) for digit in str(n))