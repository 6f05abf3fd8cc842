"""Divisor sums, amicable numbers and triangle numbers with many divisors."""

from __future__ import annotations

import math
from itertools import count


def divisor_sum(number: int) -> int:
    """Sum of the divisors of ``number`` other than itself and its square root.

    Only divisors strictly below the square root are paired with their
    cofactors, so an exact square root is left out. Numbers below 1 give 0.
    """
    if number < 1:
        return 0
    total = 0
    for small in range(1, math.isqrt(number - 1) + 1):
        if number % small == 0:
            total += small
            large = number // small
            if large != number:
                total += large
    return total


def amicable_numbers(number: int) -> int:
    """Sum of the amicable numbers from 1 to ``number`` inclusive."""
    total = 0
    for n in range(1, number + 1):
        partner = divisor_sum(n)
        if partner != n and divisor_sum(partner) == n:
            total += n
    return total


def triangle_number(nth: int) -> int:
    """The ``nth`` triangle number, 1 + 2 + ... + nth."""
    return nth * (nth + 1) // 2


def count_divisors(number: int) -> int:
    """Divisor count of ``number`` less one.

    For a perfect square every divisor up to the root counts once; otherwise
    each such divisor counts twice, for itself and its cofactor.
    """
    if number < 0:
        raise ValueError(f"number must not be negative, got {number}")
    root = math.isqrt(number)
    small = sum(1 for d in range(1, root + 1) if number % d == 0)
    weight = 1 if root * root == number else 2
    return weight * small - 1


def divisible_triangle_number(number: int) -> int:
    """First triangle number whose :func:`count_divisors` reaches ``number``.

    Returns 0 when ``number`` is not positive.
    """
    if number <= 0:
        return 0
    for nth in count(1):
        candidate = triangle_number(nth)
        if count_divisors(candidate) >= number:
            return candidate
    raise AssertionError("unreachable")