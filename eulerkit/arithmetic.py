"""Elementary number puzzles: multiples, Fibonacci sums, palindromes and paths."""

from __future__ import annotations

import math
from itertools import product


def multiples_of_3_or_5(number: int) -> int:
    """Sum of the non-negative integers below ``number`` divisible by 3 or 5."""
    return sum(n for n in range(number) if n % 3 == 0 or n % 5 == 0)


def even_fibonacci_numbers(number: int) -> int:
    """Sum the even Fibonacci terms generated while the last term is below ``number``.

    The sequence starts 1, 2 with 2 already counted. The term that first
    reaches or passes ``number`` is still added when it is even.
    """
    total = 2
    first, second = 1, 2
    latest = 0
    while latest < number:
        latest = first + second
        if latest % 2 == 0:
            total += latest
        first, second = second, latest
    return total


def smallest_multiple(number: int) -> int:
    """Smallest integer not below ``number`` that every value in 1..number divides.

    Values below 1 are returned unchanged.
    """
    if number < 1:
        return number
    return math.lcm(*range(1, number + 1))


def sum_square_difference(number: int) -> int:
    """Square of the sum of 1..number minus the sum of their squares."""
    values = range(1, number + 1)
    return sum(values) ** 2 - sum(n * n for n in values)


def special_pythagorean_triplet(number: int) -> int:
    """Product a*b*c of the first triplet a < b < c with a + b + c == number.

    Returns 0 when no Pythagorean triplet has that perimeter.
    """
    for a in range(1, number):
        for b in range(a + 1, number):
            c = number - a - b
            if c <= b:
                break
            if c * c == a * a + b * b:
                return a * b * c
    return 0


def is_palindrome(number: int) -> bool:
    """Whether the decimal digits of ``number`` read the same both ways.

    Numbers below 1 have no digits and count as palindromes.
    """
    if number <= 0:
        return True
    digits = str(number)
    return digits == digits[::-1]


def largest_palindrome_product(number: int) -> int:
    """Largest palindrome made from the product of two ``number``-digit numbers.

    Returns 0 when there is none.
    """
    upper = 10**number - 1
    lower = 10 ** (number - 1) - 1 if number >= 1 else 0
    factors = range(upper, lower, -1)
    return max(
        (i * j for i, j in product(factors, repeat=2) if is_palindrome(i * j)),
        default=0,
    )


def lattice_paths(number: int) -> int:
    """Number of corner-to-corner routes through a ``number`` x ``number`` grid.

    Computed in floating point as a running product, then truncated.
    """
    n, k = number * 2, number
    total = 2.0 * 10
    for index in range(1, n - k):
        total = total * (n - index) / (k - index)
    return int(total) // 10