"""Prime factors, the n-th prime and sums of primes."""

from __future__ import annotations

import math
from itertools import count, islice, takewhile
from typing import Iterator


def _primes() -> Iterator[int]:
    found: list[int] = []
    for candidate in count(2):
        small = takewhile(lambda p: p * p <= candidate, found)
        if all(candidate % p for p in small):
            found.append(candidate)
            yield candidate


def largest_prime_factor(number: int) -> int:
    """Largest prime factor of ``number``; 1 yields 2."""
    if number < 1:
        raise ValueError(f"number must be positive, got {number}")
    if number == 1:
        return 2
    factor = 2
    while factor * factor <= number:
        if number % factor == 0:
            number //= factor
        else:
            factor += 1
    return number


def nth_prime(number: int) -> int:
    """The ``number``-th prime, counting 2 as the first."""
    if number < 1:
        raise ValueError(f"number must be positive, got {number}")
    return next(islice(_primes(), number - 1, None))


def sum_of_primes(number: int) -> int:
    """Sum of all primes strictly below ``number``."""
    if number <= 2:
        return 0
    sieve = bytearray([1]) * number
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(number - 1) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, number, i)))
    return sum(i for i, flag in enumerate(sieve) if flag)