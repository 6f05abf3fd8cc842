"""Collatz sequence lengths."""

from __future__ import annotations


def collatz_sequence(number: int) -> int:
    """Number of Collatz steps taken from ``number`` down to 1."""
    steps = 0
    while number > 1:
        number = number // 2 if number % 2 == 0 else 3 * number + 1
        steps += 1
    return steps


def longest_collatz_sequence(number: int) -> int:
    """Start value in 2..number with the longest Collatz sequence.

    Ties go to the larger start value; returns 0 when ``number`` is below 2.
    """
    return max(range(number, 1, -1), key=collatz_sequence, default=0)