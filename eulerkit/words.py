"""Letter counts of written numbers and alphabetical name scores."""

from __future__ import annotations

from collections.abc import Iterable

_UNDER_20 = (
    "", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)
_TENS = ("", "", "twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety")
_MAX_NAME = 100


def letter_count(number: int) -> int:
    """Letters used to write ``number`` (0..1000) in British English words.

    Spaces and hyphens are not counted; "and" follows the hundreds.
    """
    if not 0 <= number <= 1000:
        raise ValueError(f"number must be between 0 and 1000, got {number}")
    if number == 1000:
        return len("one") + len("thousand")
    total = 0
    hundreds, rest = divmod(number, 100)
    if hundreds:
        total += len(_UNDER_20[hundreds]) + len("hundred")
        if rest:
            total += len("and")
    if rest >= 20:
        total += len(_TENS[rest // 10])
        rest %= 10
    return total + len(_UNDER_20[rest])


def number_letter_counts(number: int) -> int:
    """Total letters used to write every number from 1 to ``number``."""
    return sum(letter_count(n) for n in range(1, number + 1))


def string_score(string: str) -> int:
    """Alphabetical value of a name: A is 1, B is 2 and so on.

    Reading stops at a NUL character or after 100 characters.
    """
    name = string.split("\0", 1)[0][:_MAX_NAME]
    return sum(ord(char) - 64 for char in name)


def name_scores(names: Iterable[str]) -> int:
    """Sum of each name's score times its position in sorted order."""
    return sum(
        string_score(name) * position
        for position, name in enumerate(sorted(names), start=1)
    )