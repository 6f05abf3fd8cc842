# eulerkit

Small functions for classic number puzzles, with no third-party
dependencies. Each function takes plain Python values (integers, strings,
lists of lists) and returns an integer or a boolean.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `eulerkit.arithmetic`
  - `multiples_of_3_or_5(number)`: sum of the integers below `number` divisible by 3 or 5.
  - `even_fibonacci_numbers(number)`: sum of the even Fibonacci terms (starting 1, 2) generated while the last term is below `number`; the term that first reaches `number` is still added if it is even.
  - `smallest_multiple(number)`: least common multiple of 1..`number`; values below 1 are returned unchanged.
  - `sum_square_difference(number)`: square of the sum of 1..`number` minus the sum of the squares.
  - `special_pythagorean_triplet(number)`: product `a*b*c` of the first Pythagorean triplet with perimeter `number`, or 0.
  - `is_palindrome(number)`: whether the decimal digits read the same both ways (numbers below 1 count as palindromes).
  - `largest_palindrome_product(number)`: largest palindrome that is a product of two `number`-digit numbers, or 0.
  - `lattice_paths(number)`: routes through a `number` x `number` grid, computed as a floating-point running product and truncated.
- `eulerkit.primes`
  - `largest_prime_factor(number)`: largest prime factor; 1 gives 2, non-positive values raise `ValueError`.
  - `nth_prime(number)`: the `number`-th prime (2 is the first); non-positive values raise `ValueError`.
  - `sum_of_primes(number)`: sum of all primes strictly below `number`.
- `eulerkit.divisors`
  - `divisor_sum(number)`: sum of the divisors other than `number` itself, leaving out an exact square root; values below 1 give 0.
  - `amicable_numbers(number)`: sum of the amicable numbers from 1 to `number`, judged by `divisor_sum`.
  - `triangle_number(nth)`: `1 + 2 + ... + nth`.
  - `count_divisors(number)`: divisor count less one, where a perfect square counts each divisor up to its root once and other numbers count each such divisor twice; negative values raise `ValueError`.
  - `divisible_triangle_number(number)`: first triangle number whose `count_divisors` reaches `number`; 0 when `number` is not positive.
- `eulerkit.sequences`
  - `collatz_sequence(number)`: Collatz steps from `number` down to 1.
  - `longest_collatz_sequence(number)`: start value in 2..`number` with the most steps (ties go to the larger start), or 0 below 2.
- `eulerkit.digits`
  - `digit_sum(number)`: sum of the decimal digits; negative values raise `ValueError`.
  - `factorial_digit_sum(number)`: digit sum of `number!`, taken over its lowest 499 digits; values below 2 give 0.
  - `power_digit_sum(number)`: digit sum of `2 ** number`, taken over its lowest 499 digits; values below 1 give 0.
  - `large_sum(numbers)`: first ten digits of the sum of a list of 50-digit decimal strings; any other string raises `ValueError`.
- `eulerkit.grids`
  - `largest_grid_product(grid)`: greatest product of four adjacent cells across, down or diagonally; 0 for an empty grid, `ValueError` for ragged rows.
  - `maximum_path_sum_1(triangle)`: maximum top-to-bottom path total; the triangle needs at least two rows, otherwise `ValueError`.
- `eulerkit.words`
  - `letter_count(number)`: letters used to write `number` (0..1000) in British English, with "and" after the hundreds; other values raise `ValueError`.
  - `number_letter_counts(number)`: total letters for 1..`number`.
  - `string_score(string)`: alphabetical value of an upper-case name (A = 1); reading stops at a NUL character or after 100 characters.
  - `name_scores(names)`: sum of each name's score times its position in sorted order.
- `eulerkit.dates`
  - `is_leap_year(year)`: Gregorian leap-year rule.
  - `year_sundays(year)`: months in `year` whose first day is a Sunday (years before 1899 are treated as starting on a Sunday).
  - `counting_sundays(start_year, end_year)`: Sundays on the first of a month over the inclusive range of years.

## Examples

```python
from eulerkit.arithmetic import multiples_of_3_or_5
from eulerkit.primes import largest_prime_factor, nth_prime
from eulerkit.dates import counting_sundays
from eulerkit.grids import maximum_path_sum_1

multiples_of_3_or_5(10)             # 23
largest_prime_factor(13195)         # 29
nth_prime(6)                        # 13
counting_sundays(1901, 2000)        # Sundays falling on the first of a month

maximum_path_sum_1([
    [3],
    [7, 4],
    [2, 4, 6],
    [8, 5, 9, 3],
])                                  # 23
```

## What it does not do

eulerkit is a library only. It has no command-line program, and it does
not read puzzle data from files: grids, triangles, name lists and the
50-digit numbers for `large_sum` must be loaded by the caller and passed
in as Python values.