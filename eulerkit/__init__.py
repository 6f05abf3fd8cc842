"""Functions for classic number puzzles: arithmetic, primes, divisors, sequences, digits, grids, words and dates."""

__version__ = "0.1.0"