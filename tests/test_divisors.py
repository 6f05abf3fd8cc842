import pytest

from eulerkit.divisors import (
    amicable_numbers,
    count_divisors,
    divisible_triangle_number,
    divisor_sum,
    triangle_number,
)

PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 97]


def test_divisor_sum_of_amicable_pair():
    assert divisor_sum(220) == 284
    assert divisor_sum(284) == 220


@pytest.mark.parametrize("p", PRIMES)
def test_divisor_sum_of_prime_is_one(p):
    assert divisor_sum(p) == divisor_sum(1) + 1


@pytest.mark.parametrize("p", PRIMES)
def test_divisor_sum_of_prime_square_skips_root(p):
    assert divisor_sum(p * p) == divisor_sum(p)


@pytest.mark.parametrize("n", [0, -4])
def test_divisor_sum_nonpositive(n):
    assert divisor_sum(n) == 0


@pytest.mark.parametrize("member", [220, 284])
def test_amicable_members_are_counted(member):
    assert amicable_numbers(member) - amicable_numbers(member - 1) == member


def test_amicable_sum_non_decreasing():
    values = [amicable_numbers(n) for n in range(0, 300, 20)]
    assert values == sorted(values)


def test_amicable_below_first_pair_is_zero():
    assert amicable_numbers(219) == amicable_numbers(0)


@pytest.mark.parametrize("n", range(0, 30))
def test_triangle_number_recurrence(n):
    assert triangle_number(n + 1) - triangle_number(n) == n + 1


@pytest.mark.parametrize("p", PRIMES)
def test_count_divisors_prime_square_matches_prime(p):
    assert count_divisors(p * p) == count_divisors(p)


def test_count_divisors_rejects_negative():
    with pytest.raises(ValueError):
        count_divisors(-1)


def test_divisible_triangle_worked_example():
    assert divisible_triangle_number(5) == triangle_number(7)


@pytest.mark.parametrize("target", [1, 5, 10, 20, 50])
def test_divisible_triangle_is_first_to_reach(target):
    result = divisible_triangle_number(target)
    assert count_divisors(result) >= target
    earlier = []
    nth = 1
    while triangle_number(nth) < result:
        earlier.append(triangle_number(nth))
        nth += 1
    assert triangle_number(nth) == result
    assert all(count_divisors(t) < target for t in earlier)


@pytest.mark.parametrize("target", [0, -3])
def test_divisible_triangle_nonpositive(target):
    assert divisible_triangle_number(target) == 0