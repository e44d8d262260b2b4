import math

import pytest

from seqlab.numbers import (
    combination,
    divides_all,
    euclid_gcd,
    factorial,
    factorial_array,
    fibonacci_array,
    gcd_array,
    is_perfect,
    is_prime,
    largest_prime_factor,
    list_mersenne_primes,
    list_primes,
    next_perfect_number,
    next_twin_primes,
    permutation,
    positive_difference,
    power,
    same_sign,
    sieve_of_eratosthenes,
    sum_even,
    sum_first_n_integers,
    sum_proper_divisors,
    trivial_gcd,
    trivial_prime_finder,
    which_is_greater,
)


@pytest.mark.parametrize("n", [0, 1, 5, 12])
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_array_entries():
    values = factorial_array(10)
    assert values == [math.factorial(i) for i in range(11)]


def test_factorial_array_rejects_negative():
    with pytest.raises(ValueError):
        factorial_array(-1)


@pytest.mark.parametrize("a,b", [(12, 18), (7, 13), (100, 75), (9, 9)])
def test_gcds_agree_with_math(a, b):
    assert trivial_gcd(a, b) == math.gcd(a, b)
    assert euclid_gcd(a, b) == math.gcd(a, b)


def test_euclid_gcd_rejects_zero():
    with pytest.raises(ValueError):
        euclid_gcd(0, 5)


def test_gcd_array():
    numbers = [24, 36, 60]
    assert gcd_array(numbers) == math.gcd(*numbers)


def test_gcd_array_empty():
    with pytest.raises(ValueError):
        gcd_array([])


def test_sums_closed_forms():
    for n in range(0, 20):
        assert sum_first_n_integers(n) == n * (n + 1) // 2
    assert sum_even(10) == 2 * sum_first_n_integers(5)
    assert sum_even(11) == sum_even(10)


def test_sieve_agrees_with_trivial_finder():
    assert sieve_of_eratosthenes(200) == trivial_prime_finder(200)


def test_list_primes_are_prime_and_complete():
    primes = list_primes(100)
    for p in primes:
        assert all(p % d for d in range(2, p))
    assert [p for p in range(101) if is_prime(p)] == primes


def test_composites_are_not_prime():
    for a in range(2, 12):
        for b in range(2, 12):
            assert not is_prime(a * b)


def test_is_prime_small_values():
    assert not is_prime(0)
    assert not is_prime(1)
    assert is_prime(2)


def test_permutation_and_combination():
    for n in range(0, 10):
        for k in range(0, n + 1):
            assert permutation(n, k) == math.perm(n, k)
            assert combination(n, k) == math.comb(n, k)


def test_power():
    assert power(3, 5) == 3 ** 5
    assert power(7, 0) == 1
    assert power(7, -2) == 1


def test_sum_proper_divisors_and_perfect():
    assert sum_proper_divisors(12) == 1 + 2 + 3 + 4 + 6
    assert next_perfect_number(1) == 6
    assert is_perfect(next_perfect_number(6))
    assert next_perfect_number(6) > 6


def test_divides_all():
    assert divides_all([4, 8, 12], 4)
    assert not divides_all([4, 8, 13], 4)
    assert not divides_all([4, 8], 0)


def test_which_is_greater_and_signs():
    assert which_is_greater(3, 3) == 0
    assert which_is_greater(5, 2) == 1
    assert which_is_greater(2, 5) == -1
    assert same_sign(0, -4)
    assert same_sign(3, 0)
    assert not same_sign(-1, 1)
    assert positive_difference(3, 10) == positive_difference(10, 3) == 7


def test_fibonacci_array():
    assert fibonacci_array(5) == [1, 1, 2, 3, 5, 8]
    values = fibonacci_array(20)
    assert len(values) == 21
    assert all(values[i] == values[i - 1] + values[i - 2] for i in range(2, 21))
    assert fibonacci_array(0) == [1]


def test_mersenne_primes():
    result = list_mersenne_primes(12)
    assert result == sorted(result)
    for m in result:
        assert is_prime(m)
        assert (m + 1) & m == 0
    assert 2 ** 7 - 1 in result
    assert 23 * 89 == 2 ** 11 - 1
    assert 2 ** 11 - 1 not in result


def test_next_twin_primes():
    for n in (1, 10, 50, 100):
        p, q = next_twin_primes(n)
        assert q == p + 2
        assert p > n
        assert is_prime(p) and is_prime(q)
        assert not any(is_prime(i) and is_prime(i + 2) for i in range(n + 1, p))


def test_largest_prime_factor():
    assert largest_prime_factor(13195) == 29
    for n in (2, 60, 97, 1001):
        f = largest_prime_factor(n)
        assert n % f == 0 and is_prime(f)
        assert all(not (n % q == 0 and is_prime(q)) for q in range(f + 1, n + 1))