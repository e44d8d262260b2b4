"""Elementary number theory: factorials, divisors, primes and friends."""

from __future__ import annotations

import itertools
import math
import operator
from collections.abc import Sequence


def factorial(n: int) -> int:
    """Return ``n!``; non-positive ``n`` gives 1."""
    return math.prod(range(1, n + 1))


def factorial_array(n: int) -> list[int]:
    """Return ``[0!, 1!, ..., n!]``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return list(itertools.accumulate(range(1, n + 1), operator.mul, initial=1))


def trivial_gcd(a: int, b: int) -> int:
    """Return the greatest common divisor by trying every candidate up to ``min(a, b)``."""
    return max(
        (d for d in range(1, min(a, b) + 1) if a % d == 0 and b % d == 0),
        default=1,
    )


def euclid_gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two positive integers by Euclid's method."""
    if a <= 0 or b <= 0:
        raise ValueError(f"euclid_gcd needs positive integers, got {a} and {b}")
    while b:
        a, b = b, a % b
    return a


def gcd_array(numbers: Sequence[int]) -> int:
    """Return the greatest common divisor of all the numbers."""
    if not numbers:
        raise ValueError("gcd_array needs at least one number")
    smallest = min(numbers)
    return max(
        (d for d in range(1, smallest + 1) if divides_all(numbers, d)),
        default=1,
    )


def sum_first_n_integers(n: int) -> int:
    """Return ``1 + 2 + ... + n``."""
    return sum(range(1, n + 1))


def sum_even(k: int) -> int:
    """Return the sum of the even numbers from 0 to ``k``."""
    return sum(range(0, k + 1, 2))


def is_prime(p: int) -> bool:
    """Return whether ``p`` is prime."""
    if p < 2:
        return False
    return all(p % d for d in range(2, math.isqrt(p) + 1))


def trivial_prime_finder(n: int) -> list[bool]:
    """Return flags for ``0..n`` telling which are prime, testing each number on its own."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return [is_prime(p) for p in range(n + 1)]


def sieve_of_eratosthenes(n: int) -> list[bool]:
    """Return flags for ``0..n`` telling which are prime, found by sieving."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    flags = [p >= 2 for p in range(n + 1)]
    for p in range(2, math.isqrt(n) + 1):
        if flags[p]:
            multiples = range(2 * p, n + 1, p)
            flags[2 * p::p] = [False] * len(multiples)
    return flags


def list_primes(n: int) -> list[int]:
    """Return the primes up to and including ``n`` in increasing order."""
    return [p for p, prime in enumerate(sieve_of_eratosthenes(n)) if prime]


def permutation(n: int, k: int) -> int:
    """Return the number of ordered selections of ``k`` items from ``n``."""
    return math.prod(range(n, n - k, -1))


def combination(n: int, k: int) -> int:
    """Return the number of unordered selections of ``k`` items from ``n``."""
    return permutation(n, k) // factorial(k)


def power(a: int, b: int) -> int:
    """Return ``a`` to the power ``b``; a non-positive exponent gives 1."""
    return a ** b if b > 0 else 1


def sum_proper_divisors(n: int) -> int:
    """Return the sum of the divisors of ``n`` smaller than ``n``."""
    return sum(d for d in range(1, n) if n % d == 0)


def divides_all(numbers: Sequence[int], d: int) -> bool:
    """Return whether ``d`` divides every number; 0 divides nothing."""
    return d != 0 and all(value % d == 0 for value in numbers)


def which_is_greater(x: int, y: int) -> int:
    """Return 1 if ``x > y``, -1 if ``x < y`` and 0 if they are equal."""
    if x == y:
        return 0
    return 1 if x > y else -1


def same_sign(x: int, y: int) -> bool:
    """Return whether ``x`` and ``y`` are both non-negative or both non-positive."""
    return (x >= 0 and y >= 0) or (x <= 0 and y <= 0)


def positive_difference(a: int, b: int) -> int:
    """Return the absolute difference of two numbers."""
    return abs(a - b)


def fibonacci_array(n: int) -> list[int]:
    """Return the first ``n + 1`` Fibonacci numbers, starting ``1, 1``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    numbers = [1, 1][: n + 1]
    while len(numbers) <= n:
        numbers.append(numbers[-1] + numbers[-2])
    return numbers


def is_perfect(n: int) -> bool:
    """Return whether ``n`` equals the sum of its proper divisors."""
    return n == sum_proper_divisors(n)


def next_perfect_number(n: int) -> int:
    """Return the smallest perfect number greater than ``n``."""
    return next(i for i in itertools.count(n + 1) if is_perfect(i))


def list_mersenne_primes(n: int) -> list[int]:
    """Return the primes of the form ``2**p - 1`` for ``p`` from 1 to ``n``."""
    return [m for m in (power(2, p) - 1 for p in range(1, n + 1)) if is_prime(m)]


def next_twin_primes(n: int) -> tuple[int, int]:
    """Return the first pair of primes ``(p, p + 2)`` with ``p > n``."""
    p = next(i for i in itertools.count(n + 1) if is_prime(i) and is_prime(i + 2))
    return p, p + 2


def largest_prime_factor(n: int) -> int:
    """Return the largest prime dividing ``n``, or 1 when ``n < 2``."""
    return next((i for i in range(n, 1, -1) if n % i == 0 and is_prime(i)), 1)