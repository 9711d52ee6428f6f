"""Pure number-theory routines used by the /bfhl operations."""

from functools import reduce
from math import isqrt
from typing import Iterable, Sequence


def fibonacci(n: int) -> list[int]:
    """Return the first ``n`` Fibonacci terms, starting 0, 1.

    Args:
        n: Number of terms. Non-positive values yield an empty list.

    Returns:
        The sequence as exact integers.
    """
    if n <= 0:
        return []
    series = [0]
    if n == 1:
        return series
    series.append(1)
    while len(series) < n:
        series.append(series[-1] + series[-2])
    return series


def is_prime(x: int) -> bool:
    """Trial-division primality test over odd divisors up to isqrt(x)."""
    if x <= 1:
        return False
    if x <= 3:
        return True
    if x % 2 == 0:
        return False
    for divisor in range(3, isqrt(x) + 1, 2):
        if x % divisor == 0:
            return False
    return True


def filter_primes(values: Iterable[int]) -> list[int]:
    """Keep the prime members of ``values`` in their original order."""
    return [value for value in values if is_prime(value)]


def gcd(a: int, b: int) -> int:
    """Euclidean GCD on absolute values; gcd(a, 0) == |a|."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; zero when either operand is zero."""
    if a == 0 or b == 0:
        return 0
    return abs(a // gcd(a, b) * b)


def gcd_all(values: Sequence[int]) -> int:
    """Fold ``gcd`` across a non-empty sequence.

    Raises:
        ValueError: If ``values`` is empty.
    """
    if not values:
        raise ValueError("gcd_all requires at least one value")
    return reduce(gcd, values)


def lcm_all(values: Sequence[int]) -> int:
    """Fold ``lcm`` across a non-empty sequence.

    Raises:
        ValueError: If ``values`` is empty.
    """
    if not values:
        raise ValueError("lcm_all requires at least one value")
    return reduce(lcm, values)
