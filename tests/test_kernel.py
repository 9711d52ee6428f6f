"""Unit tests for the number-theory kernel."""

import pytest

from src.kernel import (
    fibonacci,
    is_prime,
    filter_primes,
    gcd,
    lcm,
    gcd_all,
    lcm_all,
)


def _is_prime_by_definition(x: int) -> bool:
    return x > 1 and all(x % d for d in range(2, x))


class TestFibonacci:
    """Tests for the Fibonacci generator."""

    def test_first_five_terms(self):
        assert fibonacci(5) == [0, 1, 1, 2, 3]

    def test_single_term(self):
        assert fibonacci(1) == [0]

    def test_two_terms(self):
        assert fibonacci(2) == [0, 1]

    def test_non_positive_is_empty(self):
        assert fibonacci(0) == []
        assert fibonacci(-3) == []

    @pytest.mark.parametrize("n", [3, 10, 57, 1000])
    def test_recurrence_holds(self, n):
        """Every term after the second is the sum of the two before it."""
        series = fibonacci(n)

        assert len(series) == n
        assert series[:2] == [0, 1]
        for i in range(2, n):
            assert series[i] == series[i - 1] + series[i - 2]

    def test_large_terms_are_exact(self):
        """Terms beyond float precision stay exact integers."""
        series = fibonacci(100)
        assert series[99] == 218922995834555169026


class TestIsPrime:
    """Tests for the primality test."""

    def test_small_cases(self):
        assert is_prime(2)
        assert is_prime(3)
        assert not is_prime(1)
        assert not is_prime(0)
        assert not is_prime(-7)
        assert not is_prime(4)
        assert not is_prime(9)

    def test_agrees_with_definition(self):
        for x in range(-20, 500):
            assert is_prime(x) == _is_prime_by_definition(x), x

    def test_square_of_prime(self):
        """Divisor equal to isqrt(x) is checked."""
        assert not is_prime(49)
        assert not is_prime(10007 * 10007)

    def test_large_prime(self):
        assert is_prime(1_000_000_007)

    def test_filter_keeps_order(self):
        assert filter_primes([2, 3, 4, 5, 9, 11]) == [2, 3, 5, 11]
        assert filter_primes([11, 4, 2, 11]) == [11, 2, 11]
        assert filter_primes([0, 1, -5]) == []


class TestGcd:
    """Tests for GCD and its fold."""

    def test_pairwise(self):
        assert gcd(12, 18) == 6
        assert gcd(-12, 18) == 6
        assert gcd(7, 0) == 7
        assert gcd(-7, 0) == 7
        assert gcd(0, 0) == 0

    def test_fold(self):
        assert gcd_all([12, 18, 24]) == 6
        assert gcd_all([17]) == 17
        assert gcd_all([-4]) == 4

    def test_fold_divides_every_element(self):
        values = [84, 126, 210, 462]
        result = gcd_all(values)

        assert all(v % result == 0 for v in values)
        assert not any(
            all(v % d == 0 for v in values) for d in range(result + 1, min(values) + 1)
        )

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            gcd_all([])


class TestLcm:
    """Tests for LCM and its fold."""

    def test_pairwise(self):
        assert lcm(4, 6) == 12
        assert lcm(-4, 6) == 12
        assert lcm(0, 5) == 0
        assert lcm(5, 0) == 0

    def test_fold(self):
        assert lcm_all([4, 6]) == 12
        assert lcm_all([2, 3, 4, 5]) == 60
        assert lcm_all([9]) == 9

    def test_fold_with_zero(self):
        assert lcm_all([3, 0, 7]) == 0

    def test_fold_is_smallest_common_multiple(self):
        values = [6, 10, 15]
        result = lcm_all(values)

        assert all(result % v == 0 for v in values)
        assert not any(all(m % v == 0 for v in values) for m in range(1, result))

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            lcm_all([])
