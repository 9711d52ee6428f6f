"""Kernel module - Number-theory computations."""

from .number_theory import (
    fibonacci,
    is_prime,
    filter_primes,
    gcd,
    lcm,
    gcd_all,
    lcm_all,
)


__all__ = [
    "fibonacci",
    "is_prime",
    "filter_primes",
    "gcd",
    "lcm",
    "gcd_all",
    "lcm_all",
]
