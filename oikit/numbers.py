"""Prime sieves, primality, interpolation, gcd, integer square root and powers."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator

__all__ = [
    "linear_sieve",
    "sieve_6k",
    "is_prime",
    "lagrange_interpolate",
    "binary_gcd",
    "isqrt32",
    "fast_pow",
]

_U32 = 1 << 32


def linear_sieve(n: int) -> list[int]:
    """All primes up to and including ``n``, by the linear (Euler) sieve."""
    if n < 2:
        return []
    composite = bytearray(n + 1)
    primes: list[int] = []
    for i in range(2, n + 1):
        if not composite[i]:
            primes.append(i)
        for p in primes:
            if i * p > n:
                break
            composite[i * p] = 1
            if i % p == 0:
                break
    return primes


def _six_k_candidates(n: int) -> Iterator[int]:
    for base in range(6, n + 2, 6):
        for candidate in (base - 1, base + 1):
            if candidate <= n:
                yield candidate


def sieve_6k(n: int) -> list[int]:
    """All primes up to and including ``n``, visiting only 2, 3 and numbers 6k±1."""
    primes = [p for p in (2, 3) if p <= n]
    if n < 5:
        return primes
    composite = bytearray(n + 1)
    for c in _six_k_candidates(n):
        if not composite[c]:
            primes.append(c)
        for p in primes:
            if c * p > n:
                break
            composite[c * p] = 1
            if c % p == 0:
                break
    return primes


def is_prime(x: int) -> bool:
    """Trial-division primality test over 6k±1 divisors."""
    if x <= 1:
        return False
    if x in (2, 3):
        return True
    if x % 2 == 0 or x % 3 == 0:
        return False
    i = 5
    while i * i <= x:
        if x % i == 0 or x % (i + 2) == 0:
            return False
        i += 6
    return True


def lagrange_interpolate(points: Iterable[tuple[float, float]], x: float) -> float:
    """Value at ``x`` of the Lagrange polynomial through ``points`` of (x, y) pairs."""
    pts = list(points)
    xs = [px for px, _ in pts]
    if len(set(xs)) != len(xs):
        raise ValueError("interpolation points must have distinct x values")
    total = 0.0
    for i, (xi, yi) in enumerate(pts):
        term = float(yi)
        for j, xj in enumerate(xs):
            if j != i:
                term = term * (x - xj) / (xi - xj)
        total += term
    return total


def binary_gcd(x: int, y: int) -> int:
    """Greatest common divisor of two non-negative integers by Stein's algorithm."""
    if x < 0 or y < 0:
        raise ValueError("binary_gcd needs non-negative integers")
    shift = 0
    while True:
        if x == 0:
            return y << shift
        if y == 0:
            return x << shift
        x_even, y_even = not x & 1, not y & 1
        if x_even and y_even:
            x >>= 1
            y >>= 1
            shift += 1
        elif x_even:
            x >>= 1
        elif y_even:
            y >>= 1
        else:
            x, y = abs(x - y), min(x, y)


def isqrt32(x: int) -> int:
    """Floor of the square root of an unsigned 32-bit integer."""
    if not 0 <= x < _U32:
        raise ValueError("x must fit in 32 unsigned bits")
    return math.isqrt(x)


def fast_pow(x: float, n: int) -> float:
    """``x`` raised to the integer power ``n`` by repeated squaring."""
    if x == 1.0:
        return 1.0
    if n < 0:
        x = 1 / x
        n = -n
    result = 1.0
    while n:
        if n & 1:
            result *= x
        n >>= 1
        x *= x
    return result