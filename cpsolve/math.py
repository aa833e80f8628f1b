"""Number exercises: paper folding, organisation days, plus-minus splits and divisor sums."""

from __future__ import annotations

from math import isqrt
from typing import Iterable

MOD = 10**9 + 7


def can_fold(length: int, width: int, area: int) -> bool:
    """Return whether a ``length`` by ``width`` sheet folds in halves down to ``area``.

    That holds when the sheet's area is ``area`` times a power of two.
    """
    if area <= 0:
        raise ValueError("area must be a positive integer")
    target = length * width
    while target >= area:
        if area == target:
            return True
        area *= 2
    return False


def min_days(counts: Iterable[int], k: int) -> int:
    """Return the fewest days to serve every member when ``k`` can be served per day.

    No organisation can be served twice on one day, so the answer is at
    least the largest single count.
    """
    if k <= 0:
        raise ValueError("k must be a positive integer")
    total = 0
    largest = 0
    for count in counts:
        total += count
        largest = max(largest, count)
    return max(largest, -(-total // k))


def plus_minus_possible(n: int) -> bool:
    """Return whether 1..n can be signed with + and - to sum to zero."""
    remainder = abs(n) % 4
    if n < 0:
        remainder = -remainder
    return remainder not in (1, 2)


def _divisors_minus_one(n: int) -> int:
    root = isqrt(n)
    count = -1
    for i in range(1, root + 1):
        if i * i == n:
            count += 1
        elif n % i == 0:
            count += 2
    return count


def divisor_sum(n: int) -> int:
    """Return the divisor-sum total for ``n``, modulo 1e9+7."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    f = _divisors_minus_one(n)

    if n % 2 == 0:
        m = n // 2
        base = ((n - 1) % MOD) * (m - f) % MOD
        base = (base + (n % MOD) * f % MOD) % MOD
        if m % 2 == 0:
            extra = (m // 2) % MOD * ((n + 2) % MOD + (m - 1) % MOD) % MOD
        else:
            extra = m % MOD * ((m + 1) % MOD + ((m - 1) // 2) % MOD) % MOD
        return (base + extra) % MOD

    lower = n // 2
    upper = lower + 1
    base = ((n - 1) % MOD) * ((lower - f) % MOD) % MOD
    base = (base + (n % MOD) * f % MOD) % MOD
    if upper % 2 == 0:
        factor = ((2 * upper) % MOD + (upper - 1) % MOD) % MOD
        extra = (upper // 2) % MOD * factor % MOD
    else:
        factor = (upper % MOD + ((upper - 1) // 2) % MOD) % MOD
        extra = upper % MOD * factor % MOD
    return (base + extra) % MOD