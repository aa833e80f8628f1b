"""Check that prefix and suffix gcd arrays can come from one array."""

from __future__ import annotations

from math import gcd, lcm
from typing import Sequence


def is_consistent_gcd(prefix: Sequence[int], suffix: Sequence[int]) -> bool:
    """Return whether some array has these prefix and suffix gcds."""
    n = len(prefix)
    if len(suffix) != n:
        raise ValueError("prefix and suffix must have the same length")
    if n == 0:
        return True
    if n == 1:
        return prefix[0] == suffix[0]

    if gcd(prefix[0], suffix[1]) != suffix[0]:
        return False
    if gcd(prefix[-2], suffix[-1]) != prefix[-1]:
        return False
    for i in range(1, n - 1):
        candidate = lcm(prefix[i], suffix[i])
        if gcd(candidate, prefix[i - 1]) != prefix[i]:
            return False
        if gcd(candidate, suffix[i + 1]) != suffix[i]:
            return False
    return True