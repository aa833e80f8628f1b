"""Problems from a combined contest: grid feasibility and pile operations."""

from __future__ import annotations

from typing import Iterable


def grid_possible(n: int, m: int) -> bool:
    """Return whether an ``n`` by ``m`` grid admits the required arrangement."""
    if n == 1 or m == 1:
        return False
    if n == 2 and m == 2:
        return False
    return True


def min_pile_operations(piles: Iterable[tuple[int, int, int, int]]) -> int:
    """Return the operations needed to turn each pile (a, b) into at most (c, d).

    Removing from the bottom part ``b`` while ``a`` is non-empty first
    costs moving ``min(a, c)`` items out of the way.
    """
    cost = 0
    for a, b, c, d in piles:
        if a == 0 and b > d:
            cost += b - d
            b = d
        if b > d:
            cost += b - d + min(a, c)
            b = d
        if a > c:
            cost += a - c
    return cost