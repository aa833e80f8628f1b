"""Counting how many gifts are needed to reach a target value."""

from __future__ import annotations

from bisect import bisect_left
from itertools import accumulate
from typing import Iterable


def _running_totals(ordered: list[int]) -> list[int]:
    best, second = ordered[-1], ordered[-2]
    descending = ordered[::-1]
    steps: list[int] = []
    for position, value in enumerate(descending):
        if 2 * value >= best:
            steps.append(2 * value)
            continue
        steps.extend([best] * position)
        for remaining in descending[position:]:
            if 2 * remaining < second:
                break
            steps.extend((2 * remaining, best))
        break
    else:
        steps.extend([best] * (len(ordered) - 1))
    return list(accumulate(steps))


def gifts_needed(values: Iterable[int], target: int) -> int:
    """Return the fewest gifts whose total reaches ``target``.

    Gifts are taken greedily in the order of their value; once the planned
    ones run out the two best values alternate.
    """
    ordered = sorted(values)
    if len(ordered) < 2:
        raise ValueError("at least two values are required")
    if ordered[0] <= 0:
        raise ValueError("values must be positive")

    totals = _running_totals(ordered)
    if totals[-1] < target:
        best, second = ordered[-1], ordered[-2]
        rest = target - totals[-1]
        pair = best + second
        count = len(totals) + (rest // pair) * 2
        return count + (1 if rest % pair <= second else 2)
    return bisect_left(totals, target) + 1