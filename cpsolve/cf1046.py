"""Problems from a division 2 contest: score shares, peak permutations, blocks and a hidden point."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Callable, Iterable

STEP = 10**9


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _minority_ok(first: int, second: int) -> bool:
    allowed = _trunc_div(first + second, 3)
    return min(first, second) >= allowed


def balanced_score(a: int, b: int, c: int, d: int) -> bool:
    """Return whether a match going from a:b at half time to c:d stays balanced.

    In each half the side that scored less must have at least a third
    (rounded down) of that half's points.
    """
    return _minority_ok(a, b) and _minority_ok(c - a, d - b)


def unique_peak_permutation(s: str, k: int) -> list[int] | None:
    """Return a permutation of 1..n for the 0/1 string ``s``, or None if impossible.

    It is impossible when ``s`` holds ``k`` or more consecutive '1'. Otherwise
    positions marked '1' receive the smallest values in order and positions
    marked '0' the largest values in decreasing order.
    """
    streak = 0
    for char in s:
        streak = 0 if char == "0" else streak + 1
        if streak >= k:
            return None

    low, high = 1, len(s)
    result: list[int] = []
    for char in s:
        if char == "1":
            result.append(low)
            low += 1
        else:
            result.append(high)
            high -= 1
    return result


def max_block_length(values: Iterable[int]) -> int:
    """Return the longest total length of disjoint blocks kept from ``values``.

    A block of value ``v`` consists of ``v`` occurrences of ``v``; blocks are
    formed greedily from the most recent ``v - 1`` occurrences.
    """
    seen: dict[int, deque[int]] = defaultdict(deque)
    best = [0]
    for position, value in enumerate(values, start=1):
        previous = best[-1]
        current = 0
        if value == 1:
            current = previous + 1
        elif len(seen[value]) == value - 1:
            before = seen[value].popleft() - 1
            current = max(previous, value + best[before])
        best.append(max(previous, current))
        seen[value].append(position)
    return best[-1]


def locate_point(
    anchors: Iterable[tuple[int, int]], ask: Callable[[str, int], int]
) -> tuple[int, int]:
    """Find the hidden start of a robot using eight far moves.

    ``ask(direction, distance)`` moves the robot and returns its Manhattan
    distance to the nearest anchor. The robot goes up and right twice, then
    down four times, each time by ``STEP``.
    """
    points = list(anchors)
    best_sum = max([-2 * STEP, *(x + y for x, y in points)])
    best_diff = min([2 * STEP, *(y - x for x, y in points)])

    response = 0
    for direction in "UURR":
        response = ask(direction, STEP)
    along = response - 4 * STEP + best_sum

    for direction in "DDDD":
        response = ask(direction, STEP)
    across = response - best_diff - 4 * STEP

    x = _trunc_div(along + across, 2)
    return x, along - x