"""Problems from a division 2 contest: equal counts, set removal, permutations and pairings."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def max_equal_count(values: Iterable[int]) -> int:
    """Return the largest ``c * d`` where ``d`` distinct values each occur at least ``c`` times."""
    counts = sorted(Counter(values).values())
    if not counts:
        raise ValueError("values must not be empty")
    groups = len(counts)
    return max(count * (groups - i) for i, count in enumerate(counts))


def can_remove_two(sets: Sequence[Iterable[int]], m: int) -> bool:
    """Return whether two sets can be dropped while the rest still cover 1..m.

    Every number 1..m must be covered in the first place; a set may be
    dropped when each of its elements occurs in at least one other set.
    """
    members = [list(s) for s in sets]
    counts = Counter(x for s in members for x in s)
    if any(counts[i] == 0 for i in range(1, m + 1)):
        return False
    removable = sum(1 for s in members if all(counts[x] > 1 for x in s))
    return removable >= 2


def build_permutation(s: str) -> list[int] | None:
    """Return a permutation fixed exactly at the '1' positions of ``s``, or None.

    Runs of '0' are reversed in place; a lone '0' makes it impossible.
    """
    runs: list[tuple[int, bool]] = []
    zeros = ones = 0
    for char in s:
        if char == "0":
            zeros += 1
            if ones:
                runs.append((ones, True))
                ones = 0
        else:
            ones += 1
            if zeros == 1:
                return None
            if zeros > 1:
                runs.append((zeros, False))
                zeros = 0
    if ones:
        runs.append((ones, True))
    else:
        if zeros == 1:
            return None
        runs.append((zeros, False))

    result: list[int] = []
    placed = 0
    for length, fixed in runs:
        if fixed:
            result.extend(range(placed + 1, placed + length + 1))
        else:
            result.extend(range(placed + length, placed, -1))
        placed += length
    return result


def max_xor_pairing(low: int, high: int) -> tuple[int, list[int]]:
    """Pair the numbers ``low..high`` around powers of two.

    Returns the score and the partner of each number in order; numbers left
    unpaired are their own partner.
    """
    powers: list[int] = []
    power = 1
    while power <= high:
        if power >= low:
            powers.append(power)
        power *= 2

    partner: dict[int, int] = {}
    total = 0
    for power in reversed(powers):
        up, down = power, power - 1
        while up <= high and down >= low and up not in partner and down not in partner:
            partner[up] = down
            partner[down] = up
            total += 2 * (up + down)
            up += 1
            down -= 1

    for value in range(low, high + 1):
        if value not in partner:
            partner[value] = value
            total += 2 * value
    return total, [partner[value] for value in range(low, high + 1)]