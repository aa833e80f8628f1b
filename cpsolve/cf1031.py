"""Problems from a division 2 contest: budgeted actions, tile overlap and a gold grid."""

from __future__ import annotations

from typing import Sequence


def max_actions(k: int, a: int, b: int, x: int, y: int) -> int:
    """Return the largest number of actions affordable with budget ``k``.

    An action of the first kind needs at least ``a`` left in the budget and
    uses up ``x``; one of the second kind needs ``b`` and uses up ``y``.
    The kinds are first arranged so that ``a`` is the larger threshold.
    """
    if b > a:
        a, b = b, a
        x, y = y, x

    actions = 0
    # The costlier start pays off first only if it drains the budget no faster.
    if x <= y and k >= a:
        actions = (k - a) // x + 1
        k -= actions * x
    if k >= b:
        actions += (k - b) // y + 1
    return actions


def can_cover(
    w: int, h: int, a: int, b: int, x1: int, y1: int, x2: int, y2: int
) -> bool:
    """Return whether two ``a`` by ``b`` tiles at the given corners fit one tiling.

    ``w`` and ``h`` are the board size; they do not affect the answer.
    """
    if x1 > x2:
        x1, x2 = x2, x1
    if y1 > y2:
        y1, y2 = y2, y1

    overlap_x = x2 <= x1 + a - 1
    overlap_y = y2 <= y1 + b - 1
    y_misaligned = (y1 + b - y2) % b != 0
    x_misaligned = (x1 + a - x2) % a != 0

    if overlap_x and overlap_y:
        return True
    if overlap_x and y_misaligned:
        return False
    if overlap_y and x_misaligned:
        return False
    if not overlap_x and not overlap_y and y_misaligned and x_misaligned:
        return False
    return True


def min_lost_gold(grid: Sequence[str], k: int) -> int:
    """Return the most gold ('g') collectable by one blast on an empty cell ('.').

    A blast at an empty cell destroys the gold within ``k - 1`` rows and
    columns of it; all other gold is collected. Without an empty cell the
    result is 0.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(line) != cols for line in grid):
        raise ValueError("grid rows must all have the same length")

    prefix = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i, line in enumerate(grid):
        for j, cell in enumerate(line):
            prefix[i + 1][j + 1] = (
                prefix[i][j + 1] + prefix[i + 1][j] - prefix[i][j] + (cell == "g")
            )
    total = prefix[rows][cols]

    def gold_in(top: int, left: int, bottom: int, right: int) -> int:
        return (
            prefix[bottom + 1][right + 1]
            - prefix[top][right + 1]
            - prefix[bottom + 1][left]
            + prefix[top][left]
        )

    lost = [
        gold_in(
            max(0, i - k + 1),
            max(0, j - k + 1),
            min(rows - 1, i + k - 1),
            min(cols - 1, j + k - 1),
        )
        for i, line in enumerate(grid)
        for j, cell in enumerate(line)
        if cell == "."
    ]
    if not lost:
        return 0
    return total - min(lost)