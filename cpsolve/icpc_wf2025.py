"""World finals problems: locating a rover's start and walking in the sun."""

from __future__ import annotations

from typing import Iterable, Sequence


def find_start(grid: Sequence[str]) -> tuple[int, int]:
    """Return the (row, column) of the 'S' cell.

    If several rows hold an 'S', the last such row is used, with the first
    'S' in that row.
    """
    start = None
    for row, line in enumerate(grid):
        column = line.find("S")
        if column != -1:
            start = (row, column)
    if start is None:
        raise ValueError("grid has no start cell")
    return start


def sunshine_distance(
    start_y: int, end_y: int, shades: Iterable[tuple[int, int, int, int]]
) -> float:
    """Return the length walked in the sun going down from ``start_y`` to ``end_y``.

    Each shade is a rectangle (x1, y1, x2, y2) with ``y1`` below ``y2``.
    Walking upward costs nothing in the sun.
    """
    shades = list(shades)
    levels = [start_y, end_y]
    delta = {start_y: 0, end_y: 0}
    for _, low, _, high in shades:
        for y, change in ((low, -1), (high, 1)):
            if y in delta:
                delta[y] += change
            else:
                delta[y] = change
                levels.append(y)

    if start_y < end_y:
        return 0.0
    if not shades:
        return float(start_y - end_y)

    levels.sort()
    lower_neighbours = [None, *levels[:-1]]
    sunny = 0
    cover = 0
    for level, lower in reversed(list(zip(levels, lower_neighbours))):
        cover += delta[level]
        if end_y <= level <= start_y and cover <= 0:
            bottom = end_y if lower is None else max(end_y, lower)
            sunny += level - bottom
    return float(sunny)