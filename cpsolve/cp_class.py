"""Classroom exercises: scheduling, parity games, tree metrics, knapsacks and deque rotations."""

from __future__ import annotations

from bisect import bisect_left, insort
from collections import defaultdict, deque
from functools import reduce
from operator import xor
from typing import Iterable, Sequence


def max_scheduled_classes(classes: Iterable[tuple[int, int]], rooms: int) -> int:
    """Return how many (start, end) classes fit into ``rooms`` rooms.

    A room becomes free for a class only if its last class ended strictly
    before the new one starts.
    """
    ends: list[int] = []
    scheduled = 0
    for start, end in sorted(classes, key=lambda pair: pair[1]):
        pos = bisect_left(ends, start)
        if pos == 0:
            if len(ends) < rooms:
                insort(ends, end)
                scheduled += 1
        else:
            # Reuse the room whose class finished latest but still in time.
            del ends[pos - 1]
            insort(ends, end)
            scheduled += 1
    return scheduled


def fortune_teller(x: int, y: int, values: Iterable[int]) -> str:
    """Decide whether Alice (starting from ``x``) can end at ``y``.

    Adding or xoring a number changes parity the same way, so only the
    parity of ``x`` combined with every value matters.
    """
    final = reduce(xor, values, x)
    return "Alice" if final % 2 == y % 2 else "Bob"


def rock_paper_scissors_wins(first: str, second: str) -> int:
    """Return the most rounds ``first`` can win when hands may be reordered.

    'G' beats 'K', 'B' beats 'G' and 'K' beats 'B'.
    """
    return (
        min(first.count("G"), second.count("K"))
        + min(first.count("B"), second.count("G"))
        + min(first.count("K"), second.count("B"))
    )


def is_tree_distance_matrix(matrix: Sequence[Sequence[int]]) -> bool:
    """Return whether ``matrix`` holds the pairwise distances of some weighted tree."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("distance matrix must be square")

    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if i == j:
                if value != 0:
                    return False
            elif value == 0 or value != matrix[j][i]:
                return False

    parent = list(range(n))
    size = [1] * n

    def find(node: int) -> int:
        root = node
        while parent[root] != root:
            root = parent[root]
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    edges = sorted(
        (matrix[i][j], i, j) for i in range(n) for j in range(i + 1, n)
    )
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for weight, u, v in edges:
        root_u, root_v = find(u), find(v)
        if root_u == root_v:
            continue
        if size[root_u] > size[root_v]:
            root_u, root_v = root_v, root_u
        parent[root_v] = root_u
        size[root_u] += size[root_v]
        adjacency[u].append((v, weight))
        adjacency[v].append((u, weight))

    for source in range(n):
        stack = [(source, 0, -1)]
        while stack:
            node, distance, came_from = stack.pop()
            if matrix[source][node] != distance:
                return False
            stack.extend(
                (neighbour, distance + weight, node)
                for neighbour, weight in adjacency[node]
                if neighbour != came_from
            )
    return True


def max_credits(courses: Iterable[tuple[int, str]], limit: int) -> int:
    """Return the largest credit total not above ``limit``.

    ``courses`` holds (credits, lecturer) pairs; at most one course may be
    taken from each lecturer.
    """
    by_lecturer: dict[str, list[int]] = defaultdict(list)
    for credits, lecturer in courses:
        by_lecturer[lecturer].append(credits)

    mask = (1 << (limit + 1)) - 1
    reachable = 1
    for credit_options in by_lecturer.values():
        extended = reachable
        for credits in credit_options:
            extended |= reachable << credits
        reachable = extended & mask
    return reachable.bit_length() - 1


class DequeRotation:
    """Answers which pair is pulled from a deque at any step of the game.

    Each step takes the two front elements, puts the larger back in front
    and the smaller at the back. After ``n - 1`` steps the maximum sits in
    front and the rest cycle with period ``n - 1``.
    """

    def __init__(self, values: Iterable[int]) -> None:
        dq = deque(values)
        if len(dq) < 2:
            raise ValueError("at least two values are required")
        self._period = len(dq) - 1

        self._opening: list[tuple[int, int]] = []
        for _ in range(self._period):
            self._opening.append(self._step(dq))

        self._maximum = dq[0]
        self._cycle: list[int] = [self._step(dq)[1] for _ in range(self._period)]

    @staticmethod
    def _step(dq: deque[int]) -> tuple[int, int]:
        a = dq.popleft()
        b = dq.popleft()
        dq.appendleft(max(a, b))
        dq.append(min(a, b))
        return a, b

    def query(self, step: int) -> tuple[int, int]:
        """Return the pair (A, B) taken out at the 1-based ``step``."""
        if step < 1:
            raise ValueError("step must be a positive integer")
        if step <= self._period:
            return self._opening[step - 1]
        index = step % self._period or self._period
        return self._maximum, self._cycle[index - 1]