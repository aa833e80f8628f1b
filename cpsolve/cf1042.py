"""Problems from a division 3 contest: surplus, sequences, residues and trees."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence


def surplus_steps(a: Sequence[int], b: Sequence[int]) -> int:
    """Return one plus the total amount by which ``a`` exceeds ``b`` element-wise."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    return 1 + sum(max(0, x - y) for x, y in zip(a, b))


def alternating_sequence(n: int) -> list[int]:
    """Return the length-``n`` sequence of -1 and 3 ending in -1 or 2."""
    body = [-1 if i % 2 == 0 else 3 for i in range(n - 1)]
    return body + [-1 if n % 2 == 1 else 2]


def _residue(value: int, k: int) -> int:
    if value == 0:
        return 0
    remainder = abs(value) % k
    if value < 0:
        remainder = -remainder
    if remainder == 0:
        return 0
    return min(remainder, abs(remainder - k))


def equal_modulo_multisets(first: Sequence[int], second: Sequence[int], k: int) -> bool:
    """Return whether the two lists match once each value may move by multiples of ``k`` or be reflected."""
    if len(first) != len(second):
        raise ValueError("lists must have the same length")
    return Counter(_residue(v, k) for v in first) == Counter(
        _residue(v, k) for v in second
    )


def min_leaf_removals(n: int, edges: Iterable[tuple[int, int]]) -> int:
    """Return how many leaves lie outside the best star of a tree on nodes 1..n."""
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    def is_leaf(node: int) -> bool:
        return len(adjacency[node]) == 1

    total_leaves = sum(1 for node in adjacency if is_leaf(node))
    best = max(
        (
            sum(1 for v in neighbours if is_leaf(v)) + is_leaf(node)
            for node, neighbours in adjacency.items()
        ),
        default=0,
    )
    return total_leaves - best