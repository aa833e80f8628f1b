"""Graph exercises: cycles within height bands, counting rooms and shortest routes."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

HEIGHTS = range(0, 101)


def cyclic_at_height(
    lows: Sequence[int], highs: Sequence[int], edges: Iterable[tuple[int, int]]
) -> set[tuple[int, int]]:
    """Return the (node, height) pairs for which the node leads into a cycle.

    Nodes are numbered from 1; node ``i`` is usable at height ``h`` when
    ``lows[i-1] <= h <= highs[i-1]``. Edges are directed. Heights 0..100
    are examined, each with a depth-first search over usable nodes.
    """
    n = len(lows)
    if len(highs) != n:
        raise ValueError("lows and highs must have the same length")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        if not (1 <= u <= n and 1 <= v <= n):
            raise ValueError("edge refers to an unknown node")
        adjacency[u].append(v)

    found: set[tuple[int, int]] = set()
    for height in HEIGHTS:
        usable = [False] + [lo <= height <= hi for lo, hi in zip(lows, highs)]
        visited = [False] * (n + 1)
        on_stack = [False] * (n + 1)
        marked = [False] * (n + 1)

        for root in range(1, n + 1):
            if visited[root]:
                continue
            visited[root] = True
            if not usable[root]:
                continue
            on_stack[root] = True
            # Frames hold [node, edge index, waiting on a child].
            stack = [[root, 0, False]]
            while stack:
                frame = stack[-1]
                node, index, descended = frame
                neighbours = adjacency[node]
                if index == len(neighbours):
                    on_stack[node] = False
                    stack.pop()
                    continue
                child = neighbours[index]
                if not descended:
                    if on_stack[child] and usable[child]:
                        marked[node] = True
                    if not visited[child] and usable[child]:
                        frame[2] = True
                        visited[child] = True
                        on_stack[child] = True
                        stack.append([child, 0, False])
                        continue
                if marked[child] and usable[child]:
                    marked[node] = True
                frame[1] += 1
                frame[2] = False

        found.update((node, height) for node in range(1, n + 1) if marked[node])
    return found


def count_rooms(grid: Sequence[str]) -> int:
    """Return the number of rooms: groups of floor cells joined side by side.

    Any cell other than '#' starts a room; rooms spread only through '.'.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(line) != cols for line in grid):
        raise ValueError("grid rows must all have the same length")

    seen: set[tuple[int, int]] = set()
    rooms = 0
    for i, line in enumerate(grid):
        for j, cell in enumerate(line):
            if cell == "#" or (i, j) in seen:
                continue
            seen.add((i, j))
            queue = deque([(i, j)])
            while queue:
                r, c = queue.popleft()
                for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and (nr, nc) not in seen
                        and grid[nr][nc] == "."
                    ):
                        seen.add((nr, nc))
                        queue.append((nr, nc))
            rooms += 1
    return rooms


def message_route(n: int, edges: Iterable[tuple[int, int]]) -> list[int] | None:
    """Return a shortest path of nodes from 1 to ``n``, or None if unreachable."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    adjacency: dict[int, list[int]] = {node: [] for node in range(1, n + 1)}
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    parent: dict[int, int | None] = {1: None}
    queue = deque([1])
    while queue:
        current = queue.popleft()
        for neighbour in adjacency[current]:
            if neighbour not in parent:
                parent[neighbour] = current
                queue.append(neighbour)

    if n not in parent:
        return None
    path = []
    node: int | None = n
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return path