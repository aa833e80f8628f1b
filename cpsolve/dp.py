"""Dynamic programming classics: knapsacks, coin counting, dice, grids and digits."""

from __future__ import annotations

from typing import Iterable, Sequence

MOD = 10**9 + 7


def _check_target(target: int) -> None:
    if target < 0:
        raise ValueError("target must not be negative")


def _positive_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    if any(c <= 0 for c in values):
        raise ValueError("coin values must be positive")
    return values


def book_shop(budget: int, prices: Sequence[int], pages: Sequence[int]) -> int:
    """Return the most pages buyable with ``budget``, each book at most once."""
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    _check_target(budget)
    best = [0] * (budget + 1)
    for price, value in zip(prices, pages):
        for spent in range(budget, max(price, 1) - 1, -1):
            best[spent] = max(best[spent], best[spent - price] + value)
    return best[budget]


def coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Return the number of ordered coin sequences summing to ``target``, modulo 1e9+7."""
    values = _positive_coins(coins)
    _check_target(target)
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - c] for c in values if c <= amount) % MOD
    return ways[target]


def coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Return the number of coin multisets summing to ``target``, modulo 1e9+7.

    A target of 0 yields 0.
    """
    values = _positive_coins(coins)
    _check_target(target)
    ways = [1] + [0] * target
    for coin in values:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target] if target > 0 else 0


def dice_combinations(n: int) -> int:
    """Return the number of ordered dice throws summing to ``n``, modulo 1e9+7."""
    _check_target(n)
    ways = [1, 1]
    for total in range(2, n + 1):
        ways.append(sum(ways[max(0, total - 6):total]) % MOD)
    return ways[n]


def grid_paths(grid: Sequence[str]) -> int:
    """Return the number of right/down paths avoiding '*' traps, modulo 1e9+7."""
    if not grid:
        raise ValueError("grid must not be empty")
    cols = len(grid[0])
    if cols == 0 or any(len(line) != cols for line in grid):
        raise ValueError("grid rows must be non-empty and of equal length")

    previous = [0] * cols
    for i, line in enumerate(grid):
        current = [0] * cols
        for j, cell in enumerate(line):
            if cell == "*":
                continue
            if i == 0 and j == 0:
                current[j] = 1
            else:
                left = current[j - 1] if j > 0 else 0
                current[j] = (previous[j] + left) % MOD
        previous = current
    return previous[-1]


def min_coins(coins: Iterable[int], target: int) -> int:
    """Return the fewest coins summing to ``target``, or -1 if impossible."""
    values = _positive_coins(coins)
    _check_target(target)
    best: list[int | None] = [0] + [None] * target
    for amount in range(1, target + 1):
        options = [
            best[amount - c] + 1
            for c in values
            if c <= amount and best[amount - c] is not None
        ]
        best[amount] = min(options, default=None)
    result = best[target]
    return -1 if result is None else result


def _apply(op: str, left: int, right: int) -> int:
    return left + right if op == "+" else left * right


def plus_or_times(
    start: int, rounds: Iterable[tuple[tuple[str, int], tuple[str, int]]]
) -> int:
    """Return the largest value reachable by picking one operation per round.

    Each round offers two (op, value) choices; '+' adds, any other
    operator multiplies.
    """
    high = low = start
    for first, second in rounds:
        candidates = [
            _apply(op, bound, value)
            for op, value in (first, second)
            for bound in (high, low)
        ]
        high, low = max(candidates), min(candidates)
    return high


def removing_digits(n: int) -> int:
    """Return the fewest steps to reach 0 by subtracting one of the number's digits."""
    _check_target(n)
    steps = [0] * (n + 1)
    for number in range(1, n + 1):
        steps[number] = 1 + min(
            steps[number - int(d)] for d in str(number) if d != "0"
        )
    return steps[n]