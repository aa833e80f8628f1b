"""Make two numbers equal with as few replacement steps as possible."""

from __future__ import annotations


def steps_to_equal(a: int, b: int) -> int:
    """Return 0 if equal, 1 if the larger is a multiple of the smaller, else 2."""
    if a < b:
        a, b = b, a
    if a == b:
        return 0
    return 1 if a % b == 0 else 2