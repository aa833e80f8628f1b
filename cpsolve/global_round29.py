"""Problems from a global round: move counts, paired sequences and binary reductions."""

from __future__ import annotations

from itertools import groupby


def min_moves(x: int, y: int) -> int:
    """Return the number of moves needed to go from ``x`` to ``y``, or -1 if impossible."""
    if x < y:
        return 2
    if x > y and y != 1 and y < x - 1:
        return 3
    return -1


def build_sequence(n: int) -> list[int]:
    """Return a sequence of length ``2n`` in which every value 1..n appears twice."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    if n == 1:
        return [1, 1]
    if n == 2:
        return [2, 1, 2, 1]

    # 1-based slots; slot 0 is unused.
    slots = [0] * (2 * n + 1)

    def place(position: int, value: int) -> None:
        slots[position] = value
        slots[position + value] = value

    value = n
    position = 1
    while value > 1:
        place(position, value)
        value -= 2
        position += 1

    half = n // 2
    if n % 2 == 1:
        slots[half + 1] = 1
        slots[2 * n] = 1
        place(half + 2, n - 1)
    else:
        slots[2 * n] = 1
        slots[2 * n - half + 1] = 1
        place(half + 1, n - 1)

    value = n - 3
    position = n + 2
    while value > 1:
        place(position, value)
        value -= 2
        position += 1

    return slots[1:]


def _run_codes(padded: str) -> list[str]:
    codes = []
    for char, group in groupby(padded):
        length = sum(1 for _ in group)
        if char == "0":
            codes.append("f" if length > 1 else "z")
        else:
            codes.append("b" if length > 1 else "t")
    return codes


def is_reducible(s: str) -> bool:
    """Return whether the binary string ``s`` can be reduced as the problem requires.

    Between two blocks of several '1', the number of lone '0' must be even,
    unless a block of several '0' lies between them.
    """
    if not s:
        raise ValueError("string must not be empty")
    if set(s) - {"0", "1"}:
        raise ValueError("string must contain only '0' and '1'")

    head = "110" if s[0] == "0" else "1"
    tail = "011" if s[-1] == "0" else "1"
    codes = _run_codes(head + s + tail)

    inside = False
    lone_zeros = 0
    for code in codes:
        if not inside:
            if code == "b":
                inside = True
                lone_zeros = 0
            continue
        if code == "z":
            lone_zeros += 1
        elif code == "b":
            if lone_zeros % 2 == 1:
                return False
            lone_zeros = 0
        elif code == "f":
            inside = False
            lone_zeros = 0
    return True