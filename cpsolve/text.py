"""String exercises: borders and palindrome reordering."""

from __future__ import annotations

from collections import Counter
from string import ascii_uppercase


def borders(s: str) -> list[int]:
    """Return the lengths of the proper prefixes of ``s`` that are also suffixes."""
    return [size for size in range(1, len(s)) if s[:size] == s[-size:]]


def palindrome_reorder(s: str) -> str | None:
    """Return a palindrome made of the letters of ``s``, or None if none exists.

    Letters must be 'A' to 'Z'. Every copy of the letter with an odd count
    goes in the middle.
    """
    if any(char not in ascii_uppercase for char in s):
        raise ValueError("string must contain only the letters A to Z")
    counts = Counter(s)
    odd = [letter for letter in ascii_uppercase if counts[letter] % 2 == 1]
    if len(odd) > 1:
        return None
    front = "".join(
        letter * (counts[letter] // 2)
        for letter in ascii_uppercase
        if counts[letter] % 2 == 0
    )
    middle = "".join(letter * counts[letter] for letter in odd)
    return front + middle + front[::-1]