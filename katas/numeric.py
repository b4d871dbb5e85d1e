"""Small puzzles over integers and digit strings."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import zip_longest


def is_palindrome_number(x: int) -> bool:
    """Tell whether the decimal digits of ``x`` read the same both ways; negatives never do."""
    if x < 0:
        return False
    digits = str(x)
    return digits == digits[::-1]


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as most-significant-first digits; return the new digits."""
    result = list(digits)
    for position in reversed(range(len(result))):
        if result[position] < 9:
            result[position] += 1
            return result
        result[position] = 0
    return [1, *result]


def add_binary(a: str, b: str) -> str:
    """Sum two binary strings, keeping the width of the longer one."""
    for text in (a, b):
        if set(text) - {"0", "1"}:
            raise ValueError(f"not a binary string: {text!r}")
    bits: list[str] = []
    carry = 0
    for bit_a, bit_b in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry += int(bit_a) + int(bit_b)
        bits.append(str(carry % 2))
        carry //= 2
    if carry:
        bits.append("1")
    return "".join(reversed(bits))


def int_sqrt(x: int) -> int:
    """Largest integer whose square does not exceed ``x``."""
    if x < 0:
        raise ValueError("square root of a negative number")
    return math.isqrt(x)


def climb_stairs(n: int) -> int:
    """Number of ways to climb ``n`` steps taking one or two at a time."""
    if n <= 2:
        return n
    one, two = 1, 2
    for _ in range(3, n + 1):
        one, two = two, one + two
    return two