"""Small string puzzles: prefixes, brackets, searching and parsing."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import takewhile

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_CLOSERS = {")": "(", "]": "[", "}": "{"}
_OPENERS = frozenset(_CLOSERS.values())


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest prefix shared by every string in ``strs``."""
    if not strs:
        raise ValueError("at least one string is required")
    prefix = strs[0]
    for other in strs[1:]:
        shared = sum(1 for _ in takewhile(lambda pair: pair[0] == pair[1], zip(prefix, other)))
        prefix = prefix[:shared]
    return prefix


def is_valid_parentheses(s: str) -> bool:
    """Tell whether ``s`` is made only of correctly nested ``()[]{}`` pairs."""
    if len(s) % 2 == 1:
        return False
    stack: list[str] = []
    for char in s:
        if char in _OPENERS:
            stack.append(char)
        elif stack and _CLOSERS.get(char) == stack[-1]:
            stack.pop()
        else:
            return False
    return not stack


def find_substring(haystack: str, needle: str) -> int:
    """Index of the first occurrence of ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def length_of_last_word(s: str) -> int:
    """Length of the last run of non-space characters in ``s``."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def is_palindrome_text(s: str) -> bool:
    """Tell whether the ASCII letters and digits of ``s`` read the same both ways, ignoring case."""
    kept = [char.lower() for char in s if char.isascii() and char.isalnum()]
    return kept == kept[::-1]


def roman_to_int(s: str) -> int:
    """Value of a Roman numeral; characters that are not numerals count as zero."""
    values = [_ROMAN_VALUES.get(char, 0) for char in s]
    total = 0
    for value, following in zip(values, values[1:] + [0]):
        total += -value if value < following else value
    return total