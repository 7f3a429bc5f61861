"""String helpers used to parse command lines and environment values."""

from __future__ import annotations

import operator
import re
from itertools import zip_longest

_INT_BITS = 32
_ATOI_PATTERN = re.compile(r"[\t\n\v\f\r ]*([+-]?)([0-9]*)")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(sep) if word]


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns zero when they match, otherwise the difference of the first
    differing characters. An empty first string compares as -1 and an
    empty second string as 1.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0 or (not s1 and not s2):
        return 0
    if not s1:
        return -1
    if not s2:
        return 1
    for left, right in zip_longest(s1[:n], s2[:n], fillvalue="\0"):
        if left != right:
            return ord(left) - ord(right)
    return 0


def strtrim(text: str, chars: str) -> str:
    """Remove every leading and trailing character that appears in ``chars``."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Find ``needle`` lying wholly within the first ``length`` characters.

    Returns the index of the first occurrence, or None when there is none.
    An empty needle is found at index 0.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index == -1 else index


def atoi(text: str) -> int:
    """Parse a leading decimal integer, wrapping to a signed 32-bit value.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. A string without digits yields 0.
    """
    match = _ATOI_PATTERN.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def itoa(n: int) -> str:
    """Return the decimal representation of the integer ``n``."""
    return str(operator.index(n))