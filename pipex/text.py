"""Small string helpers used when breaking up command lines."""

from __future__ import annotations

import re

_INT_PREFIX = re.compile(r"[ \t\n\x0b\x0c\r]*([+-]?)([0-9]*)")


def split_words(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be exactly one character")
    return [word for word in text.split(sep) if word]


def parse_int(text: str) -> int:
    """Read a leading decimal integer, C ``atoi`` style.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit.  Text without digits yields 0.
    """
    match = _INT_PREFIX.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits)
    return -value if sign == "-" else value


def int_to_text(n: int) -> str:
    """Render an integer in decimal."""
    return str(n)


def trim(text: str, chars: str) -> str:
    """Remove every character found in ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def find_within(haystack: str, needle: str, limit: int) -> int:
    """Find ``needle`` lying wholly within the first ``limit`` characters.

    Returns the index of the first match, or -1.  An empty needle matches at 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    return haystack.find(needle, 0, limit)