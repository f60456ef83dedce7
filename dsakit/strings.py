"""String checks: alphanumeric palindromes and non-overlapping AB/BA pairs."""

from __future__ import annotations

import string

_ALNUM = frozenset(string.ascii_letters + string.digits)


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same both ways, ignoring case and non-alphanumerics.

    Only ASCII letters and digits count; a text with none of them is a palindrome.
    """
    cleaned = [char.lower() for char in text if char in _ALNUM]
    return cleaned == cleaned[::-1]


def _first_then_second(text: str, first: str, second: str) -> bool:
    position = text.find(first)
    return position >= 0 and text.find(second, position + len(first)) >= 0


def has_overlapping_ab_ba(text: str) -> bool:
    """Tell whether ``text`` holds an "AB" and a "BA" that do not share a letter."""
    return _first_then_second(text, "AB", "BA") or _first_then_second(text, "BA", "AB")