"""Searching and comparing text: characters, substrings and orderings."""

from __future__ import annotations


def _single(c: str) -> str:
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def find_char(text: str, c: str) -> int | None:
    """Return the index of the first c in text, or None if there is none."""
    index = text.find(_single(c))
    return None if index < 0 else index


def rfind_char(text: str, c: str) -> int | None:
    """Return the index of the last c in text, or None if there is none."""
    index = text.rfind(_single(c))
    return None if index < 0 else index


def length_until(text: str, c: str) -> int:
    """Return how many characters come before the first c, or len(text)."""
    index = text.find(_single(c))
    return len(text) if index < 0 else index


def char_position(text: str, c: str) -> int:
    """Return the 1-based position of the first c in text, or 0 if absent."""
    return text.find(_single(c)) + 1


def compare(a: str | None, b: str | None) -> int:
    """Compare two strings character by character, as strcmp does.

    Returns the code-point difference of the first pair that differs, with
    the end of a string counting as code point 0; 0 when they are equal.
    A missing string yields the first code point of the other one.
    """
    if a is None:
        return ord(b[0]) if b else 0
    if b is None:
        return ord(a[0]) if a else 0
    for left, right in zip(a, b):
        if left != right:
            return ord(left) - ord(right)
    if len(a) > len(b):
        return ord(a[len(b)])
    if len(b) > len(a):
        return -ord(b[len(a)])
    return 0


def compare_n(a: str | None, b: str | None, n: int) -> int:
    """Compare at most the first n characters of a and b.

    Returns 0 when n is 0 or either string is missing.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if not n or a is None or b is None:
        return 0
    return compare(a[:n], b[:n])


def equal(a: str | None, b: str | None) -> bool:
    """True when both strings are present and identical."""
    if a is None or b is None:
        return False
    return a == b


def equal_n(a: str | None, b: str | None, n: int) -> bool:
    """True when the first n characters match; always True for n == 0."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if not n:
        return True
    if a is None or b is None:
        return False
    return compare_n(a, b, n) == 0


def find(haystack: str, needle: str) -> int | None:
    """Return the index of the first needle in haystack, or None.

    An empty needle is found at index 0.
    """
    index = haystack.find(needle)
    return None if index < 0 else index


def find_n(haystack: str, needle: str, n: int) -> int | None:
    """Find needle lying wholly within the first n characters of haystack.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if not needle:
        return 0
    if not haystack or len(needle) > n:
        return None
    index = haystack.find(needle, 0, n)
    return None if index < 0 else index