"""Joining, copying, slicing and trimming text."""

from __future__ import annotations

_TRIMMED = " \n\t"


def length(text: str | None) -> int:
    """Return the length of text; a missing text has length 0."""
    return 0 if text is None else len(text)


def join(a: str | None, b: str | None) -> str | None:
    """Return a followed by b, or None when either is missing."""
    if a is None or b is None:
        return None
    return a + b


def join3(a: str | None, b: str | None, c: str | None) -> str | None:
    """Return a, b and c joined together, or None when any is missing."""
    if a is None or b is None or c is None:
        return None
    return a + b + c


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def concat_n(dest: str, src: str, n: int) -> str:
    """Return dest followed by at most the first n characters of src."""
    _check_count(n)
    return dest + src[:n]


def bounded_concat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dest within a buffer of size characters, as strlcat does.

    The buffer holds size characters including the terminator, so the
    result is at most size - 1 characters long. Returns the resulting text
    and the length the full concatenation was meant to have: the length of
    dest (capped at size) plus the length of src.
    """
    _check_count(size)
    if not size:
        return dest, len(dest)
    kept = min(len(dest), size)
    room = max(0, size - 1 - len(dest))
    return dest + src[:room], kept + len(src)


def copy_n(src: str, n: int) -> str:
    """Return exactly n characters: the start of src, padded with NULs."""
    _check_count(n)
    return src[:n].ljust(n, "\0")


def duplicate(text: str | None) -> str | None:
    """Return a copy of text; a missing or empty text gives None."""
    if not text:
        return None
    return text


def duplicate_n(text: str | None, n: int) -> str | None:
    """Return at most the first n characters of text.

    A missing or empty text, or n == 0, gives None.
    """
    _check_count(n)
    if not text or not n:
        return None
    return text[:n]


def substring(text: str | None, start: int, length: int) -> str | None:
    """Return length characters of text from start, or None if text is missing.

    The requested range must lie within text.
    """
    if text is None:
        return None
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start + length > len(text):
        raise IndexError(
            f"range {start}..{start + length} exceeds text length {len(text)}"
        )
    return text[start : start + length]


def trim(text: str | None) -> str | None:
    """Strip spaces, newlines and tabs from both ends.

    A missing text, or one that is empty after trimming, gives None.
    """
    if text is None:
        return None
    return text.strip(_TRIMMED) or None