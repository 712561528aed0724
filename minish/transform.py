"""Building new strings from old: splitting, replacing and mapping."""

from __future__ import annotations

from typing import Callable


def split_words(text: str | None, sep: str) -> list[str]:
    """Split text on sep, dropping empty words.

    Runs of separators count as one and leading or trailing separators are
    ignored. A missing or empty text gives an empty list.
    """
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if not text:
        return []
    return [word for word in text.split(sep) if word]


def replace_first(text: str, old: str | None, new: str | None) -> str | None:
    """Replace the first occurrence of old in text with new.

    When old or new is missing the text comes back unchanged. When old does
    not occur in text, None is returned. An empty old matches at the start.
    """
    if old is None or new is None:
        return text
    index = text.find(old)
    if index < 0:
        return None
    return text[:index] + new + text[index + len(old) :]


def map_chars(text: str, func: Callable[[str], str]) -> str:
    """Return a new string made of func applied to each character."""
    return "".join(func(c) for c in text)


def map_chars_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of func(index, character) for each character."""
    return "".join(func(index, c) for index, c in enumerate(text))


def skip_char(text: str | None, c: str) -> str | None:
    """Return a non-empty text unchanged; an empty or missing text gives None.

    A non-empty text is handed back before any skipping takes place, so
    leading c characters are kept.
    """
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    if text:
        return text
    return None