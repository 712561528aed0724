"""Small helpers that write characters, strings and numbers to a stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    _target(stream).write(c)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write a string; a missing string writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline; a missing string writes nothing."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(str(n))


def print_n_chars(char: str, count: int, stream: TextIO | None = None) -> None:
    """Write a character count times; nothing for an empty char or count <= 0."""
    if not char or count <= 0:
        return
    _target(stream).write(char * count)