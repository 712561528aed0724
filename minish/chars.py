"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MAX = (1 << (_INT_BITS - 1)) - 1

_SPACES = frozenset(" \t\n\v\f\r")


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or the int unchanged."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: str | int) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: str | int) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def is_lower(c: str | int) -> bool:
    """True for ASCII lower-case letters."""
    return ord("a") <= _code(c) <= ord("z")


def is_upper(c: str | int) -> bool:
    """True for ASCII upper-case letters."""
    return ord("A") <= _code(c) <= ord("Z")


def is_print(c: str | int) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    if not is_upper(c):
        return c
    code = _code(c) + (ord("a") - ord("A"))
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    if not is_lower(c):
        return c
    code = _code(c) - (ord("a") - ord("A"))
    return chr(code) if isinstance(c, str) else code


def _wrap_int(value: int) -> int:
    """Reduce a value to a signed 32-bit integer, two's complement style."""
    value %= _INT_MOD
    return value - _INT_MOD if value > _INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around like a 32-bit signed integer.
    """
    pos = 0
    end = len(text)
    while pos < end and text[pos] in _SPACES:
        pos += 1
    negative = False
    if pos < end and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    start = pos
    while pos < end and "0" <= text[pos] <= "9":
        pos += 1
    value = int(text[start:pos]) if pos > start else 0
    return _wrap_int(-value if negative else value)


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading minus sign if negative."""
    return str(n)