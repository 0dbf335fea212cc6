"""Character classification and case conversion limited to the ASCII range."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return c


def _same_kind(original: Char, code: int) -> Char:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: Char) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: Char) -> bool:
    """True for the ASCII digits 0-9."""
    return 48 <= _code(c) <= 57


def is_alnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for printable ASCII characters, space included."""
    return 32 <= _code(c) <= 126


def to_upper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if 97 <= code <= 122:
        return _same_kind(c, code - 32)
    return c


def to_lower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if 65 <= code <= 90:
        return _same_kind(c, code + 32)
    return c