"""String helpers: splitting, integer parsing and formatting, trimming."""

from __future__ import annotations

from typing import Callable

_WHITESPACE = "\n \t\v\f\r"
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def split_words(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def parse_int(text: str) -> int:
    """Parse a leading decimal integer the way atoi does.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit. The result wraps to a 32-bit signed int.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] == "+":
        rest = rest[1:]
    elif rest[:1] == "-":
        sign = -1
        rest = rest[1:]
    number = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        number = number * 10 + (ord(ch) - ord("0"))
    return _wrap_int(sign * number)


def to_decimal(n: int) -> str:
    """Format an integer in decimal."""
    return str(n)


def trim(text: str, chars: str) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    return text.strip(chars)


def substring(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def join(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def map_chars(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iter_chars(text: str, func: Callable[[int, str], object]) -> None:
    """Call ``func(index, char)`` for each character of ``text``."""
    for index, ch in enumerate(text):
        func(index, ch)