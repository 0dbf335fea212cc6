"""Searching, comparing and size-bounded copying of strings."""

from __future__ import annotations

_NUL = "\0"


def _check_char(ch: str) -> None:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")


def find_char(text: str, ch: str) -> int | None:
    """Index of the first ``ch`` in ``text``, or None.

    Looking for the NUL character finds the end of the string.
    """
    _check_char(ch)
    if ch == _NUL and _NUL not in text:
        return len(text)
    index = text.find(ch)
    return index if index >= 0 else None


def find_last_char(text: str, ch: str) -> int | None:
    """Index of the last ``ch`` in ``text``, or None.

    Looking for the NUL character finds the end of the string.
    """
    _check_char(ch)
    index = text.rfind(ch)
    if index >= 0:
        return index
    if ch == _NUL:
        return len(text)
    return None


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``limit`` characters.

    An empty needle is found at index 0.
    """
    if limit < 0:
        raise ValueError("limit must not be negative")
    if not needle:
        return 0
    index = haystack[:limit].find(needle)
    return index if index >= 0 else None


def compare_prefix(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the first pair of characters that differ, the
    end of a string counting as code 0, or 0 when no difference is found.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    for position in range(count):
        a = ord(first[position]) if position < len(first) else 0
        b = ord(second[position]) if position < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def bounded_copy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the length of ``src``, so truncation shows as
    a returned length not smaller than ``size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def bounded_concat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` is smaller than ``dst``, ``dst`` is left as is and
    the length returned is ``len(src) + size``.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size == 0:
        return dst, len(src)
    if size < len(dst):
        return dst, len(src) + size
    room = max(0, size - 1 - len(dst))
    return dst + src[:room], len(src) + len(dst)