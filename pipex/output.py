"""Writing characters, strings and numbers straight to file descriptors."""

from __future__ import annotations

import os

from pipex.text import to_decimal

_ENCODING = "utf-8"


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char(ch: str, fd: int) -> None:
    """Write a single character to ``fd``."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    _write_all(fd, ch.encode(_ENCODING))


def put_str(text: str, fd: int) -> None:
    """Write ``text`` to ``fd``."""
    _write_all(fd, text.encode(_ENCODING))


def put_line(text: str, fd: int) -> None:
    """Write ``text`` followed by a newline to ``fd``."""
    _write_all(fd, text.encode(_ENCODING) + b"\n")


def put_number(n: int, fd: int) -> None:
    """Write ``n`` in decimal to ``fd``."""
    put_str(to_decimal(n), fd)