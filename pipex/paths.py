"""Locating commands on the search path and splitting command strings."""

from __future__ import annotations

import os
from typing import Mapping

from pipex.text import split_words


def parse_command(cmd_str: str | None) -> list[str]:
    """Split a command string into its words on spaces.

    Only the space character separates words; an empty or missing command
    gives an empty list.
    """
    if not cmd_str:
        return []
    return split_words(cmd_str, " ")


def search_dirs(env: Mapping[str, str] | None = None) -> list[str]:
    """The directories listed in the ``PATH`` entry of ``env``.

    Empty entries are dropped. Without a ``PATH`` entry the list is empty.
    ``env`` defaults to the current process environment.
    """
    environ = os.environ if env is None else env
    value = environ.get("PATH")
    if value is None:
        return []
    return split_words(value, ":")


def find_command(name: str, env: Mapping[str, str] | None = None) -> str | None:
    """The path of the executable that ``name`` refers to, or None.

    A name holding a slash is taken as a path in its own right when it is
    executable. Otherwise each directory of ``PATH`` is tried in order.
    """
    if not name:
        raise ValueError("command name must not be empty")
    if "/" in name and os.access(name, os.X_OK):
        return name
    for directory in search_dirs(env):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None