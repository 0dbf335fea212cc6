"""Run two commands joined by a pipe, reading one file and writing another."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Mapping, Sequence

from pipex.paths import find_command, parse_command

_USAGE = "usage: pipex file1 cmd1 cmd2 file2"
_OUTFILE_MODE = 0o644


class PipexError(Exception):
    """A stage of the pipeline could not be set up."""


class CommandNotFound(PipexError):
    """A command could not be found on the search path."""


def _start(
    cmd_str: str, env: dict[str, str], stdin: int, stdout: int
) -> subprocess.Popen:
    words = parse_command(cmd_str)
    if not words:
        raise CommandNotFound(f"Command not found: {cmd_str!r}")
    path = find_command(words[0], env)
    if path is None:
        raise CommandNotFound(f"Command not found: {words[0]}")
    try:
        return subprocess.Popen(
            words, executable=path, stdin=stdin, stdout=stdout, env=env
        )
    except OSError as exc:
        raise PipexError(f"execve: {exc.strerror}") from exc


def run_pipeline(
    infile: str,
    first_cmd: str,
    second_cmd: str,
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> tuple[int, int]:
    """Run ``< infile first_cmd | second_cmd > outfile``.

    Both halves are set up independently: when one of them fails, the other
    still runs. Returns the exit statuses of the two commands. If either half
    could not be started, the first such failure is raised once the other
    half has finished.
    """
    environ = dict(os.environ if env is None else env)
    errors: list[PipexError] = []
    first_proc: subprocess.Popen | None = None
    second_proc: subprocess.Popen | None = None

    read_fd, write_fd = os.pipe()
    try:
        try:
            in_fd = os.open(infile, os.O_RDONLY)
        except OSError as exc:
            errors.append(PipexError(f"Infile open error: {exc.strerror}"))
        else:
            try:
                first_proc = _start(first_cmd, environ, in_fd, write_fd)
            except PipexError as exc:
                errors.append(exc)
            finally:
                os.close(in_fd)
    finally:
        os.close(write_fd)

    try:
        try:
            out_fd = os.open(
                outfile, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, _OUTFILE_MODE
            )
        except OSError as exc:
            errors.append(PipexError(f"Outfile open error: {exc.strerror}"))
        else:
            try:
                second_proc = _start(second_cmd, environ, read_fd, out_fd)
            except PipexError as exc:
                errors.append(exc)
            finally:
                os.close(out_fd)
    finally:
        os.close(read_fd)

    second_status = second_proc.wait() if second_proc is not None else 1
    first_status = first_proc.wait() if first_proc is not None else 1
    if errors:
        raise errors[0]
    return first_status, second_status


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``pipex file1 cmd1 cmd2 file2``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        print(_USAGE, file=sys.stderr)
        return 1
    infile, first_cmd, second_cmd, outfile = args
    try:
        run_pipeline(infile, first_cmd, second_cmd, outfile)
    except PipexError as exc:
        print(f"pipex: {exc}", file=sys.stderr)
    except OSError as exc:
        print(f"pipex: {exc.strerror}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())