"""Run ``infile < cmd1 | cmd2 > outfile`` the way a shell would."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from typing import Callable, Mapping, Sequence

from pipex.command import CommandNotFoundError, resolve_command

USAGE = "Use: ./pipex infile cmd1 cmd2 outfile"


class PipexError(Exception):
    """A failure that ends one stage of the pipeline with an exit status."""

    def __init__(self, message: str, exit_status: int = 1) -> None:
        super().__init__(message)
        self.exit_status = exit_status


def _report(message: str) -> None:
    print(message, file=sys.stderr)


def _open_input(path: str) -> int:
    if not os.access(path, os.F_OK | os.R_OK):
        code = errno.EACCES if os.path.lexists(path) else errno.ENOENT
        raise PipexError(f"{path}: {os.strerror(code)}", 127)
    try:
        return os.open(path, os.O_RDONLY)
    except OSError as exc:
        raise PipexError(f"{path}: {exc.strerror}", 1) from exc


def _open_output(path: str) -> int:
    try:
        return os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError(f"{path}: {exc.strerror}", 1) from exc


def _launch(
    cmd: str,
    env: Mapping[str, str],
    stdin: int,
    stdout: int,
) -> subprocess.Popen | int:
    """Start ``cmd``; return the process, or the exit status if it never ran."""
    try:
        command = resolve_command(cmd, env)
    except CommandNotFoundError as exc:
        _report(str(exc))
        return exc.exit_status
    except OSError as exc:
        _report(f"{exc.filename}: {exc.strerror}")
        return 1
    try:
        return subprocess.Popen(
            command.args,
            executable=command.path,
            stdin=stdin,
            stdout=stdout,
            env=dict(env),
        )
    except OSError as exc:
        _report(f"execve: {exc.strerror}")
        return 1


def _stage(
    opener: Callable[[], int],
    cmd: str,
    env: Mapping[str, str],
    pipe_end: int,
    file_is_stdin: bool,
) -> subprocess.Popen | int:
    try:
        fd = opener()
    except PipexError as exc:
        _report(str(exc))
        return exc.exit_status
    try:
        if file_is_stdin:
            return _launch(cmd, env, stdin=fd, stdout=pipe_end)
        return _launch(cmd, env, stdin=pipe_end, stdout=fd)
    finally:
        os.close(fd)


def _wait(stage: subprocess.Popen | int) -> int:
    if isinstance(stage, int):
        return stage
    status = stage.wait()
    return status if status >= 0 else 1


def run_pipeline(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Mapping[str, str],
) -> int:
    """Feed ``infile`` through ``cmd1`` into ``cmd2``, writing ``outfile``.

    Returns the exit status of the second command.  Failures of either stage
    are reported on stderr; the other stage still runs.
    """
    if not env:
        raise PipexError("empty environment", 1)
    read_fd, write_fd = os.pipe()
    try:
        first = _stage(lambda: _open_input(infile), cmd1, env, write_fd, True)
    finally:
        os.close(write_fd)
    try:
        second = _stage(lambda: _open_output(outfile), cmd2, env, read_fd, False)
    finally:
        os.close(read_fd)
    _wait(first)
    return _wait(second)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    env = dict(os.environ)
    if not env:
        return 1
    if len(args) != 4:
        _report(USAGE)
        return 1
    infile, cmd1, cmd2, outfile = args
    try:
        return run_pipeline(infile, cmd1, cmd2, outfile, env)
    except PipexError as exc:
        _report(str(exc))
        return exc.exit_status