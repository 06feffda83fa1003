"""Turning a command string into an executable path and argument list."""

from __future__ import annotations

import errno
import os
from dataclasses import dataclass, field
from typing import Mapping

from pipex.text import split_words


class CommandNotFoundError(LookupError):
    """No executable could be found for a command."""

    exit_status = 127

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not found")
        self.name = name


@dataclass(frozen=True)
class Command:
    """An executable path together with the argument vector to run it with."""

    path: str
    args: list[str] = field(default_factory=list)


def parse_explicit(cmd: str) -> Command:
    """Parse a command whose first word is a path containing ``/``.

    The path is used as given; the first argument becomes its last component.
    """
    words = split_words(cmd, " ")
    if not words:
        raise ValueError(f"{cmd}: empty command")
    path = words[0]
    components = split_words(path, "/")
    program = components[-1] if components else path
    return Command(path=path, args=[program, *words[1:]])


def find_executable(name: str, env: Mapping[str, str]) -> str:
    """Search the directories of ``env["PATH"]`` for an executable ``name``."""
    if "PATH" not in env:
        raise CommandNotFoundError(name)
    if name:
        for directory in split_words(env["PATH"], ":"):
            candidate = f"{directory}/{name}"
            if os.access(candidate, os.X_OK):
                return candidate
    raise CommandNotFoundError(name)


def _check_executable(command: Command) -> None:
    if os.access(command.path, os.X_OK):
        return
    code = errno.EACCES if os.access(command.path, os.F_OK) else errno.ENOENT
    error_type = PermissionError if code == errno.EACCES else FileNotFoundError
    raise error_type(code, os.strerror(code), command.args[0])


def resolve_command(cmd: str, env: Mapping[str, str]) -> Command:
    """Resolve a command string into a runnable :class:`Command`.

    A first word containing ``/`` is taken as a path and must be executable;
    otherwise the word is looked up in ``PATH``.
    """
    words = split_words(cmd, " ")
    if words and "/" in words[0]:
        command = parse_explicit(cmd)
        _check_executable(command)
        return command
    if "PATH" not in env or not words:
        raise CommandNotFoundError(cmd)
    return Command(path=find_executable(words[0], env), args=words)