"""Finding commands on the search path."""

from __future__ import annotations

import os
from typing import List, Mapping, Optional, Tuple

from pipework.words import join, split_words


class CommandNotFoundError(LookupError):
    """No directory on the search path holds the command."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not found")
        self.name = name


def _environment(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def search_dirs(env: Optional[Mapping[str, str]] = None) -> List[str]:
    """Return the directories of the first variable whose name starts with PATH.

    Empty entries are dropped. With no such variable the list is empty.
    """
    for key, value in _environment(env).items():
        if key.startswith("PATH"):
            entry = f"{key}={value}"
            return split_words(entry[5:], ":")
    return []


def resolve_command(name: str, env: Optional[Mapping[str, str]] = None) -> str:
    """Return ``dir/name`` for the first search directory where it exists."""
    if not name:
        raise CommandNotFoundError(name)
    for directory in search_dirs(env):
        candidate = join(join(directory, "/"), name)
        if os.path.exists(candidate):
            return candidate
    raise CommandNotFoundError(name)


def parse_command(
    command: str, env: Optional[Mapping[str, str]] = None
) -> Tuple[str, List[str]]:
    """Split ``command`` on spaces and resolve its first word.

    Return the executable path and the argument list, program name first.
    """
    args = split_words(command, " ")
    if not args:
        raise CommandNotFoundError("")
    return resolve_command(args[0], env), args