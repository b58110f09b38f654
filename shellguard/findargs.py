"""Inspection of ``find`` arguments for commands run through ``-exec``."""

from __future__ import annotations

from typing import Iterable

EXEC_FLAGS = frozenset({"-exec", "-execdir"})
"""Flags after which ``find`` runs a command."""

TERMINATORS = frozenset({";", "\\;", "+"})
"""Tokens that end an ``-exec`` clause."""


def parse_find_exec_args(args: Iterable[str]) -> list[str]:
    """Return the commands that ``find`` would run through ``-exec`` or ``-execdir``.

    Only the command name of each clause is returned; an empty list means
    no command would be executed.
    """
    commands: list[str] = []
    tokens = iter(args)
    for token in tokens:
        if token not in EXEC_FLAGS:
            continue
        first = next(tokens, None)
        if first is None or first in TERMINATORS:
            continue
        if not first.startswith("{"):
            commands.append(first)
        for rest in tokens:
            if rest in TERMINATORS:
                break
    return commands


def filter_find_special_args(args: Iterable[str]) -> list[str]:
    """Drop ``find``'s clause terminators so they are not mistaken for paths."""
    return [arg for arg in args if arg not in TERMINATORS]