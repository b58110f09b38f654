"""Extraction of the command that ``xargs`` would run."""

from __future__ import annotations

from typing import Sequence

EXEC_FLAGS = frozenset({"-exec", "--exec"})

FLAGS_WITH_ARGS = frozenset(
    {
        "-a", "--arg-file",
        "-E", "--eof",
        "--max-args", "-n",
        "--max-chars", "-s",
        "--max-lines", "-L",
        "--max-procs", "-P",
        "-i", "-I",
    }
)
"""xargs flags that take their value as the following argument."""


class XargsParseError(ValueError):
    """Raised when the command run by ``xargs`` cannot be determined."""


def is_flag_with_arg(flag: str) -> bool:
    """Return True if ``flag`` consumes the next argument as its value."""
    return flag in FLAGS_WITH_ARGS


def _find_exec_command(args: Sequence[str]) -> tuple[str, list[str]] | None:
    for pos, arg in enumerate(args[:-1]):
        if arg in EXEC_FLAGS:
            return args[pos + 1], list(args[pos + 2:])
    return None


def _find_command_after_flags(args: Sequence[str]) -> tuple[str, list[str]] | None:
    tokens = iter(enumerate(args))
    for pos, arg in tokens:
        if not arg.startswith("-"):
            return arg, list(args[pos + 1:])
        if is_flag_with_arg(arg):
            next(tokens, None)
    return None


def parse_xargs_command(args: Sequence[str]) -> tuple[str, list[str]]:
    """Return the command ``xargs`` would run and the arguments given to it."""
    args = list(args)
    if not args:
        raise XargsParseError("no arguments provided to xargs")

    found = _find_exec_command(args) or _find_command_after_flags(args)
    if found is None:
        raise XargsParseError("unable to determine command to be executed by xargs")
    return found