"""Validation of shell commands and their path arguments against a configuration."""

from __future__ import annotations

import json
import os
from datetime import datetime
from typing import Sequence

from shellguard.config import AllowCommand, ShellCommandConfig
from shellguard.findargs import filter_find_special_args, parse_find_exec_args
from shellguard.logger import Logger
from shellguard.xargs import XargsParseError, parse_xargs_command

DIR_PERMISSIONS = 0o755
FILE_PERMISSIONS = 0o644


class CommandBlocked(Exception):
    """Raised when a command, path or directory is rejected by the policy."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _timestamp() -> str:
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    return stamp[:-6] + "Z" if stamp.endswith("+00:00") else stamp


class CommandValidator:
    """Decide whether commands may run, according to a ShellCommandConfig."""

    def __init__(self, config: ShellCommandConfig, logger: Logger | None = None) -> None:
        self.config = config
        self.logger = logger if logger is not None else Logger()

    def check_directory(self, directory: str | os.PathLike[str]) -> None:
        """Raise CommandBlocked unless commands may run in ``directory``."""
        directory = os.fspath(directory)
        if not directory:
            raise CommandBlocked("empty directory path is not allowed")
        if any(directory.startswith(allowed) for allowed in self.config.allowed_directories):
            return
        raise CommandBlocked(
            f"directory {_quote(directory)} is not allowed: "
            f"{self.config.default_error_message}"
        )

    def check_path(self, path: str, base_dir: str) -> str:
        """Return the absolute form of ``path``, or raise if it leaves the allowed directories."""
        if not path:
            raise CommandBlocked("empty path is not allowed")

        resolved = path if os.path.isabs(path) else os.path.join(base_dir, path)
        resolved = os.path.abspath(os.path.normpath(resolved))

        for allowed in self.config.allowed_directories:
            if resolved.startswith(os.path.abspath(allowed)):
                return resolved

        raise CommandBlocked(
            f"path {_quote(path)} is outside of allowed directories: "
            f"{self.config.default_error_message}"
        )

    def is_path_like(self, arg: str) -> bool:
        """Return True if ``arg`` looks like a file path."""
        return (
            os.sep in arg
            or "/" in arg
            or "\\" in arg
            or arg.startswith(("./", "../", "~", "."))
        )

    def validate_command(self, cmd: str, args: Sequence[str], work_dir: str) -> None:
        """Raise CommandBlocked unless ``cmd`` with ``args`` may run in ``work_dir``."""
        args = list(args)
        if cmd == "xargs":
            self.validate_xargs_command(args, work_dir)
            return
        if cmd == "find":
            self.validate_find_command(args, work_dir)
            return

        denied = self._denial_message(cmd)
        if denied is not None:
            self._block(cmd, args, denied)

        for allowed in self.config.allow_commands:
            if allowed.command == cmd:
                if allowed.sub_commands or allowed.deny_sub_commands:
                    self._check_sub_commands(cmd, args, allowed)
                self.validate_path_arguments(cmd, args, work_dir)
                return

        self._block(cmd, args, self._not_permitted(cmd))

    def validate_path_arguments(self, cmd: str, args: Sequence[str], work_dir: str) -> None:
        """Raise CommandBlocked if any path-like argument lies outside the allowed directories."""
        args = list(args)
        for arg in args:
            if arg.startswith("-") or not self.is_path_like(arg):
                continue
            try:
                self.check_path(arg, work_dir)
            except CommandBlocked as exc:
                self._block(cmd, args, exc.message)

    def validate_xargs_command(self, args: Sequence[str], work_dir: str) -> None:
        """Raise CommandBlocked unless xargs and the command it would run are allowed."""
        args = list(args)
        self._require_allowed("xargs", args)

        try:
            inner_cmd, inner_args = parse_xargs_command(args)
        except XargsParseError as exc:
            self._block("xargs", args, str(exc))

        try:
            self.validate_command(inner_cmd, inner_args, work_dir)
        except CommandBlocked as exc:
            self._block(
                "xargs", args, "xargs would execute disallowed command: " + exc.message
            )

    def validate_find_command(self, args: Sequence[str], work_dir: str) -> None:
        """Raise CommandBlocked unless find and every command it runs via -exec are allowed."""
        args = list(args)
        self._require_allowed("find", args)

        for exec_cmd in parse_find_exec_args(args):
            denied = self._denial_message(exec_cmd)
            if denied is not None:
                self._block(
                    "find", args, "find command contains disallowed -exec: " + denied
                )
            if not self.config.is_command_allowed(exec_cmd):
                self._block(
                    "find",
                    args,
                    "find command contains disallowed -exec: " + self._not_permitted(exec_cmd),
                )

        self.validate_path_arguments("find", filter_find_special_args(args), work_dir)

    def _require_allowed(self, cmd: str, args: list[str]) -> None:
        denied = self._denial_message(cmd)
        if denied is not None:
            self._block(cmd, args, denied)
        if not self.config.is_command_allowed(cmd):
            self._block(cmd, args, self._not_permitted(cmd))

    def _not_permitted(self, cmd: str) -> str:
        return f"command {_quote(cmd)} is not permitted: {self.config.default_error_message}"

    def _denial_message(self, cmd: str) -> str | None:
        for denied in self.config.deny_commands:
            if denied.command == cmd:
                reason = denied.message or self.config.default_error_message
                return f"command {_quote(cmd)} is denied: {reason}"
        return None

    def _check_sub_commands(self, cmd: str, args: list[str], rule: AllowCommand) -> None:
        if not args:
            return
        sub = args[0]
        if rule.sub_commands and sub not in rule.sub_commands:
            self._block(
                cmd, args, f"subcommand {_quote(sub)} is not allowed for command {_quote(cmd)}"
            )
        if sub in rule.deny_sub_commands:
            self._block(
                cmd, args, f"subcommand {_quote(sub)} is denied for command {_quote(cmd)}"
            )

    def _block(self, cmd: str, args: list[str], reason: str) -> None:
        self._log_blocked(cmd, args, reason)
        raise CommandBlocked(reason)

    def _log_blocked(self, cmd: str, args: list[str], reason: str) -> None:
        path = self.config.block_log_path
        if not path:
            return

        directory = os.path.dirname(path) or "."
        try:
            os.makedirs(directory, DIR_PERMISSIONS, exist_ok=True)
        except OSError as exc:
            self.logger.error("Failed to create directory for block log: %s", exc)
            return

        try:
            fd = os.open(path, os.O_APPEND | os.O_CREAT | os.O_WRONLY, FILE_PERMISSIONS)
        except OSError as exc:
            self.logger.error("Failed to open block log file: %s", exc)
            return

        entry = (
            f"{_timestamp()} [BLOCKED] Command: {cmd} [{' '.join(args)}], "
            f"Reason: {reason}\n"
        )
        try:
            with os.fdopen(fd, "a", encoding="utf-8") as handle:
                handle.write(entry)
        except OSError as exc:
            self.logger.error("Failed to write to block log file: %s", exc)