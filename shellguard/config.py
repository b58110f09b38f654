"""Shell command permission configuration."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from typing import Any

DEFAULT_EXECUTION_TIMEOUT = 30
"""Default execution timeout in seconds."""

DEFAULT_MAX_OUTPUT_SIZE = 50 * 1024
"""Default maximum output size in bytes."""

DEFAULT_ERROR_MESSAGE = "Command not allowed by security policy"


class ConfigError(ValueError):
    """Raised when a configuration cannot be read or decoded."""


@dataclass
class DenyCommand:
    """A command that is explicitly denied."""

    command: str
    message: str = ""


@dataclass
class AllowCommand:
    """A command that is allowed, optionally restricted by subcommand."""

    command: str
    sub_commands: list[str] = field(default_factory=list)
    deny_sub_commands: list[str] = field(default_factory=list)


def _string(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _string_list(value: Any, name: str) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{name} must be a list of strings")
    return list(value)


def _integer(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    return value


def _entries(items: Any, kind: str) -> list[Any]:
    if items is None:
        return []
    if not isinstance(items, list):
        raise ConfigError(f"{kind} must be a list, got {type(items).__name__}")
    return items


def parse_allow_commands(items: Any) -> list[AllowCommand]:
    """Build allow rules from a list of command names or rule objects."""
    result = []
    for item in _entries(items, "allow commands"):
        if isinstance(item, str):
            result.append(AllowCommand(command=item))
        elif isinstance(item, dict):
            result.append(
                AllowCommand(
                    command=_string(item.get("command"), "command"),
                    sub_commands=_string_list(item.get("subCommands"), "subCommands"),
                    deny_sub_commands=_string_list(
                        item.get("denySubCommands"), "denySubCommands"
                    ),
                )
            )
        else:
            raise ConfigError(f"invalid allow command entry: {item!r}")
    return result


def parse_deny_commands(items: Any) -> list[DenyCommand]:
    """Build deny rules from a list of command names or rule objects."""
    result = []
    for item in _entries(items, "deny commands"):
        if isinstance(item, str):
            result.append(DenyCommand(command=item))
        elif isinstance(item, dict):
            result.append(
                DenyCommand(
                    command=_string(item.get("command"), "command"),
                    message=_string(item.get("message"), "message"),
                )
            )
        else:
            raise ConfigError(f"invalid deny command entry: {item!r}")
    return result


@dataclass
class ShellCommandConfig:
    """Permissions and limits for shell command execution."""

    allowed_directories: list[str] = field(default_factory=list)
    allow_commands: list[AllowCommand] = field(default_factory=list)
    deny_commands: list[DenyCommand] = field(default_factory=list)
    default_error_message: str = ""
    block_log_path: str = ""
    max_execution_time: int = 0
    max_output_size: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> ShellCommandConfig:
        """Build a configuration from decoded JSON, filling in defaults."""
        if not isinstance(data, dict):
            raise ConfigError("configuration must be a JSON object")

        if "allowCommands" not in data:
            raise ConfigError("error unmarshaling allow commands: missing allowCommands")
        try:
            allow_commands = parse_allow_commands(data["allowCommands"])
        except ConfigError as exc:
            raise ConfigError(f"error unmarshaling allow commands: {exc}") from exc

        if "denyCommands" not in data:
            raise ConfigError("error unmarshaling deny commands: missing denyCommands")
        try:
            deny_commands = parse_deny_commands(data["denyCommands"])
        except ConfigError as exc:
            raise ConfigError(f"error unmarshaling deny commands: {exc}") from exc

        message = _string(data.get("defaultErrorMessage"), "defaultErrorMessage")
        max_time = _integer(data.get("maxExecutionTime"), "maxExecutionTime")
        max_output = _integer(data.get("maxOutputSize"), "maxOutputSize")

        return cls(
            allowed_directories=_string_list(
                data.get("allowedDirectories"), "allowedDirectories"
            ),
            allow_commands=allow_commands,
            deny_commands=deny_commands,
            default_error_message=message or DEFAULT_ERROR_MESSAGE,
            block_log_path=_string(data.get("blockLogPath"), "blockLogPath"),
            max_execution_time=max_time if max_time > 0 else DEFAULT_EXECUTION_TIMEOUT,
            max_output_size=max_output if max_output > 0 else DEFAULT_MAX_OUTPUT_SIZE,
        )

    def is_command_allowed(self, cmd: str) -> bool:
        """Return True if the command appears in the allow list."""
        return any(allowed.command == cmd for allowed in self.allow_commands)

    def add_allowed_command(self, cmd: str) -> None:
        """Append the command to the allow list unless already present."""
        if not self.is_command_allowed(cmd):
            self.allow_commands.append(AllowCommand(command=cmd))


def new_default_config() -> ShellCommandConfig:
    """Return the built-in default configuration."""
    return ShellCommandConfig(
        allowed_directories=["/home", "/tmp"],
        allow_commands=[
            AllowCommand(command="ls"),
            AllowCommand(command="cat"),
            AllowCommand(command="echo"),
        ],
        deny_commands=[DenyCommand(command="rm", message="Remove command is not allowed")],
        default_error_message=DEFAULT_ERROR_MESSAGE,
        max_execution_time=DEFAULT_EXECUTION_TIMEOUT,
        max_output_size=DEFAULT_MAX_OUTPUT_SIZE,
    )


def load_config_from_file(file_path: str | os.PathLike[str]) -> ShellCommandConfig:
    """Load a configuration from a JSON file."""
    try:
        with open(file_path, "rb") as handle:
            raw = handle.read()
    except OSError as exc:
        raise ConfigError(f"failed to read config file: {exc}") from exc

    try:
        return ShellCommandConfig.from_dict(json.loads(raw))
    except (ValueError, ConfigError) as exc:
        raise ConfigError(f"failed to decode config file: {exc}") from exc