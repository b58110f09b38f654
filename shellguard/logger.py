"""Timestamped logging of command attempts, errors and informational messages."""

from __future__ import annotations

import os
import threading
from datetime import datetime
from typing import Any, Sequence, TextIO


def _rfc3339_now() -> str:
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    return stamp[:-6] + "Z" if stamp.endswith("+00:00") else stamp


class Logger:
    """Write timestamped log lines to a text stream, or discard them."""

    def __init__(self, stream: TextIO | None = None, *, owns_stream: bool = False) -> None:
        self._stream = stream
        self._owns_stream = owns_stream
        self._lock = threading.Lock()

    def _write(self, line: str) -> None:
        if self._stream is None:
            return
        prefix = datetime.now().strftime("%Y/%m/%d %H:%M:%S")
        with self._lock:
            self._stream.write(f"{prefix} {line}\n")
            self._stream.flush()

    def command_attempt(self, cmd: str, args: Sequence[str], allowed: bool) -> None:
        """Record an attempted command together with its verdict."""
        status = "ALLOWED" if allowed else "BLOCKED"
        self._write(f"{_rfc3339_now()} [{status}] Command: {cmd} [{' '.join(args)}]")

    def error(self, message: str, *args: Any) -> None:
        """Log an error; ``args`` are %-formatted into ``message``."""
        text = message % args if args else message
        self._write(f"{_rfc3339_now()} [ERROR] {text}")

    def info(self, message: str, *args: Any) -> None:
        """Log an informational message; ``args`` are %-formatted into ``message``."""
        text = message % args if args else message
        self._write(f"{_rfc3339_now()} [INFO] {text}")

    def close(self) -> None:
        """Close the underlying file if this logger opened it."""
        if self._owns_stream and self._stream is not None:
            self._stream.close()
            self._stream = None

    def __enter__(self) -> Logger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_logger(path: str | os.PathLike[str]) -> Logger:
    """Return a logger appending to ``path``, or a discarding one for an empty path."""
    if not path:
        return Logger()
    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as exc:
        raise OSError(f"failed to open log file: {exc}") from exc
    return Logger(handle, owns_stream=True)