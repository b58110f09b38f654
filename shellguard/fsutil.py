"""File system helpers."""

from __future__ import annotations

import os

DEFAULT_DIR_PERMISSIONS = 0o755


def ensure_log_directory(log_path: str | os.PathLike[str]) -> None:
    """Create the directory that will hold ``log_path`` if it does not exist."""
    if not log_path:
        return

    directory = os.path.dirname(os.fspath(log_path)) or "."
    try:
        os.stat(directory)
        return
    except FileNotFoundError:
        pass
    except OSError as exc:
        raise OSError(f"failed to check log directory: {exc}") from exc

    try:
        os.makedirs(directory, DEFAULT_DIR_PERMISSIONS, exist_ok=True)
    except OSError as exc:
        raise OSError(f"failed to create log directory: {exc}") from exc