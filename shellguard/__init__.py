"""Policy checks for shell commands: allow and deny lists, path confinement and output limits."""

__version__ = "0.1.0"

__all__ = ["config", "limiter", "logger", "fsutil", "findargs", "xargs", "validator"]