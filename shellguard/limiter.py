"""A writer wrapper that caps how many bytes reach the underlying stream."""

from __future__ import annotations

from typing import BinaryIO


class OutputLimiter:
    """Pass writes through until ``max_bytes`` is reached, then truncate."""

    def __init__(self, writer: BinaryIO, max_bytes: int) -> None:
        self.writer = writer
        self.max_bytes = max_bytes
        self.bytes_written = 0
        self.total_input_bytes = 0
        self.truncated = False
        self.truncation_message = (
            f"\n\n[Output truncated, exceeded {max_bytes} bytes limit]\n"
        )

    def _emit(self, chunk: bytes) -> int:
        written = self.writer.write(chunk)
        return len(chunk) if written is None else written

    def _truncation_notice(self) -> bytes:
        remaining = self.total_input_bytes - self.bytes_written
        return (
            f"\n\n[Output truncated, exceeded {self.max_bytes} bytes limit. "
            f"{remaining} bytes remaining]\n"
            "If you need to view the complete output, consider using commands like "
            "tail or modifying your command to ensure the output stays within the limits."
        ).encode()

    def write(self, data: bytes) -> int:
        """Write ``data``, reporting its full length even when it is cut short."""
        data = bytes(data)
        self.total_input_bytes += len(data)

        if self.truncated:
            return len(data)

        remaining = self.max_bytes - self.bytes_written
        if remaining <= 0:
            self._emit(self._truncation_notice())
            self.truncated = True
            return len(data)

        if len(data) > remaining:
            self.bytes_written += self._emit(data[:remaining])
            self.truncated = True
            self._emit(self._truncation_notice())
            return len(data)

        written = self._emit(data)
        self.bytes_written += written
        return written

    def was_truncated(self) -> bool:
        """Return whether output has been truncated."""
        return self.truncated

    def remaining_bytes(self) -> int:
        """Return how many input bytes were dropped because of truncation."""
        if not self.truncated:
            return 0
        return self.total_input_bytes - self.bytes_written