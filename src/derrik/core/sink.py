"""Sink writer: one buffered destination, chosen once, flushed once."""

import sys
from pathlib import Path
from typing import BinaryIO, Optional

from ..models.errors import IOOpenError, SinkFlushError

DEFAULT_BUFFER_SIZE = 64 * 1024


class Sink:
    """Append-only line buffer in front of stdout or a file.

    Lines are held in memory until ``flush()`` or until the buffer grows
    past ``buffer_size``, at which point they spill to the destination.
    """

    def __init__(
        self,
        stream: BinaryIO,
        path: Optional[Path] = None,
        owns_stream: bool = False,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        self.stream = stream
        self.path = path
        self.owns_stream = owns_stream
        self.buffer_size = buffer_size
        self._pending = bytearray()
        self.lines_written = 0

    @classmethod
    def open(
        cls,
        output: str | Path | None = None,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> "Sink":
        """Resolve the destination: stdout when output is None, else a file.

        The file is created or truncated immediately.

        Raises:
            IOOpenError: If the output file cannot be created
        """
        if output is None:
            return cls(sys.stdout.buffer, buffer_size=buffer_size)

        path = Path(output)
        try:
            stream = open(path, "wb")
        except OSError as e:
            raise IOOpenError(path, e.strerror or str(e)) from e
        return cls(stream, path=path, owns_stream=True, buffer_size=buffer_size)

    def write_line(self, raw: str) -> None:
        """Append a raw line followed by a single newline."""
        self._pending += raw.encode("utf-8")
        self._pending += b"\n"
        self.lines_written += 1
        if len(self._pending) >= self.buffer_size:
            self._spill()

    def _spill(self) -> None:
        try:
            self.stream.write(self._pending)
        except OSError as e:
            raise SinkFlushError(self.path, e.strerror or str(e)) from e
        self._pending.clear()

    def flush(self) -> None:
        """Deliver all buffered output to the destination.

        Raises:
            SinkFlushError: If the destination rejects the write
        """
        self._spill()
        try:
            self.stream.flush()
        except OSError as e:
            raise SinkFlushError(self.path, e.strerror or str(e)) from e

    def discard(self) -> None:
        """Drop output that has not reached the destination yet."""
        self._pending.clear()

    def close(self) -> None:
        """Close a file destination. Stdout is left open.

        Raises:
            SinkFlushError: If closing the file fails
        """
        if self.owns_stream:
            try:
                self.stream.close()
            except OSError as e:
                raise SinkFlushError(self.path, e.strerror or str(e)) from e

    def __enter__(self) -> "Sink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            self.discard()
        self.close()
