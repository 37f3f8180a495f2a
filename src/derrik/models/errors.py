"""Error taxonomy shared by the filtering core and the CLI."""

from __future__ import annotations

from pathlib import Path


class DerrikError(Exception):
    """Base class for every error derrik reports to the operator."""

    pass


class ConfigError(DerrikError):
    """A required option is missing or invalid.

    Raised before any input or output is touched.
    """

    pass


class IOOpenError(DerrikError):
    """An input cannot be opened or the output cannot be created."""

    def __init__(self, path: str | Path | None, reason: str):
        self.path = path
        self.reason = reason
        target = "<stdout>" if path is None else str(path)
        super().__init__(f"{target}: {reason}")


class SinkFlushError(IOOpenError):
    """Buffered output could not be delivered to the sink."""

    pass


class LineReadError(DerrikError):
    """A line could not be decoded as text. Recoverable."""

    def __init__(self, path: str | Path, line_number: int, reason: str):
        self.path = path
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{path}:{line_number}: {reason}")


class ParseError(DerrikError):
    """A line is not valid JSON. Recoverable and silent by default."""

    pass


__all__ = [
    "ConfigError",
    "DerrikError",
    "IOOpenError",
    "LineReadError",
    "ParseError",
    "SinkFlushError",
]
