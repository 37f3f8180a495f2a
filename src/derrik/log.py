"""Verbosity-gated diagnostics written to stderr.

Diagnostics never touch the data sink: everything goes through
``click.echo(..., err=True)``.
"""

from enum import IntEnum

import click


class Level(IntEnum):
    """Diagnostic levels, from silent to most chatty."""

    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def from_flags(cls, verbose: int = 0, quiet: int = 0) -> "Level":
        """Map counted -v/-q flags onto a level, starting from ERROR."""
        value = cls.ERROR + verbose - quiet
        return cls(max(cls.OFF, min(cls.TRACE, value)))


class Diagnostics:
    """Emit operator-facing messages at or below a verbosity level."""

    def __init__(self, level: Level = Level.ERROR):
        self.level = level

    def enabled(self, level: Level) -> bool:
        return level != Level.OFF and level <= self.level

    def emit(self, level: Level, message: str) -> None:
        if self.enabled(level):
            click.echo(message, err=True)

    def error(self, message: str) -> None:
        self.emit(Level.ERROR, message)

    def warn(self, message: str) -> None:
        self.emit(Level.WARN, message)

    def info(self, message: str) -> None:
        self.emit(Level.INFO, message)

    def debug(self, message: str) -> None:
        self.emit(Level.DEBUG, message)

    def trace(self, message: str) -> None:
        self.emit(Level.TRACE, message)
