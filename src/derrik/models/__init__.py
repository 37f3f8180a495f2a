"""Data models for derrik."""

from .errors import (
    ConfigError,
    DerrikError,
    IOOpenError,
    LineReadError,
    ParseError,
    SinkFlushError,
)
from .filter_spec import FilterSpec, Operator

__all__ = [
    "ConfigError",
    "DerrikError",
    "FilterSpec",
    "IOOpenError",
    "LineReadError",
    "Operator",
    "ParseError",
    "SinkFlushError",
]
