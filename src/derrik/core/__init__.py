"""Streaming JSONL filtering core."""

from .matching import haystack, matches
from .pipeline import FilterStats, filter_into, run_filter
from .records import Record, parse_record
from .sink import Sink
from .sources import iter_lines, read_lines

__all__ = [
    "FilterStats",
    "Record",
    "Sink",
    "filter_into",
    "haystack",
    "iter_lines",
    "matches",
    "parse_record",
    "read_lines",
    "run_filter",
]
