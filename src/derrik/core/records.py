"""Record parser: tolerant per-line JSON decoding."""

import json
import math
from dataclasses import dataclass
from typing import Any, Optional

from ..models.errors import ParseError


@dataclass(frozen=True)
class Record:
    """A raw input line and its parsed JSON value.

    ``raw`` is what gets written out; ``value`` only feeds the match decision.
    """

    raw: str
    value: Any


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def _parse_float(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {text}")
    return value


def parse_record(line: str, strict: bool = False) -> Optional[Record]:
    """Parse one line as a single JSON value.

    Args:
        line: Line text without its newline
        strict: Raise ParseError instead of returning None on bad input

    Returns:
        Record on success, None if the line is not valid JSON
    """
    try:
        value = json.loads(
            line, parse_float=_parse_float, parse_constant=_reject_constant
        )
    except (ValueError, RecursionError) as e:
        if strict:
            raise ParseError(f"Malformed JSON: {e}") from e
        return None
    return Record(raw=line, value=value)
