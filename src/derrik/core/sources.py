"""Source reader: stream decoded lines from input files in order."""

from pathlib import Path
from typing import Iterable, Iterator, Optional

from ..log import Diagnostics
from ..models.errors import IOOpenError, LineReadError


def _strip_newline(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def read_lines(
    path: str | Path, diagnostics: Optional[Diagnostics] = None
) -> Iterator[str]:
    """Yield the lines of one input file, newline stripped.

    Opening happens on first iteration. Lines that are not valid UTF-8 are
    reported and skipped; the handle is closed on every exit path.

    Raises:
        IOOpenError: If the file cannot be opened or read
    """
    try:
        handle = open(path, "rb")
    except OSError as e:
        raise IOOpenError(path, e.strerror or str(e)) from e

    with handle:
        line_number = 0
        while True:
            try:
                raw = handle.readline()
            except OSError as e:
                raise IOOpenError(path, e.strerror or str(e)) from e
            if not raw:
                return
            line_number += 1
            try:
                text = _strip_newline(raw).decode("utf-8")
            except UnicodeDecodeError as e:
                if diagnostics is not None:
                    err = LineReadError(path, line_number, str(e))
                    diagnostics.error(f"Error reading line: {err}")
                continue
            yield text


def iter_lines(
    paths: Iterable[str | Path], diagnostics: Optional[Diagnostics] = None
) -> Iterator[str]:
    """Yield lines from every path, file order then line order.

    Each file is exhausted and closed before the next one is opened.
    """
    for path in paths:
        yield from read_lines(path, diagnostics)
