"""Filter orchestration: sources → parser → matcher → sink."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from ..log import Diagnostics
from ..models.filter_spec import FilterSpec
from .matching import matches
from .records import parse_record
from .sink import Sink
from .sources import read_lines


@dataclass
class FilterStats:
    """Counters collected over one filtering run."""

    sources: int = 0
    lines: int = 0
    malformed: int = 0
    matched: int = 0


def filter_into(
    sink: Sink,
    inputs: Sequence[str | Path],
    spec: FilterSpec,
    diagnostics: Optional[Diagnostics] = None,
) -> FilterStats:
    """Stream every input through the filter into an already open sink.

    Does not flush; the caller owns the sink.
    """
    diagnostics = diagnostics or Diagnostics()
    stats = FilterStats()

    for path in inputs:
        diagnostics.debug(f"Reading {path}")
        stats.sources += 1
        for line in read_lines(path, diagnostics):
            stats.lines += 1
            record = parse_record(line)
            if record is None:
                stats.malformed += 1
                diagnostics.trace(f"Skipping malformed JSON in {path}")
                continue
            if matches(record.value, spec):
                sink.write_line(record.raw)
                stats.matched += 1

    return stats


def run_filter(
    inputs: Sequence[str | Path],
    spec: FilterSpec,
    output: str | Path | None = None,
    diagnostics: Optional[Diagnostics] = None,
) -> FilterStats:
    """Run one complete filter pass.

    The sink is resolved before any input is opened and flushed exactly
    once after the last source. Any fatal error discards unflushed output.

    Args:
        inputs: Input file paths, in output order
        spec: Validated filter configuration
        output: Output file path, or None for stdout
        diagnostics: Where to report progress and bad lines

    Returns:
        FilterStats for the run

    Raises:
        IOOpenError: If the output or any input cannot be opened
        SinkFlushError: If the final flush fails
    """
    diagnostics = diagnostics or Diagnostics()

    with Sink.open(output) as sink:
        stats = filter_into(sink, inputs, spec, diagnostics)
        sink.flush()

    diagnostics.info(
        f"Matched {stats.matched} of {stats.lines} lines "
        f"from {stats.sources} source(s)"
    )
    return stats
