"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from derrik.cli import cli


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["filter", "in.jsonl", "--where", "name", "--what", "x"])
        result.stdout   # data written to the sink
        result.stderr   # diagnostics
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def write_jsonl(tmp_path):
    """Write lines to a file under tmp_path and return its path.

    Usage:
        path = write_jsonl("a.jsonl", ['{"a":1}', "not json"])
    """

    def _write(name, lines, newline="\n"):
        path = tmp_path / name
        path.write_bytes("".join(line + newline for line in lines).encode("utf-8"))
        return path

    return _write


@pytest.fixture
def sample_lines():
    """Mixed JSONL content: objects, a scalar, and a malformed line."""
    return [
        '{"name":"John Doe","age":30}',
        '{"name":"Alice","description":"Software Engineer"}',
        "not json at all",
        '{"name": "Bob", "age": 25, "tags": ["john"]}',
        "42",
    ]


@pytest.fixture
def sample_jsonl(write_jsonl, sample_lines):
    """Provide path to a sample JSONL file."""
    return write_jsonl("sample.jsonl", sample_lines)
