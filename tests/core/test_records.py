import pytest

from derrik.core.records import Record, parse_record
from derrik.models.errors import ParseError


def test_parse_object():
    record = parse_record('{"name":"John Doe","age":30}')
    assert record == Record(raw='{"name":"John Doe","age":30}', value={"name": "John Doe", "age": 30})


def test_raw_is_kept_verbatim():
    line = '{ "b" : 1 ,  "a":2 }  '
    assert parse_record(line).raw == line


def test_null_is_a_value_not_a_failure():
    record = parse_record("null")
    assert record is not None
    assert record.value is None


@pytest.mark.parametrize(
    "line",
    ["", "not json", '{"name": "John"', "{'a': 1}", "NaN", '{"x":1e400}', '{"x": Infinity}', '{"a":1} {"b":2}'],
)
def test_malformed_lines_yield_nothing(line):
    assert parse_record(line) is None


def test_strict_mode_raises_parse_error():
    with pytest.raises(ParseError):
        parse_record("{oops", strict=True)
