"""Field matcher: top-level substring matching over JSON objects."""

import json
from typing import Any

from ..models.filter_spec import FilterSpec, Operator


def haystack(value: Any) -> str:
    """Render a JSON value as compact JSON text.

    Strings keep their quotes and escapes, non-ASCII stays literal.
    """
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def field_matches(value: Any, operator: Operator, needle: str) -> bool:
    """Check a single field value against the needle.

    Arrays and objects never match.
    """
    if isinstance(value, (list, dict)):
        return False

    text = haystack(value)
    if operator == Operator.ICONTAINS:
        # Only the haystack is folded; the needle is used verbatim
        text = text.lower()
    return needle in text


def matches(value: Any, spec: FilterSpec) -> bool:
    """Decide whether a parsed record satisfies the filter.

    Fields are tried in order and the first hit wins. A missing field is
    skipped, not treated as a mismatch. Non-object values never match.

    Examples:
        >>> spec = FilterSpec(fields=["name"], needle="John")
        >>> matches({"name": "John Doe", "age": 30}, spec)
        True
        >>> matches({"age": 30}, spec)
        False
    """
    if not isinstance(value, dict):
        return False

    for field in spec.fields:
        if field not in value:
            continue
        if field_matches(value[field], spec.operator, spec.needle):
            return True
    return False
