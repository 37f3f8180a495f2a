import pytest
from pydantic import ValidationError

from derrik.models.errors import ConfigError
from derrik.models.filter_spec import FilterSpec, Operator


def test_defaults_to_contains():
    spec = FilterSpec.build(fields=["name"], needle="John")
    assert spec.operator is Operator.CONTAINS
    assert spec.fields == ["name"]


def test_operator_from_string():
    spec = FilterSpec.build(fields=["name"], needle="john", operator="icontains")
    assert spec.operator is Operator.ICONTAINS


def test_duplicate_fields_collapse_in_order():
    spec = FilterSpec.build(fields=["b", "a", "b"], needle="x")
    assert spec.fields == ["b", "a"]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"fields": [], "needle": "x"},
        {"fields": [""], "needle": "x"},
        {"fields": ["name"], "needle": ""},
        {"fields": ["name"], "needle": "x", "operator": "startswith"},
    ],
)
def test_invalid_spec_raises_config_error(kwargs):
    with pytest.raises(ConfigError) as exc:
        FilterSpec.build(**kwargs)
    assert str(exc.value).startswith("Invalid filter:")


def test_spec_is_frozen():
    spec = FilterSpec.build(fields=["name"], needle="x")
    with pytest.raises(ValidationError):
        spec.needle = "y"
