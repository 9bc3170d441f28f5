import math

import pytest

from tagscript.diagnostics import TagScriptError
from tagscript.values import (
    ArrayValue,
    BooleanValue,
    DataKind,
    NumberValue,
    StringValue,
    assert_kind,
    data_kind_for_name,
    format_number,
    parse_bool,
    parse_number,
    parse_value,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (5.0, "5"),
        (-3.0, "-3"),
        (2.5, "2.5"),
        (0.1 + 0.2, "0.30000000000000004"),
        (math.inf, "Infinity"),
        (-math.inf, "-Infinity"),
        (math.nan, "NaN"),
    ],
)
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_scalar_formatting() -> None:
    assert StringValue("plain").format() == "plain"
    assert BooleanValue(True).format() == "True"
    assert BooleanValue(False).format() == "False"
    assert NumberValue(12.0).format() == "12"


def test_array_formats_recursively_with_quoted_strings() -> None:
    nested = ArrayValue((StringValue("a"), NumberValue(1.0), ArrayValue((BooleanValue(False),))))

    assert nested.format() == '["a", 1, [False]]'
    assert ArrayValue().format() == "[]"
    assert len(nested) == 3


def test_kinds_and_raw_get() -> None:
    assert NumberValue(1.0).kind == DataKind.NUMBER
    assert StringValue("x").raw_get() == "x"
    assert BooleanValue(True).raw_get() is True
    assert ArrayValue((NumberValue(1.0), StringValue("b"))).raw_get() == [1.0, "b"]


def test_clone_is_equal_but_distinct() -> None:
    original = ArrayValue((ArrayValue((NumberValue(1.0),)), StringValue("s")))
    copy = original.clone()

    assert copy == original
    assert copy is not original
    assert copy.items[0] is not original.items[0]
    assert copy.format() == original.format()


def test_assert_kind() -> None:
    value = StringValue("x")

    assert value.assert_kind(DataKind.STRING) is value
    assert assert_kind(value, DataKind.STRING) is value
    with pytest.raises(TagScriptError) as excinfo:
        value.assert_kind(DataKind.NUMBER)
    assert excinfo.value.code == 4002
    assert "number" in excinfo.value.diagnostic.info
    assert "string" in excinfo.value.diagnostic.info


def test_data_kind_names() -> None:
    assert data_kind_for_name("array") == DataKind.ARRAY
    assert data_kind_for_name("Number") is None
    assert data_kind_for_name("int") is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("3", 3.0),
        (" -2.5 ", -2.5),
        ("+.5", 0.5),
        ("1e3", 1000.0),
        ("7.", 7.0),
        ("Infinity", math.inf),
        ("-infinity", -math.inf),
    ],
)
def test_parse_number(text: str, expected: float) -> None:
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "1,5", "0x10", "1 2", "--1"])
def test_parse_number_rejects(text: str) -> None:
    assert parse_number(text) is None


def test_parse_number_nan() -> None:
    result = parse_number("NaN")

    assert result is not None
    assert math.isnan(result)


def test_parse_bool() -> None:
    assert parse_bool("true") is True
    assert parse_bool(" FALSE\n") is False
    assert parse_bool("yes") is None


def test_parse_value() -> None:
    assert parse_value("4", DataKind.NUMBER) == NumberValue(4.0)
    assert parse_value("True", DataKind.BOOLEAN) == BooleanValue(True)
    assert parse_value(" raw ", DataKind.STRING) == StringValue(" raw ")


def test_parse_value_conversion_errors() -> None:
    with pytest.raises(TagScriptError) as excinfo:
        parse_value("four", DataKind.NUMBER)
    assert excinfo.value.code == 4018

    with pytest.raises(TagScriptError) as excinfo:
        parse_value("maybe", DataKind.BOOLEAN)
    assert excinfo.value.code == 4018

    with pytest.raises(TagScriptError) as excinfo:
        parse_value("[1]", DataKind.ARRAY)
    assert excinfo.value.code == 4015
