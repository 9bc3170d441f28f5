"""Runtime values."""

from tagscript.values.model import (
    EMPTY_ARRAY_PLACEHOLDER,
    QUOTE_STRINGS,
    ArrayValue,
    BooleanValue,
    DataKind,
    NumberValue,
    StringValue,
    Value,
    assert_kind,
    data_kind_for_name,
    format_number,
)
from tagscript.values.operations import (
    BinaryOperator,
    UnaryOperator,
    binary_operation,
    divides_by_zero,
    unary_operation,
)
from tagscript.values.scalar import parse_bool, parse_number, parse_value

__all__ = [
    "EMPTY_ARRAY_PLACEHOLDER",
    "QUOTE_STRINGS",
    "ArrayValue",
    "BinaryOperator",
    "BooleanValue",
    "DataKind",
    "NumberValue",
    "StringValue",
    "UnaryOperator",
    "Value",
    "assert_kind",
    "binary_operation",
    "data_kind_for_name",
    "divides_by_zero",
    "format_number",
    "parse_bool",
    "parse_number",
    "parse_value",
    "unary_operation",
]
