"""Runtime value model: a closed union of number, string, boolean and array."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, TypeAlias

from tagscript.diagnostics import fatal
from tagscript.diagnostics.codes import RUNTIME_TYPE_MISMATCH

QUOTE_STRINGS: Final[str] = "quote-strings"
"""`format()` flag: render string values inside double quotes."""

EMPTY_ARRAY_PLACEHOLDER: Final[str] = "[]"


class DataKind(StrEnum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"


def data_kind_for_name(name: str) -> DataKind | None:
    """Resolve a `type`/`target-type` attribute value."""
    try:
        return DataKind(name)
    except ValueError:
        return None


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True, slots=True)
class NumberValue:
    value: float

    @property
    def kind(self) -> DataKind:
        return DataKind.NUMBER

    def raw_get(self) -> float:
        return self.value

    def format(self, *args: str) -> str:
        return format_number(self.value)

    def clone(self) -> NumberValue:
        return NumberValue(self.value)

    def assert_kind(self, expected: DataKind) -> NumberValue:
        check_kind(self.kind, expected)
        return self


@dataclass(frozen=True, slots=True)
class StringValue:
    value: str

    @property
    def kind(self) -> DataKind:
        return DataKind.STRING

    def raw_get(self) -> str:
        return self.value

    def format(self, *args: str) -> str:
        if QUOTE_STRINGS in args:
            return f'"{self.value}"'
        return self.value

    def clone(self) -> StringValue:
        return StringValue(self.value)

    def assert_kind(self, expected: DataKind) -> StringValue:
        check_kind(self.kind, expected)
        return self


@dataclass(frozen=True, slots=True)
class BooleanValue:
    value: bool

    @property
    def kind(self) -> DataKind:
        return DataKind.BOOLEAN

    def raw_get(self) -> bool:
        return self.value

    def format(self, *args: str) -> str:
        return "True" if self.value else "False"

    def clone(self) -> BooleanValue:
        return BooleanValue(self.value)

    def assert_kind(self, expected: DataKind) -> BooleanValue:
        check_kind(self.kind, expected)
        return self


@dataclass(frozen=True, slots=True)
class ArrayValue:
    items: tuple[Value, ...] = ()

    @property
    def kind(self) -> DataKind:
        return DataKind.ARRAY

    def raw_get(self) -> list[float | str | bool | list]:
        return [item.raw_get() for item in self.items]

    def format(self, *args: str) -> str:
        if not self.items:
            return EMPTY_ARRAY_PLACEHOLDER
        return "[" + ", ".join(item.format(QUOTE_STRINGS) for item in self.items) + "]"

    def clone(self) -> ArrayValue:
        # Deep copy: element values never alias between two variables.
        return ArrayValue(tuple(item.clone() for item in self.items))

    def assert_kind(self, expected: DataKind) -> ArrayValue:
        check_kind(self.kind, expected)
        return self

    def __len__(self) -> int:
        return len(self.items)


Value: TypeAlias = NumberValue | StringValue | BooleanValue | ArrayValue


def check_kind(actual: DataKind, expected: DataKind) -> None:
    if actual != expected:
        raise fatal(RUNTIME_TYPE_MISMATCH.code, f"Was expecting {expected} but got {actual}")


def assert_kind(value: Value, expected: DataKind) -> Value:
    check_kind(value.kind, expected)
    return value


def truth_as_number(value: BooleanValue) -> float:
    return 1.0 if value.value else 0.0


__all__ = [
    "EMPTY_ARRAY_PLACEHOLDER",
    "QUOTE_STRINGS",
    "ArrayValue",
    "BooleanValue",
    "DataKind",
    "NumberValue",
    "StringValue",
    "Value",
    "assert_kind",
    "check_kind",
    "data_kind_for_name",
    "format_number",
    "truth_as_number",
]
