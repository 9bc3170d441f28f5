"""Text -> value conversion for literals and external input."""

from __future__ import annotations

import re

from tagscript.diagnostics import fatal
from tagscript.diagnostics.codes import RUNTIME_VALUE_CONVERSION, RUNTIME_VARIABLE_TYPE_NOT_SUPPORTED
from tagscript.values.model import BooleanValue, DataKind, NumberValue, StringValue, Value

_NUMBER_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")
_SPECIAL_NUMBERS = {
    "infinity": float("inf"),
    "+infinity": float("inf"),
    "-infinity": float("-inf"),
    "nan": float("nan"),
}


def parse_number(text: str) -> float | None:
    normalized = text.strip()
    if not normalized:
        return None

    special = _SPECIAL_NUMBERS.get(normalized.lower())
    if special is not None:
        return special

    if _NUMBER_RE.fullmatch(normalized):
        return float(normalized)

    return None


def parse_bool(text: str) -> bool | None:
    normalized = text.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return None


def parse_value(text: str, kind: DataKind) -> Value:
    """Convert raw text into a value of `kind`; conversion failures are fatal."""
    match kind:
        case DataKind.STRING:
            return StringValue(text)
        case DataKind.NUMBER:
            number = parse_number(text)
            if number is None:
                raise fatal(RUNTIME_VALUE_CONVERSION.code, f"'{text}' couldn't be converted to a number")
            return NumberValue(number)
        case DataKind.BOOLEAN:
            flag = parse_bool(text)
            if flag is None:
                raise fatal(RUNTIME_VALUE_CONVERSION.code, f"'{text}' couldn't be converted to a boolean")
            return BooleanValue(flag)
        case _:
            raise fatal(
                RUNTIME_VARIABLE_TYPE_NOT_SUPPORTED.code,
                f"Type {kind} can't be parsed from text",
            )


__all__ = [
    "parse_bool",
    "parse_number",
    "parse_value",
]
