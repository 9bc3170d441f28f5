"""Operator tables keyed by operand kinds."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping, TypeAlias

from tagscript.diagnostics import fatal
from tagscript.diagnostics.codes import RUNTIME_UNSUPPORTED_OPERANDS
from tagscript.values.model import BooleanValue, DataKind, NumberValue, StringValue, Value, truth_as_number

N = DataKind.NUMBER
S = DataKind.STRING
B = DataKind.BOOLEAN


class BinaryOperator(StrEnum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    MODULO = "modulo"
    POWER = "raise"
    ROOT = "root"
    EQUALS = "equals"
    AND = "and"
    OR = "or"


class UnaryOperator(StrEnum):
    NEGATE = "negate"


BinaryFunction: TypeAlias = Callable[[Value, Value], Value]
UnaryFunction: TypeAlias = Callable[[Value], Value]


def _numeric(value: Value) -> float:
    match value:
        case NumberValue():
            return value.value
        case BooleanValue():
            return truth_as_number(value)
        case _:
            raise fatal(RUNTIME_UNSUPPORTED_OPERANDS.code, f"{value.kind} is not numeric")


def ieee_divide(left: float, right: float) -> float:
    """Float division that yields inf/nan instead of raising."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def ieee_modulo(left: float, right: float) -> float:
    """Truncated remainder (sign follows the dividend); nan on zero divisor."""
    if right == 0 or math.isinf(left) or math.isnan(right):
        return math.nan
    return math.fmod(left, right)


def ieee_power(base: float, exponent: float) -> float:
    if base == 0 and exponent < 0:
        return math.inf
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and float(exponent).is_integer() and int(exponent) % 2 == 1:
            return -math.inf
        return math.inf
    except ValueError:
        return math.nan


def _arithmetic(function: Callable[[float, float], float]) -> BinaryFunction:
    def apply(left: Value, right: Value) -> Value:
        return NumberValue(function(_numeric(left), _numeric(right)))

    return apply


def _concat(left: Value, right: Value) -> Value:
    return StringValue(f"{left.raw_get()}{right.raw_get()}")


def _numeric_equals(left: Value, right: Value) -> Value:
    return BooleanValue(_numeric(left) == _numeric(right))


def _raw_equals(left: Value, right: Value) -> Value:
    return BooleanValue(left.raw_get() == right.raw_get())


def _logical(function: Callable[[bool, bool], bool]) -> BinaryFunction:
    def apply(left: Value, right: Value) -> Value:
        return BooleanValue(function(bool(left.raw_get()), bool(right.raw_get())))

    return apply


def _numeric_entries(function: Callable[[float, float], float]) -> dict[tuple[DataKind, DataKind], BinaryFunction]:
    # Both operand orders are listed so the symmetric fallback never reorders
    # a non-commutative operation.
    apply = _arithmetic(function)
    return {(N, N): apply, (N, B): apply, (B, N): apply, (B, B): apply}


BINARY_OPERATIONS: Final[Mapping[BinaryOperator, Mapping[tuple[DataKind, DataKind], BinaryFunction]]] = (
    MappingProxyType(
        {
            BinaryOperator.ADD: {
                (N, N): _arithmetic(lambda a, b: a + b),
                (N, B): _arithmetic(lambda a, b: a + b),
                (B, B): _arithmetic(lambda a, b: a + b),
                (S, S): _concat,
            },
            BinaryOperator.SUBTRACT: _numeric_entries(lambda a, b: a - b),
            BinaryOperator.MULTIPLY: _numeric_entries(lambda a, b: a * b),
            BinaryOperator.DIVIDE: {(N, N): _arithmetic(ieee_divide)},
            BinaryOperator.MODULO: {(N, N): _arithmetic(ieee_modulo)},
            BinaryOperator.POWER: {(N, N): _arithmetic(ieee_power)},
            BinaryOperator.ROOT: {(N, N): _arithmetic(lambda a, b: ieee_power(a, ieee_divide(1.0, b)))},
            BinaryOperator.EQUALS: {
                (N, N): _numeric_equals,
                (N, B): _numeric_equals,
                (B, B): _raw_equals,
                (S, S): _raw_equals,
            },
            BinaryOperator.AND: {(B, B): _logical(lambda a, b: a and b)},
            BinaryOperator.OR: {(B, B): _logical(lambda a, b: a or b)},
        }
    )
)

UNARY_OPERATIONS: Final[Mapping[UnaryOperator, Mapping[DataKind, UnaryFunction]]] = MappingProxyType(
    {
        UnaryOperator.NEGATE: {
            B: lambda value: BooleanValue(not value.raw_get()),
            N: lambda value: NumberValue(-_numeric(value)),
        },
    }
)


def resolve_binary(
    operator: BinaryOperator,
    left: DataKind,
    right: DataKind,
) -> tuple[BinaryFunction, bool] | None:
    """Find the table entry for (left, right), falling back to (right, left).

    Returns the function and whether the operands must be swapped.
    """
    table = BINARY_OPERATIONS[operator]
    function = table.get((left, right))
    if function is not None:
        return function, False
    function = table.get((right, left))
    if function is not None:
        return function, True
    return None


def binary_operation(operator: BinaryOperator, left: Value, right: Value) -> Value:
    resolved = resolve_binary(operator, left.kind, right.kind)
    if resolved is None:
        raise fatal(
            RUNTIME_UNSUPPORTED_OPERANDS.code,
            f"Data types of {left.kind} and {right.kind} are not supported by '{operator}'",
        )
    function, swapped = resolved
    return function(right, left) if swapped else function(left, right)


def unary_operation(operator: UnaryOperator, operand: Value) -> Value:
    function = UNARY_OPERATIONS[operator].get(operand.kind)
    if function is None:
        raise fatal(
            RUNTIME_UNSUPPORTED_OPERANDS.code,
            f"Data type {operand.kind} is not supported by '{operator}'",
        )
    return function(operand)


def divides_by_zero(operator: BinaryOperator, right: Value) -> bool:
    return (
        operator in (BinaryOperator.DIVIDE, BinaryOperator.MODULO)
        and isinstance(right, NumberValue)
        and right.value == 0
    )


__all__ = [
    "BINARY_OPERATIONS",
    "UNARY_OPERATIONS",
    "BinaryOperator",
    "UnaryOperator",
    "binary_operation",
    "divides_by_zero",
    "ieee_divide",
    "ieee_modulo",
    "ieee_power",
    "resolve_binary",
    "unary_operation",
]
