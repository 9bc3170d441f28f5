"""Built-in function definitions, argument binding and the registry."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, TypeAlias

from tagscript.diagnostics import fatal
from tagscript.diagnostics.codes import (
    RUNTIME_ARGUMENT_BINDING,
    RUNTIME_FUNCTION_DEFINITION,
    RUNTIME_FUNCTION_NOT_FOUND,
)
from tagscript.values import DataKind, NumberValue, Value, assert_kind

logger = logging.getLogger(__name__)

FunctionBody: TypeAlias = Callable[[Sequence[Value]], Value | None]


@dataclass(frozen=True, slots=True)
class ParameterDef:
    name: str
    kind: DataKind
    default: Value | None = None

    def __post_init__(self) -> None:
        if self.default is not None:
            assert_kind(self.default, self.kind)


@dataclass(frozen=True, slots=True)
class PassedArgument:
    value: Value
    name: str | None = None


@dataclass(frozen=True, slots=True)
class BuiltinFunction:
    """Host-implemented function. `returns=None` declares a void function."""

    name: str
    parameters: tuple[ParameterDef, ...]
    body: FunctionBody
    returns: DataKind | None = None
    _index: Mapping[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        index: dict[str, int] = {}
        for position, parameter in enumerate(self.parameters):
            if parameter.name in index:
                raise fatal(
                    RUNTIME_FUNCTION_DEFINITION.code,
                    f"Function '{self.name}': parameter '{parameter.name}' already exists",
                )
            index[parameter.name] = position
        object.__setattr__(self, "parameters", tuple(self.parameters))
        object.__setattr__(self, "_index", MappingProxyType(index))

    @property
    def is_void(self) -> bool:
        return self.returns is None

    def parameter_index(self, name: str) -> int | None:
        return self._index.get(name)

    def bind(self, arguments: Sequence[PassedArgument]) -> list[Value]:
        """Resolve passed arguments into one value per parameter.

        Positional arguments fill slots by their own index, named arguments by
        parameter name. Unfilled slots take the parameter default.
        """
        if len(arguments) > len(self.parameters):
            raise fatal(
                RUNTIME_ARGUMENT_BINDING.code,
                f"Function '{self.name}' argument excess, expected {len(self.parameters)} but got {len(arguments)}",
            )

        slots: list[Value | None] = [None] * len(self.parameters)
        for position, argument in enumerate(arguments):
            index = position if argument.name is None else self.parameter_index(argument.name)
            if index is None:
                raise fatal(
                    RUNTIME_ARGUMENT_BINDING.code,
                    f"Function '{self.name}': parameter '{argument.name}' does not exist",
                )
            if slots[index] is not None:
                raise fatal(
                    RUNTIME_ARGUMENT_BINDING.code,
                    f"Function '{self.name}': parameter '{self.parameters[index].name}' was bound twice",
                )
            slots[index] = assert_kind(argument.value, self.parameters[index].kind)

        bound: list[Value] = []
        for parameter, value in zip(self.parameters, slots, strict=True):
            if value is None:
                if parameter.default is None:
                    raise fatal(
                        RUNTIME_ARGUMENT_BINDING.code,
                        f"Function '{self.name}': required parameter '{parameter.name}' was not provided",
                    )
                value = parameter.default.clone()
            bound.append(value)
        return bound

    def call(self, arguments: Sequence[PassedArgument]) -> Value | None:
        result = self.body(self.bind(arguments))
        if result is None:
            if self.returns is not None:
                raise fatal(
                    RUNTIME_FUNCTION_DEFINITION.code,
                    f"Function '{self.name}' returned nothing but declares {self.returns}",
                )
            return None
        if self.returns is None:
            raise fatal(
                RUNTIME_FUNCTION_DEFINITION.code,
                f"Function '{self.name}' returned a value when it was marked as void",
            )
        return assert_kind(result, self.returns)


class FunctionRegistry:
    """Name -> function table. Populate once, then share read-only."""

    def __init__(self, functions: Iterable[BuiltinFunction] = ()) -> None:
        self._functions: dict[str, BuiltinFunction] = {}
        for function in functions:
            self.register(function)

    def register(self, function: BuiltinFunction) -> None:
        if function.name in self._functions:
            raise fatal(
                RUNTIME_FUNCTION_DEFINITION.code,
                f"Function '{function.name}' is already registered",
            )
        self._functions[function.name] = function
        logger.debug("Registered built-in function %s/%d", function.name, len(function.parameters))

    def get(self, name: str) -> BuiltinFunction | None:
        return self._functions.get(name)

    def require(self, name: str) -> BuiltinFunction:
        function = self._functions.get(name)
        if function is None:
            raise fatal(RUNTIME_FUNCTION_NOT_FOUND.code, f"Function '{name}' does not exist")
        return function

    def __contains__(self, name: object) -> bool:
        return name in self._functions

    def names(self) -> list[str]:
        return sorted(self._functions)


def _round(arguments: Sequence[Value]) -> Value:
    # Python's round() is half-to-even: round(2.5) == 2, round(3.5) == 4.
    number = float(arguments[0].raw_get())
    if not math.isfinite(number):
        return NumberValue(number)
    return NumberValue(float(round(number)))


def default_functions() -> tuple[BuiltinFunction, ...]:
    return (
        BuiltinFunction(
            name="round",
            parameters=(ParameterDef("x", DataKind.NUMBER),),
            body=_round,
            returns=DataKind.NUMBER,
        ),
    )


def default_registry() -> FunctionRegistry:
    return FunctionRegistry(default_functions())


DEFAULT_REGISTRY = default_registry()
"""Process-wide registry of built-ins, read-only after import."""
