"""Variables and the flat, shared variable scope."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from tagscript.diagnostics import fatal
from tagscript.diagnostics.codes import (
    RUNTIME_DUPLICATE_VARIABLE,
    RUNTIME_UNSET_ACCESS,
    RUNTIME_VARIABLE_NOT_FOUND,
)
from tagscript.values import DataKind, Value, assert_kind


@dataclass(slots=True)
class Variable:
    """A named slot with a fixed declared kind. Unset until first assigned."""

    name: str
    declared_kind: DataKind
    _value: Value | None = field(default=None, repr=False)

    @property
    def is_set(self) -> bool:
        return self._value is not None

    def get(self) -> Value:
        """Return a clone of the stored value."""
        if self._value is None:
            raise fatal(RUNTIME_UNSET_ACCESS.code, f"Trying to access variable '{self.name}' while it is unset")
        return self._value.clone()

    def assign(self, value: Value) -> None:
        assert_kind(value, self.declared_kind)
        self._value = value.clone()

    def __str__(self) -> str:
        if self._value is None:
            return f"{self.declared_kind} {self.name} ?"
        return f"{self.declared_kind} {self.name} = {self._value.format()}"


class Scope:
    """Ordered, append-only variable list shared by a block and every block nested in it."""

    def __init__(self, variables: list[Variable] | None = None) -> None:
        self._variables: list[Variable] = variables if variables is not None else []

    def lookup(self, name: str) -> Variable | None:
        for variable in self._variables:
            if variable.name == name:
                return variable
        return None

    def require(self, name: str) -> Variable:
        variable = self.lookup(name)
        if variable is None:
            raise fatal(RUNTIME_VARIABLE_NOT_FOUND.code, f"No variable named '{name}' in the current scope")
        return variable

    def ensure_available(self, name: str) -> None:
        if self.lookup(name) is not None:
            raise fatal(
                RUNTIME_DUPLICATE_VARIABLE.code,
                f"A variable with name '{name}' already exists in the current scope",
            )

    def declare(self, name: str, kind: DataKind) -> Variable:
        self.ensure_available(name)
        variable = Variable(name, kind)
        self._variables.append(variable)
        return variable

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.lookup(name) is not None

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def dump(self) -> str:
        return "\n".join(str(variable) for variable in self._variables)
