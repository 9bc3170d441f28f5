"""Run outcome carrier."""

from __future__ import annotations

from dataclasses import dataclass, field

from tagscript.diagnostics import Diagnostic, has_errors, render_diagnostic
from tagscript.runtime import Variable
from tagscript.values import Value


@dataclass(slots=True)
class RunOutcome:
    """Everything one `run_source` call produced."""

    source_text: str
    output: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    fatal: Diagnostic | None = None
    return_value: Value | None = None
    variables: list[Variable] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.fatal is None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def variable(self, name: str) -> Variable | None:
        for variable in self.variables:
            if variable.name == name:
                return variable
        return None

    def render(self, *, with_context: bool = True) -> list[str]:
        return [
            render_diagnostic(diagnostic, self.source_text, with_context=with_context)
            for diagnostic in self.diagnostics
        ]
