"""Per-run state shared by every block of one program."""

from __future__ import annotations

from dataclasses import dataclass, field

from tagscript.diagnostics import DiagnosticContext
from tagscript.runtime.functions import DEFAULT_REGISTRY, FunctionRegistry
from tagscript.runtime.io import ConsoleIO


@dataclass(slots=True)
class RuntimeContext:
    io: ConsoleIO = field(default_factory=ConsoleIO)
    diagnostics: DiagnosticContext = field(default_factory=DiagnosticContext)
    functions: FunctionRegistry = DEFAULT_REGISTRY
    autobreak: str = "\n"
