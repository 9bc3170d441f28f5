"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from tagscript.diagnostics.codes import Severity
from tagscript.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == Severity.FATAL for d in diagnostics)
