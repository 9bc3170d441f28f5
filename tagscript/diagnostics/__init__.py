"""Diagnostics."""

from tagscript.diagnostics.codes import ERROR_CODES, DiagnosticSpec, Severity
from tagscript.diagnostics.context import DiagnosticContext, SuppressionScope
from tagscript.diagnostics.diagnostic import Diagnostic, TagScriptError, fatal, lookup_spec, make_diagnostic
from tagscript.diagnostics.render import render_diagnostic
from tagscript.diagnostics.report import has_errors

__all__ = [
    "ERROR_CODES",
    "Diagnostic",
    "DiagnosticContext",
    "DiagnosticSpec",
    "Severity",
    "SuppressionScope",
    "TagScriptError",
    "fatal",
    "has_errors",
    "lookup_spec",
    "make_diagnostic",
    "render_diagnostic",
]
