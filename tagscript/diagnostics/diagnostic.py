"""Diagnostics core types."""

from dataclasses import dataclass, replace

from tagscript.diagnostics.codes import DIAGNOSTICS_UNKNOWN_CODE, ERROR_CODES, DiagnosticSpec, Severity
from tagscript.text import TextPosition


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer, parser and interpreter.

    `message` is the fixed registry text for `code`; `info` is the contextual
    explanation for this occurrence. `length` is the caret width used when
    rendering the offending span.
    """

    code: int
    message: str
    info: str
    severity: Severity = Severity.FATAL
    position: TextPosition | None = None
    length: int = 1
    hint: str | None = None
    category: str | None = None

    @property
    def is_fatal(self) -> bool:
        return self.severity == Severity.FATAL

    def describe(self) -> str:
        """One-line summary, e.g. `ERR-4007: VARIABLE DOESN'T EXIST | No variable named 'x'`."""
        return f"ERR-{self.code}: {self.message} | {self.info}"


class TagScriptError(Exception):
    """Raised for any fatal lexer, parser or runtime failure."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.describe())

    @property
    def code(self) -> int:
        return self.diagnostic.code

    def located(self, position: TextPosition | None, length: int = 1) -> "TagScriptError":
        """Attach a source position if the diagnostic has none yet.

        The innermost location wins, so an already located error is returned
        unchanged.
        """
        if self.diagnostic.position is not None or position is None:
            return self
        return TagScriptError(replace(self.diagnostic, position=position, length=max(length, 1)))


def lookup_spec(code: int) -> DiagnosticSpec:
    spec = ERROR_CODES.get(code)
    if spec is None:
        raise TagScriptError(
            Diagnostic(
                code=DIAGNOSTICS_UNKNOWN_CODE.code,
                message=DIAGNOSTICS_UNKNOWN_CODE.message,
                info=f"Error code #{code} does not exist",
                severity=DIAGNOSTICS_UNKNOWN_CODE.severity,
                category=DIAGNOSTICS_UNKNOWN_CODE.category,
            )
        )
    return spec


def make_diagnostic(
    code: int,
    info: str,
    *,
    position: TextPosition | None = None,
    length: int = 1,
    severity: Severity | None = None,
) -> Diagnostic:
    spec = lookup_spec(code)
    return Diagnostic(
        code=spec.code,
        message=spec.message,
        info=info,
        severity=severity or spec.severity,
        position=position,
        length=max(length, 1),
        hint=spec.hint,
        category=spec.category,
    )


def fatal(
    code: int,
    info: str,
    position: TextPosition | None = None,
    length: int = 1,
) -> TagScriptError:
    """Build (not raise) a fatal error, so call sites read `raise fatal(...)`."""
    return TagScriptError(make_diagnostic(code, info, position=position, length=length, severity=Severity.FATAL))
