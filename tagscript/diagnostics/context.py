"""Run-scoped diagnostic state: reported diagnostics and try-suppression scopes."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from tagscript.diagnostics.codes import Severity
from tagscript.diagnostics.diagnostic import Diagnostic, make_diagnostic
from tagscript.text import TextPosition

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SuppressionScope:
    """One active `try` body. Holds the first failure raised inside it."""

    captured: Diagnostic | None = None

    @property
    def message(self) -> str | None:
        if self.captured is None:
            return None
        return self.captured.describe()


class DiagnosticContext:
    """Diagnostic sink shared by every block of one interpreter run.

    Fatal failures are either captured by the innermost active suppression
    scope or become the run's fatal diagnostic. Warnings and infos are only
    collected.
    """

    def __init__(self, source: str | None = None) -> None:
        self._source = source
        self._scopes: list[SuppressionScope] = []
        self._reported: list[Diagnostic] = []
        self._latest_fatal: Diagnostic | None = None
        self._fatal: Diagnostic | None = None

    @property
    def source(self) -> str | None:
        return self._source

    @property
    def reported(self) -> list[Diagnostic]:
        """Diagnostics that reached the host (captured failures excluded)."""
        return self._reported

    @property
    def latest_fatal(self) -> Diagnostic | None:
        return self._latest_fatal

    @property
    def fatal(self) -> Diagnostic | None:
        """The uncaptured failure that aborted the run, if any."""
        return self._fatal

    @property
    def is_suppressing(self) -> bool:
        return bool(self._scopes)

    @property
    def depth(self) -> int:
        return len(self._scopes)

    @contextmanager
    def suppressing(self) -> Iterator[SuppressionScope]:
        scope = SuppressionScope()
        self._scopes.append(scope)
        self._latest_fatal = None
        try:
            yield scope
        finally:
            self._scopes.pop()

    def record_failure(self, diagnostic: Diagnostic) -> bool:
        """Record a fatal diagnostic. Returns True when a try scope captured it."""
        self._latest_fatal = diagnostic
        if self._scopes:
            scope = self._scopes[-1]
            if scope.captured is None:
                scope.captured = diagnostic
                logger.debug("Captured %s inside try (depth %d)", diagnostic.describe(), len(self._scopes))
            return True

        if self._fatal is None:
            self._fatal = diagnostic
            self._reported.append(diagnostic)
        return False

    def report(self, diagnostic: Diagnostic) -> None:
        if diagnostic.is_fatal:
            raise ValueError("Fatal diagnostics must go through record_failure")
        self._reported.append(diagnostic)
        level = logging.WARNING if diagnostic.severity == Severity.WARNING else logging.INFO
        logger.log(level, diagnostic.describe())

    def warning(self, code: int, info: str, position: TextPosition | None = None, length: int = 1) -> Diagnostic:
        diagnostic = make_diagnostic(code, info, position=position, length=length, severity=Severity.WARNING)
        self.report(diagnostic)
        return diagnostic

    def info(self, code: int, info: str, position: TextPosition | None = None, length: int = 1) -> Diagnostic:
        diagnostic = make_diagnostic(code, info, position=position, length=length, severity=Severity.INFO)
        self.report(diagnostic)
        return diagnostic
