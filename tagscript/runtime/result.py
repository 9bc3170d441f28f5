"""Outcome of running one block."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tagscript.diagnostics import Diagnostic
from tagscript.values import Value


class RunStatus(StrEnum):
    COMPLETED = "completed"
    RETURNED = "returned"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class RunResult:
    """Completed, Returned(value or void) or Failed(diagnostic)."""

    status: RunStatus
    value: Value | None = None
    diagnostic: Diagnostic | None = None

    @staticmethod
    def completed() -> RunResult:
        return _COMPLETED

    @staticmethod
    def returned(value: Value | None) -> RunResult:
        return RunResult(RunStatus.RETURNED, value=value)

    @staticmethod
    def failed(diagnostic: Diagnostic) -> RunResult:
        return RunResult(RunStatus.FAILED, diagnostic=diagnostic)

    @property
    def is_completed(self) -> bool:
        return self.status == RunStatus.COMPLETED

    @property
    def is_returned(self) -> bool:
        return self.status == RunStatus.RETURNED

    @property
    def is_failed(self) -> bool:
        return self.status == RunStatus.FAILED


_COMPLETED = RunResult(RunStatus.COMPLETED)
