import logging

import pytest

from tagscript.diagnostics import (
    ERROR_CODES,
    DiagnosticContext,
    Severity,
    TagScriptError,
    fatal,
    has_errors,
    lookup_spec,
    make_diagnostic,
    render_diagnostic,
)
from tagscript.text import TextPosition, UNKNOWN_POSITION, line_excerpt


def test_codes_are_grouped_by_phase() -> None:
    for code, spec in ERROR_CODES.items():
        assert spec.code == code
        assert code // 1000 in {1, 2, 4, 5}
        assert spec.message


def test_unknown_code_is_itself_a_diagnostic_error() -> None:
    with pytest.raises(TagScriptError) as excinfo:
        lookup_spec(9999)

    assert excinfo.value.code == 5000
    assert "9999" in excinfo.value.diagnostic.info
    with pytest.raises(TagScriptError):
        fatal(3000, "no such phase")


def test_make_diagnostic_uses_registry_text_and_severity() -> None:
    warning = make_diagnostic(4022, "split by zero")
    forced = make_diagnostic(4007, "missing", severity=Severity.INFO, length=0)

    assert warning.severity == Severity.WARNING
    assert warning.message == "DIVISION BY ZERO"
    assert not warning.is_fatal
    assert forced.severity == Severity.INFO
    assert forced.length == 1


def test_describe() -> None:
    diagnostic = fatal(4007, "No variable named 'x'").diagnostic

    assert diagnostic.describe() == "ERR-4007: VARIABLE DOESN'T EXIST | No variable named 'x'"


def test_located_keeps_innermost_position() -> None:
    error = fatal(4002, "mismatch")
    inner = error.located(TextPosition(2, 5), 3)
    outer = inner.located(TextPosition(1, 1), 8)

    assert error.diagnostic.position is None
    assert inner.diagnostic.position == TextPosition(2, 5)
    assert outer is inner
    assert error.located(None) is error


def test_render_with_source_context() -> None:
    source = 'line1\nline2\n<output><get name="x"/></output>\n'
    diagnostic = make_diagnostic(4007, "No variable named 'x'", position=TextPosition(3, 10), length=3)

    rendered = render_diagnostic(diagnostic, source)

    assert rendered.splitlines() == [
        "### FATAL ###",
        "i: No variable named 'x'",
        "ERR-4007: VARIABLE DOESN'T EXIST",
        "| AT LINE 3 : COLUMN 10",
        "|0001| line1",
        "|0002| line2",
        '|0003| <output><get name="x"/></output>',
        "       " + " " * 9 + "^^^",
    ]


def test_render_keeps_tabs_in_caret_padding() -> None:
    diagnostic = make_diagnostic(1000, "Unrecognized character '$'", position=TextPosition(1, 3))

    rendered = render_diagnostic(diagnostic, "\t<$")

    assert rendered.splitlines()[-1] == "       \t ^"
    assert "hint: " in rendered


def test_render_without_position_or_context() -> None:
    diagnostic = make_diagnostic(2002, "Cannot parse an empty token list")
    located = make_diagnostic(4007, "gone", position=TextPosition(1, 1))

    assert "AT LINE" not in render_diagnostic(diagnostic, "<a/>")
    assert "AT LINE" not in render_diagnostic(located, "<a/>", with_context=False)
    assert "AT LINE" not in render_diagnostic(located, None)


def test_line_excerpt() -> None:
    source = "a\nb\nc\nd"

    assert line_excerpt(source, TextPosition(4, 1)) == [(2, "b"), (3, "c"), (4, "d")]
    assert line_excerpt(source, TextPosition(1, 1)) == [(1, "a")]
    assert line_excerpt(source, UNKNOWN_POSITION) == []


def test_failure_outside_try_becomes_run_fatal() -> None:
    context = DiagnosticContext("<a/>")
    diagnostic = fatal(4001, "bad tag").diagnostic

    captured = context.record_failure(diagnostic)

    assert captured is False
    assert context.fatal is diagnostic
    assert context.reported == [diagnostic]
    assert context.latest_fatal is diagnostic


def test_innermost_suppression_scope_captures_first_failure_only() -> None:
    context = DiagnosticContext()
    first = fatal(4007, "first").diagnostic
    second = fatal(4016, "second").diagnostic

    with context.suppressing() as outer:
        with context.suppressing() as inner:
            assert context.depth == 2
            assert context.record_failure(first) is True
            assert context.record_failure(second) is True
        assert context.depth == 1
        assert outer.captured is None

    assert inner.captured is first
    assert inner.message == first.describe()
    assert not context.is_suppressing
    assert context.fatal is None
    assert context.reported == []


def test_entering_suppression_clears_latest_fatal() -> None:
    context = DiagnosticContext()
    context.record_failure(fatal(4001, "x").diagnostic)

    with context.suppressing():
        assert context.latest_fatal is None


def test_warnings_and_infos_are_reported_and_logged(caplog: pytest.LogCaptureFixture) -> None:
    context = DiagnosticContext()

    with caplog.at_level(logging.INFO, logger="tagscript.diagnostics.context"):
        warning = context.warning(4022, "1 / 0")
        info = context.info(4023, "captured")

    assert context.reported == [warning, info]
    assert not has_errors(context.reported)
    assert "ERR-4022" in caplog.text
    assert "ERR-4023" in caplog.text


def test_report_rejects_fatal() -> None:
    with pytest.raises(ValueError):
        DiagnosticContext().report(fatal(4001, "x").diagnostic)


def test_has_errors() -> None:
    warning = make_diagnostic(4022, "w")
    error = make_diagnostic(4001, "e")

    assert has_errors([warning, error])
    assert not has_errors([warning])
