import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from tagscript.cli import main


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_runs_hello_world_without_script(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0

    captured = capsys.readouterr()
    assert captured.out == "A .tagx file was not provided, using example hello world:\nHello World!\n"
    assert captured.err == ""


def test_runs_script_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "sum.tagx"
    script.write_text('<output><add>[2][3]</add></output>\n', encoding="utf-8")

    assert main([str(script)]) == 0
    assert capsys.readouterr().out == "5\n"


def test_fatal_diagnostic_exits_non_zero(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "broken.tagx"
    script.write_text('<output>"before"</output>\n<output><get name="x"/></output>\n', encoding="utf-8")

    assert main([str(script)]) == 1

    captured = capsys.readouterr()
    assert captured.out == "before\n"
    assert "### FATAL ###" in captured.err
    assert "ERR-4007: VARIABLE DOESN'T EXIST" in captured.err
    assert "| AT LINE 2 : COLUMN 10" in captured.err
    assert "Code interpreting has stopped" in captured.err


def test_warnings_are_printed_but_do_not_fail(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "zero.tagx"
    script.write_text("<output><divide>[1][0]</divide></output>", encoding="utf-8")

    assert main([str(script)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "Infinity\n"
    assert "### WARNING ###" in captured.err


def test_missing_script_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "absent.tagx")]) == 2
    assert "Could not read" in capsys.readouterr().err


def test_tokens_and_tree_flags(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "flags.tagx"
    script.write_text('<output>"x"</output>', encoding="utf-8")

    assert main([str(script), "--tokens", "--tree"]) == 0

    out = capsys.readouterr().out
    assert "000 LESS_THAN" in out
    assert "<program>" in out
    assert '<text-lit body="x"/>' in out
    assert out.endswith("x\n")


def test_tree_flag_reports_parse_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "bad.tagx"
    script.write_text("<a></b>", encoding="utf-8")

    assert main([str(script), "--tree"]) == 1
    assert "ERR-2007" in capsys.readouterr().err


def test_warning_is_printed_once(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    script = tmp_path / "zero.tagx"
    script.write_text("<output><modulo>[1][0]</modulo></output>", encoding="utf-8")

    assert main([str(script)]) == 0

    captured = capsys.readouterr()
    assert captured.out == "NaN\n"
    assert captured.err.count("DIVISION BY ZERO") == 1
    assert captured.err.startswith("### WARNING ###")
