"""Command-line host: run a script file and print its diagnostics."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Final

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text

from tagscript.ast import format_tag
from tagscript.diagnostics import Diagnostic, Severity, TagScriptError, render_diagnostic
from tagscript.lexer import dump_tokens
from tagscript.pipeline import RunOptions, parse, run_source, tokenize

HELLO_WORLD: Final[str] = (
    '<output>"A .tagx file was not provided, using example hello world:""Hello World!"</output>'
)

STYLES: Final[dict[Severity, Style]] = {
    Severity.FATAL: Style(color="red", bold=True),
    Severity.WARNING: Style(color="yellow"),
    Severity.INFO: Style(color="cyan"),
}

console = Console(soft_wrap=True, highlight=False)
err_console = Console(stderr=True, soft_wrap=True, highlight=False)


def print_diagnostic(diagnostic: Diagnostic, source: str | None, *, with_context: bool = True) -> None:
    err_console.print(Text(render_diagnostic(diagnostic, source, with_context=with_context), style=STYLES[diagnostic.severity]))


def _configure_logging(debug: bool) -> None:
    # Diagnostics are printed by `print_diagnostic`; their log records only show in debug runs.
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.ERROR,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tagscript", description="Run a TagScript (.tagx) program.")
    parser.add_argument(
        "script",
        nargs="?",
        type=Path,
        help="Script to run (runs a hello-world example when omitted).",
    )
    parser.add_argument("--debug", action="store_true", help="Log tokens, the tag tree and a variable dump.")
    parser.add_argument("--tokens", action="store_true", help="Print the token stream before running.")
    parser.add_argument("--tree", action="store_true", help="Print the parsed tag tree before running.")
    args = parser.parse_args(argv)

    options = RunOptions.from_env()
    if args.debug:
        options = replace(options, debug=True)
    _configure_logging(options.debug)

    if args.script is None:
        source = HELLO_WORLD
    else:
        try:
            source = args.script.read_text(encoding="utf-8")
        except OSError as exc:
            err_console.print(Text(f"Could not read {args.script}: {exc}", style=STYLES[Severity.FATAL]))
            return 2

    try:
        if args.tokens:
            console.print(dump_tokens(tokenize(source)), markup=False)
        if args.tree:
            console.print(format_tag(parse(source)), markup=False)
    except TagScriptError as error:
        print_diagnostic(error.diagnostic, source, with_context=options.render_source_context)
        return 1

    outcome = run_source(source, options=options, stdin=sys.stdin, stdout=sys.stdout)
    sys.stdout.flush()
    for diagnostic in outcome.diagnostics:
        print_diagnostic(diagnostic, source, with_context=options.render_source_context)

    if outcome.fatal is not None:
        err_console.print(Text("Code interpreting has stopped due to an exception", style=STYLES[Severity.FATAL]))
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
