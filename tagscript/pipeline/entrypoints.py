"""Source-text entrypoints: tokenize, parse and run with one set of options."""

from __future__ import annotations

import io
import logging
from typing import TextIO

from tagscript.ast import Tag, format_tag
from tagscript.diagnostics import DiagnosticContext, TagScriptError
from tagscript.lexer import Token, dump_tokens
from tagscript.lexer import tokenize as _tokenize
from tagscript.parser import parse_program
from tagscript.pipeline.options import RunOptions
from tagscript.pipeline.result import RunOutcome
from tagscript.runtime import ConsoleIO, FunctionRegistry, Interpreter, RuntimeContext, Scope, default_registry

logger = logging.getLogger(__name__)


class _TeeWriter(io.TextIOBase):
    """Forwards writes to a stream while keeping a copy of everything written."""

    def __init__(self, target: TextIO | None) -> None:
        self._target = target
        self._buffer = io.StringIO()

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        self._buffer.write(text)
        if self._target is not None:
            self._target.write(text)
        return len(text)

    def flush(self) -> None:
        if self._target is not None:
            self._target.flush()

    def getvalue(self) -> str:
        return self._buffer.getvalue()


def tokenize(text: str) -> list[Token]:
    return _tokenize(text)


def parse(text: str) -> Tag:
    """Tokenize and parse `text` into the top-level `program` block."""
    return parse_program(_tokenize(text))


def run_source(
    text: str,
    *,
    options: RunOptions | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    registry: FunctionRegistry | None = None,
) -> RunOutcome:
    """Run a TagScript program.

    Lexer and parser errors are reported the same way as uncaught runtime
    errors: as the outcome's `fatal` diagnostic. Output is always captured on
    the outcome and also forwarded to `stdout` when given.
    """
    resolved = options or RunOptions()
    writer = _TeeWriter(stdout)
    diagnostics = DiagnosticContext(text)

    try:
        tokens = _tokenize(text)
        if resolved.debug:
            logger.debug("Tokens:\n%s", dump_tokens(tokens))
        program = parse_program(tokens)
        if resolved.debug:
            logger.debug("Tag tree:\n%s", format_tag(program))
    except TagScriptError as error:
        diagnostics.record_failure(error.diagnostic)
        return RunOutcome(
            source_text=text,
            output="",
            diagnostics=list(diagnostics.reported),
            fatal=diagnostics.fatal,
        )

    context = RuntimeContext(
        io=ConsoleIO(stdin if stdin is not None else io.StringIO(), writer),
        diagnostics=diagnostics,
        functions=registry if registry is not None else default_registry(),
        autobreak=resolved.autobreak,
    )
    scope = Scope()
    result = Interpreter(program, scope, context).run()
    if resolved.debug:
        logger.debug("Variable dump:\n%s", scope.dump())

    return RunOutcome(
        source_text=text,
        output=writer.getvalue(),
        diagnostics=list(diagnostics.reported),
        fatal=diagnostics.fatal,
        return_value=result.value if result.is_returned else None,
        variables=list(scope),
    )
