"""Plain-text rendering of diagnostics with source context."""

from tagscript.diagnostics.diagnostic import Diagnostic
from tagscript.text import line_excerpt

_GUTTER = "       "


def render_diagnostic(diagnostic: Diagnostic, source: str | None = None, *, with_context: bool = True) -> str:
    """Render a diagnostic the way the interpreter reports it to a console.

    ```
    ### FATAL ###
    i: No variable named 'x' in the current scope
    ERR-4007: VARIABLE DOESN'T EXIST
    | AT LINE 2 : COLUMN 10
    |0001| <variable name="y" type="number"/>
    |0002| <output><get name="x"/></output>
                    ^^^
    ```
    """
    lines = [
        f"### {diagnostic.severity.upper()} ###",
        f"i: {diagnostic.info}",
        f"ERR-{diagnostic.code}: {diagnostic.message}",
    ]
    if diagnostic.hint:
        lines.append(f"hint: {diagnostic.hint}")

    position = diagnostic.position
    if not with_context or source is None or position is None or not position.is_known:
        return "\n".join(lines)

    lines.append(f"| AT LINE {position.line} : COLUMN {position.column}")
    excerpt = line_excerpt(source, position)
    for number, text in excerpt:
        lines.append(f"|{number:04d}| {text}")

    if excerpt and excerpt[-1][0] == position.line:
        offending = excerpt[-1][1]
        padding = "".join("\t" if ch == "\t" else " " for ch in offending[: position.column - 1])
        lines.append(_GUTTER + padding + "^" * diagnostic.length)

    return "\n".join(lines)
