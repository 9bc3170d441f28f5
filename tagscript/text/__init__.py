"""Source positions and source-line helpers."""

from tagscript.text.text import UNKNOWN_POSITION, TextPosition, line_excerpt, source_lines

__all__ = [
    "UNKNOWN_POSITION",
    "TextPosition",
    "line_excerpt",
    "source_lines",
]
