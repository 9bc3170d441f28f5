from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class TextPosition:
    """1-based (line, column) location in source text.

    The `(-1, -1)` pair is reserved for the end-of-file sentinel, which does
    not point at a real character.
    """

    line: int
    column: int

    def __post_init__(self):
        if (self.line, self.column) == (-1, -1):
            return
        if self.line < 1 or self.column < 1:
            raise ValueError("TextPosition must be 1-based")

    @staticmethod
    def at(line: int, column: int) -> "TextPosition":
        """Create a TextPosition from a 1-based line and column."""
        return TextPosition(line, column)

    @property
    def is_known(self) -> bool:
        """Check if the position points at a real location."""
        return self.line > 0

    def as_tuple(self) -> tuple[int, int]:
        """Get the position as a (line, column) tuple."""
        return (self.line, self.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"TextPosition({self.line}, {self.column})"


UNKNOWN_POSITION: Final[TextPosition] = TextPosition(-1, -1)
"""Sentinel position used by the end-of-file token."""


def source_lines(source: str) -> list[str]:
    """Split source into lines, keeping tabs intact and dropping `\\r`."""
    return [line.rstrip("\r") for line in source.split("\n")]


def line_excerpt(source: str, position: TextPosition, before: int = 2) -> list[tuple[int, str]]:
    """Get the line at `position` plus up to `before` preceding lines.

    Returns `(line_number, text)` pairs in source order. Lines outside the
    source are skipped.
    """
    if not position.is_known:
        return []
    lines = source_lines(source)
    first = max(position.line - before, 1)
    last = min(position.line, len(lines))
    return [(number, lines[number - 1]) for number in range(first, last + 1)]
