"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from tagscript.text import UNKNOWN_POSITION, TextPosition


class TokenKind(IntEnum):
    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 1
    STRING_LITERAL = 2  # "raw text"
    NUMBER_LITERAL = 3  # [raw text]

    # -------------------------
    # Punctuation
    # -------------------------
    LESS_THAN = 10  # <
    GREATER_THAN = 11  # >
    SLASH = 12  # /
    EQUAL = 13  # =
    COMMA = 14  # ,
    LBRACKET = 15  # [
    RBRACKET = 16  # ]

    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 20
    UNRECOGNIZED = 21

    @property
    def is_literal(self) -> bool:
        return self in (TokenKind.STRING_LITERAL, TokenKind.NUMBER_LITERAL)


PUNCTUATION: Final[dict[str, TokenKind]] = {
    "<": TokenKind.LESS_THAN,
    ">": TokenKind.GREATER_THAN,
    "=": TokenKind.EQUAL,
    "/": TokenKind.SLASH,
    ",": TokenKind.COMMA,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
}


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    Literal tokens carry their raw content (delimiters stripped) as `text` and
    the position of their opening delimiter.
    """

    kind: TokenKind
    text: str
    position: TextPosition

    @property
    def line(self) -> int:
        return self.position.line

    @property
    def column(self) -> int:
        return self.position.column

    def __str__(self) -> str:
        return f"< TYPE: {self.kind.name}, VALUE: {self.text!r} > AT [{self.position}]"


EOF_TOKEN: Final[Token] = Token(TokenKind.EOF, "", UNKNOWN_POSITION)
