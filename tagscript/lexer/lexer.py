"""Lexer."""

import logging

from tagscript.diagnostics import TagScriptError, fatal
from tagscript.diagnostics.codes import (
    LEXER_UNRECOGNIZED_TOKEN,
    LEXER_UNTERMINATED_NUMBER,
    LEXER_UNTERMINATED_STRING,
)
from tagscript.lexer.tokens import EOF_TOKEN, PUNCTUATION, Token, TokenKind
from tagscript.text import TextPosition

logger = logging.getLogger(__name__)


def is_identifier_char(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch == "-"


class Lexer:
    """Single-pass lexer producing positioned tokens.

    Comments and whitespace are dropped. The first lexical error aborts
    tokenization with a `TagScriptError`.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._line = 1
        self._column = 1
        self._tokens: list[Token] = []

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def position(self) -> int:
        return self._position

    @property
    def text_position(self) -> TextPosition:
        return TextPosition(self._line, self._column)

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def lex(self) -> list[Token]:
        while not self.is_eof:
            token = self._lex_token()
            if token is not None:
                self._tokens.append(token)
        self._tokens.append(EOF_TOKEN)
        logger.debug("Lexed %d tokens", len(self._tokens))
        return self._tokens

    def _lex_token(self) -> Token | None:
        ch = self._current_char()

        if ch == "#":
            self._skip_comment()
            return None

        if ch == "\n":
            self._advance_newline()
            return None

        if ch.isspace():
            self._advance(1)
            return None

        if ch == '"':
            return self._lex_delimited(TokenKind.STRING_LITERAL, '"', LEXER_UNTERMINATED_STRING.code)

        if ch == "[":
            return self._lex_delimited(TokenKind.NUMBER_LITERAL, "]", LEXER_UNTERMINATED_NUMBER.code)

        if is_identifier_char(ch):
            return self._lex_identifier()

        kind = PUNCTUATION.get(ch)
        if kind is not None:
            token = Token(kind, ch, self.text_position)
            self._advance(1)
            return token

        raise self._error(LEXER_UNRECOGNIZED_TOKEN.code, f"Unrecognized character {ch!r}", self.text_position)

    def _skip_comment(self) -> None:
        # Consume until end of line, do not consume the newline itself.
        while not self.is_eof and self._current_char() != "\n":
            self._advance(1)

    def _lex_delimited(self, kind: TokenKind, closing: str, error_code: int) -> Token:
        start = self.text_position
        self._advance(1)
        content_start = self._position

        while not self.is_eof:
            ch = self._current_char()
            if ch == closing:
                text = self._source[content_start : self._position]
                self._advance(1)
                return Token(kind, text, start)
            if ch == "\n":
                self._advance_newline()
            else:
                self._advance(1)

        opener = self._source[content_start - 1]
        raise self._error(error_code, f"Literal opened with {opener!r} was never closed", start)

    def _lex_identifier(self) -> Token:
        start = self.text_position
        content_start = self._position
        while not self.is_eof and is_identifier_char(self._current_char()):
            self._advance(1)
        return Token(TokenKind.IDENTIFIER, self._source[content_start : self._position], start)

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _advance(self, steps: int) -> None:
        self._position += steps
        self._column += steps

    def _advance_newline(self) -> None:
        self._position += 1
        self._line += 1
        self._column = 1

    def _error(self, code: int, info: str, position: TextPosition) -> TagScriptError:
        return fatal(code, info, position)


def tokenize(source: str) -> list[Token]:
    return Lexer(source).lex()


def token_text(token: Token, null_char_on_eof: bool = False) -> str:
    """Get the display text of a token."""
    if token.kind == TokenKind.EOF:
        return "\0" if null_char_on_eof else ""
    return token.text


def dump_tokens(tokens: list[Token]) -> str:
    """Format a token list with kind, position and text for debugging."""
    lines: list[str] = []
    for i, tok in enumerate(tokens):
        lines.append(f"{i:03d} {tok.kind.name:<16} at={tok.position.as_tuple()} text={token_text(tok)!r}")
    return "\n".join(lines)
