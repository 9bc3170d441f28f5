"""Recursive-descent tag parser."""

import logging

from tagscript.ast import Tag
from tagscript.diagnostics import TagScriptError, fatal
from tagscript.diagnostics.codes import (
    PARSER_ATTRIBUTE_NAME_NOT_FOUND,
    PARSER_ATTRIBUTE_VALUE_NOT_FOUND,
    PARSER_CURRENT_TOKEN_MISMATCH,
    PARSER_DUPLICATE_ATTRIBUTE,
    PARSER_EMPTY_TOKEN_LIST,
    PARSER_EXTRA_CLOSING_TAG,
    PARSER_POSITION_OUT_OF_RANGE,
    PARSER_TAG_NAME_NOT_FOUND,
    PARSER_TAG_NOT_CLOSED,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNHANDLED,
)
from tagscript.lexer import Token, TokenKind

logger = logging.getLogger(__name__)


class TagParser:
    """Builds a tag tree from a token list.

    Grammar:

        tag   := '<' NAME attr* ( '/' '>' | '>' body* '<' '/' NAME '>' )
        attr  := NAME ( '=' STRING )?
        body  := tag | STRING | NUMBER
    """

    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> Token:
        return self._tokens[self._position]

    def at(self, kind: TokenKind) -> bool:
        return self.current.kind == kind

    def eat(self, kind: TokenKind) -> Token:
        token = self.current
        if token.kind != kind:
            raise fatal(
                PARSER_CURRENT_TOKEN_MISMATCH.code,
                f"Expected token of type '{kind.name}' but got '{token.kind.name}'",
                token.position,
            )
        logger.debug("Ate %s at position %d", kind.name, self._position)

        self._position += 1
        if self._position >= len(self._tokens):
            raise fatal(
                PARSER_POSITION_OUT_OF_RANGE.code,
                f"Position is out of range, pos: {self._position} on range {len(self._tokens)}",
            )
        return token

    def parse_list(self) -> list[Tag]:
        """Parse top-level tags and literals until end of file."""
        if not self._tokens:
            raise fatal(PARSER_EMPTY_TOKEN_LIST.code, "Cannot parse an empty token list")

        tags: list[Tag] = []
        while not self.at(TokenKind.EOF):
            if self.at(TokenKind.LESS_THAN):
                self.eat(TokenKind.LESS_THAN)
                tags.append(self.parse_tag())
                continue
            literal = self._parse_literal()
            if literal is None:
                raise self._unexpected(self.current)
            tags.append(literal)
        return tags

    def parse_tag(self) -> Tag:
        """Parse one tag. The opening `<` has already been consumed."""
        if self.at(TokenKind.SLASH):
            raise self._error_at(PARSER_EXTRA_CLOSING_TAG.code, "Extra closing tag", self.current)

        if not self.at(TokenKind.IDENTIFIER):
            raise self._error_at(
                PARSER_TAG_NAME_NOT_FOUND.code,
                f"Was expecting tag name but got '{self.current.text}'",
                self.current,
            )

        name_token = self.eat(TokenKind.IDENTIFIER)
        name = name_token.text
        attributes = self._parse_attributes(name)

        if self.at(TokenKind.SLASH):
            self.eat(TokenKind.SLASH)
            self._expect_greater_than()
            return Tag(name, attributes, position=name_token.position)

        self._expect_greater_than()
        children = self._parse_body(name_token)
        return Tag(name, attributes, tuple(children), name_token.position)

    def _parse_attributes(self, tag_name: str) -> dict[str, str]:
        attributes: dict[str, str] = {}
        while not self.at(TokenKind.GREATER_THAN) and not self.at(TokenKind.SLASH):
            if not self.at(TokenKind.IDENTIFIER):
                raise self._error_at(
                    PARSER_ATTRIBUTE_NAME_NOT_FOUND.code,
                    f"Was looking for an attribute name or a closing tag but got '{self.current.text}'",
                    self.current,
                )

            name_token = self.eat(TokenKind.IDENTIFIER)
            value = ""
            if self.at(TokenKind.EQUAL):
                self.eat(TokenKind.EQUAL)
                if not self.at(TokenKind.STRING_LITERAL):
                    raise self._error_at(
                        PARSER_ATTRIBUTE_VALUE_NOT_FOUND.code,
                        f"Attribute '{name_token.text}' does not have a value",
                        self.current,
                    )
                value = self.eat(TokenKind.STRING_LITERAL).text

            if name_token.text in attributes:
                raise self._error_at(
                    PARSER_DUPLICATE_ATTRIBUTE.code,
                    f"Attribute '{name_token.text}' was already declared on this tag (<{tag_name}>)",
                    name_token,
                )
            attributes[name_token.text] = value
        return attributes

    def _parse_body(self, name_token: Token) -> list[Tag]:
        children: list[Tag] = []
        while True:
            token = self.current
            if token.kind == TokenKind.EOF:
                raise self._error_at(
                    PARSER_TAG_NOT_CLOSED.code,
                    f"Tag '{name_token.text}' was never closed",
                    name_token,
                )

            if token.kind == TokenKind.LESS_THAN:
                self.eat(TokenKind.LESS_THAN)
                if self.at(TokenKind.SLASH):
                    self._parse_closing_tag(name_token)
                    return children
                children.append(self.parse_tag())
                continue

            literal = self._parse_literal()
            if literal is None:
                raise self._unexpected(token)
            children.append(literal)

    def _parse_closing_tag(self, name_token: Token) -> None:
        self.eat(TokenKind.SLASH)
        if not self.at(TokenKind.IDENTIFIER):
            raise self._error_at(
                PARSER_TAG_NAME_NOT_FOUND.code,
                f"Was expecting the closing tag name for '{name_token.text}' but got '{self.current.text}'",
                self.current,
            )

        closing = self.current
        if closing.text != name_token.text:
            raise self._error_at(
                PARSER_TAG_NOT_CLOSED.code,
                f"Misspelled/Extra closing tag | Opening: {name_token.text}, Closing: {closing.text}",
                closing,
            )
        self.eat(TokenKind.IDENTIFIER)
        self._expect_greater_than()

    def _parse_literal(self) -> Tag | None:
        token = self.current
        if token.kind == TokenKind.STRING_LITERAL:
            self.eat(TokenKind.STRING_LITERAL)
            return Tag.text_literal(token.text, token.position)
        if token.kind == TokenKind.NUMBER_LITERAL:
            self.eat(TokenKind.NUMBER_LITERAL)
            return Tag.number_literal(token.text, token.position)
        return None

    def _expect_greater_than(self) -> None:
        if not self.at(TokenKind.GREATER_THAN):
            raise self._error_at(
                PARSER_UNEXPECTED_TOKEN.code,
                f"Was expecting a closing angle bracket '>' but got '{self.current.text}'",
                self.current,
            )
        self.eat(TokenKind.GREATER_THAN)

    def _unexpected(self, token: Token) -> TagScriptError:
        return self._error_at(PARSER_UNEXPECTED_TOKEN.code, f"Unexpected token type: {token.kind.name}", token)

    def _error_at(self, code: int, info: str, token: Token) -> TagScriptError:
        position = token.position if token.position.is_known else None
        return fatal(code, info, position, len(token.text))


def parse_tokens(tokens: list[Token]) -> list[Tag]:
    try:
        return TagParser(tokens).parse_list()
    except RecursionError:
        raise fatal(PARSER_UNHANDLED.code, "Tags are nested too deeply to parse") from None


def parse_program(tokens: list[Token]) -> Tag:
    """Parse a token list into the synthetic top-level `program` block."""
    return Tag.program(parse_tokens(tokens))
