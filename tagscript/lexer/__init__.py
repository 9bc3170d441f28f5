"""Lexer."""

from tagscript.lexer.lexer import Lexer, dump_tokens, is_identifier_char, token_text, tokenize
from tagscript.lexer.tokens import EOF_TOKEN, PUNCTUATION, Token, TokenKind

__all__ = [
    "EOF_TOKEN",
    "PUNCTUATION",
    "Lexer",
    "Token",
    "TokenKind",
    "dump_tokens",
    "is_identifier_char",
    "token_text",
    "tokenize",
]
