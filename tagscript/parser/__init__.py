"""Tag parser."""

from tagscript.parser.parser import TagParser, parse_program, parse_tokens

__all__ = [
    "TagParser",
    "parse_program",
    "parse_tokens",
]
