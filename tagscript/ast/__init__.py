"""Tag tree."""

from tagscript.ast.model import NUMBER_LITERAL_ATTRIBUTE, TEXT_LITERAL_ATTRIBUTE, Tag, format_tag

__all__ = [
    "NUMBER_LITERAL_ATTRIBUTE",
    "TEXT_LITERAL_ATTRIBUTE",
    "Tag",
    "format_tag",
]
