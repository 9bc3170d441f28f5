"""Syntax kinds."""

from tagscript.syntax.kind import (
    BLOCK_TAG,
    LITERAL_NUMBER_TAG,
    LITERAL_TEXT_TAG,
    OPERATIVE_NAMES,
    PROGRAM_TAG,
    TAG_NAMES,
    OperativeKind,
    TagKind,
    operative_kind_for_name,
    tag_kind_for_name,
)

__all__ = [
    "BLOCK_TAG",
    "LITERAL_NUMBER_TAG",
    "LITERAL_TEXT_TAG",
    "OPERATIVE_NAMES",
    "PROGRAM_TAG",
    "TAG_NAMES",
    "OperativeKind",
    "TagKind",
    "operative_kind_for_name",
    "tag_kind_for_name",
]
