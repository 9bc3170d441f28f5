"""Tag kinds and the name -> kind lookup tables."""

from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping


class TagKind(IntEnum):
    """Language tag vocabulary."""

    UNIVERSAL = 0

    # Statements
    OUTPUT = 10
    VARIABLE = 11
    SET = 12
    INPUT = 13
    IF = 14
    ELSEIF = 15
    ELSE = 16
    WHILE = 17
    CALL = 18
    TRY = 19
    CATCH = 20
    RETURN = 21

    # Statement parts
    CONDITION = 30
    ARGUMENT = 31
    BREAK = 32
    BLOCK = 33

    # Expressions
    GET = 40
    LITERAL_TEXT = 41
    LITERAL_NUMBER = 42
    OPERATIVE = 43
    ARRAY = 44

    @property
    def is_literal(self) -> bool:
        return self in (TagKind.LITERAL_TEXT, TagKind.LITERAL_NUMBER)

    @property
    def is_conditional_branch(self) -> bool:
        return self in (TagKind.IF, TagKind.ELSEIF, TagKind.ELSE)


class OperativeKind(IntEnum):
    """Operator bound to an operative tag."""

    SUM = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4
    MODULO = 5
    RAISE = 6
    ROOT = 7
    EQUALS = 8
    NEGATE = 9
    AND = 10
    OR = 11

    @property
    def arity(self) -> int:
        return 1 if self == OperativeKind.NEGATE else 2


LITERAL_TEXT_TAG: Final[str] = "text-lit"
LITERAL_NUMBER_TAG: Final[str] = "number-lit"
BLOCK_TAG: Final[str] = "body"
PROGRAM_TAG: Final[str] = "program"

OPERATIVE_NAMES: Final[Mapping[str, OperativeKind]] = MappingProxyType(
    {
        "add": OperativeKind.SUM,
        "sum": OperativeKind.SUM,
        "subtract": OperativeKind.SUBTRACT,
        "multiply": OperativeKind.MULTIPLY,
        "divide": OperativeKind.DIVIDE,
        "modulo": OperativeKind.MODULO,
        "raise": OperativeKind.RAISE,
        "power": OperativeKind.RAISE,
        "root": OperativeKind.ROOT,
        "compare": OperativeKind.EQUALS,
        "equals": OperativeKind.EQUALS,
        "negate": OperativeKind.NEGATE,
        "and": OperativeKind.AND,
        "or": OperativeKind.OR,
    }
)

TAG_NAMES: Final[Mapping[str, TagKind]] = MappingProxyType(
    {
        "output": TagKind.OUTPUT,
        "out": TagKind.OUTPUT,
        "variable": TagKind.VARIABLE,
        "var": TagKind.VARIABLE,
        "set": TagKind.SET,
        "input": TagKind.INPUT,
        "in": TagKind.INPUT,
        "if": TagKind.IF,
        "elif": TagKind.ELSEIF,
        "elseif": TagKind.ELSEIF,
        "else": TagKind.ELSE,
        "while": TagKind.WHILE,
        "call": TagKind.CALL,
        "try": TagKind.TRY,
        "catch": TagKind.CATCH,
        "return": TagKind.RETURN,
        "condition": TagKind.CONDITION,
        "arg": TagKind.ARGUMENT,
        "br": TagKind.BREAK,
        BLOCK_TAG: TagKind.BLOCK,
        PROGRAM_TAG: TagKind.BLOCK,
        "get": TagKind.GET,
        LITERAL_TEXT_TAG: TagKind.LITERAL_TEXT,
        LITERAL_NUMBER_TAG: TagKind.LITERAL_NUMBER,
        "array": TagKind.ARRAY,
        **{name: TagKind.OPERATIVE for name in OPERATIVE_NAMES},
    }
)


def tag_kind_for_name(name: str) -> TagKind:
    """Resolve a tag name. Unknown names are UNIVERSAL pass-through tags."""
    return TAG_NAMES.get(name, TagKind.UNIVERSAL)


def operative_kind_for_name(name: str) -> OperativeKind | None:
    return OPERATIVE_NAMES.get(name)
