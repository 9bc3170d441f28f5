"""Diagnostic codes and messages."""

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType
from typing import Final, Mapping


class Severity(StrEnum):
    FATAL = "fatal"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: int
    message: str
    hint: str | None = None
    severity: Severity = Severity.FATAL
    category: str | None = None


# -------------------------
# Lexer (1000s)
# -------------------------
LEXER_UNRECOGNIZED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code=1000,
    message="UNRECOGNIZED TOKEN",
    hint="Only tags, attributes, string literals and [number] literals are valid source.",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code=1001,
    message="UNTERMINATED STRING LITERAL",
    hint='Close the string with a double quote (").',
    category="lexer",
)

LEXER_UNTERMINATED_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code=1002,
    message="UNTERMINATED NUMBER LITERAL",
    hint="Close the number with a square bracket (]).",
    category="lexer",
)

# -------------------------
# Parser (2000s)
# -------------------------
PARSER_CURRENT_TOKEN_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code=2000,
    message="IPARSER_ERROR | CURRENT TOKEN TYPE DOES NOT MATCH THE TOKEN PROCESSING CALL",
    category="parser",
)

PARSER_POSITION_OUT_OF_RANGE: Final[DiagnosticSpec] = DiagnosticSpec(
    code=2001,
    message="IPARSER_ERROR | CURRENT POSITION IS OUT OF RANGE",
    category="parser",
)

PARSER_EMPTY_TOKEN_LIST: Final[DiagnosticSpec] = DiagnosticSpec(
    code=2002,
    message="IPARSER_ERROR | EMPTY TOKEN LIST",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code=2003,
    message="UNEXPECTED TOKEN TYPE",
    category="parser",
)

PARSER_EXTRA_CLOSING_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code=2004,
    message="EXTRA CLOSING TAG",
    hint="Remove the closing tag or add the matching opening tag.",
    category="parser",
)

PARSER_TAG_NAME_NOT_FOUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code=2005,
    message="TAG NAME NOT FOUND",
    category="parser",
)

PARSER_ATTRIBUTE_NAME_NOT_FOUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code=2006,
    message="ATTRIBUTE NAME NOT FOUND",
    hint="Did you forget to close the tag?",
    category="parser",
)

PARSER_TAG_NOT_CLOSED: Final[DiagnosticSpec] = DiagnosticSpec(
    code=2007,
    message="TAG WASN'T CLOSED",
    category="parser",
)

PARSER_DUPLICATE_ATTRIBUTE: Final[DiagnosticSpec] = DiagnosticSpec(
    code=2008,
    message="DUPLICATE ATTRIBUTE DECLARATION",
    category="parser",
)

PARSER_ATTRIBUTE_VALUE_NOT_FOUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code=2009,
    message="ATTRIBUTE VALUE NOT FOUND",
    hint='Attribute values must be string literals, e.g. name="x".',
    category="parser",
)

PARSER_UNHANDLED: Final[DiagnosticSpec] = DiagnosticSpec(
    code=2010,
    message="EXCEPTION WASN'T HANDLED",
    category="parser",
)

# -------------------------
# Runtime (4000s)
# -------------------------
RUNTIME_UNHANDLED: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4000,
    message="IRUNNER_ERROR | EXCEPTION WASN'T HANDLED",
    category="runtime",
)

RUNTIME_TAG_NOT_SUPPORTED: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4001,
    message="TAG NOT SUPPORTED",
    category="runtime",
)

RUNTIME_TYPE_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4002,
    message="TYPE MISMATCH",
    category="runtime",
)

RUNTIME_ATTRIBUTE_VALUE_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4003,
    message="ATTRIBUTE VALUE ERROR",
    category="runtime",
)

RUNTIME_REQUIRED_ATTRIBUTE_MISSING: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4004,
    message="REQUIRED ATTRIBUTE WASN'T FOUND",
    category="runtime",
)

RUNTIME_VOID_IN_EXPRESSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4005,
    message="VOID USED IN EXPRESSION",
    category="runtime",
)

RUNTIME_DUPLICATE_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4006,
    message="DUPLICATE VARIABLE DECLARATION",
    hint="Blocks share one flat scope; pick a different variable name.",
    category="runtime",
)

RUNTIME_VARIABLE_NOT_FOUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4007,
    message="VARIABLE DOESN'T EXIST",
    category="runtime",
)

RUNTIME_OPERAND_COUNT_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4008,
    message="OPERAND NUMBER MISMATCH",
    category="runtime",
)

RUNTIME_TAG_BINDING_MISSING: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4009,
    message="IRUNNER_ERROR | TAG BINDING MISSING",
    category="runtime",
)

RUNTIME_UNEXPECTED_VOID: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4010,
    message="UNEXPECTED VOID",
    category="runtime",
)

RUNTIME_CONDITIONAL_TYPE_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4011,
    message="CONDITIONAL TYPE ERROR",
    hint="A condition must evaluate to a boolean.",
    category="runtime",
)

RUNTIME_DUPLICATE_CONDITIONAL: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4012,
    message="DUPLICATE CONDITIONAL",
    category="runtime",
)

RUNTIME_MISSING_CONDITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4013,
    message="MISSING CONDITION",
    category="runtime",
)

RUNTIME_FUNCTION_NOT_FOUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4014,
    message="FUNCTION DOESN'T EXIST",
    category="runtime",
)

RUNTIME_VARIABLE_TYPE_NOT_SUPPORTED: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4015,
    message="IRUNNER_ERROR | VARIABLE TYPE ISN'T SUPPORTED",
    category="runtime",
)

RUNTIME_UNSET_ACCESS: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4016,
    message="UNSET ACCESS ERROR",
    hint="Assign the variable with <set> before reading it.",
    category="runtime",
)

RUNTIME_UNSUPPORTED_OPERANDS: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4017,
    message="UNSUPPORTED OPERAND TYPES",
    category="runtime",
)

RUNTIME_VALUE_CONVERSION: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4018,
    message="VALUE CONVERSION ERROR",
    category="runtime",
)

RUNTIME_ARGUMENT_BINDING: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4019,
    message="ARGUMENT BINDING ERROR",
    category="runtime",
)

RUNTIME_FUNCTION_DEFINITION: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4020,
    message="IRUNNER_ERROR | FUNCTION DEFINITION ERROR",
    category="runtime",
)

RUNTIME_MISSING_CATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4021,
    message="TRY WITHOUT CATCH",
    hint="Place a <catch> tag right after the <try> tag.",
    category="runtime",
)

RUNTIME_DIVISION_BY_ZERO: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4022,
    message="DIVISION BY ZERO",
    severity=Severity.WARNING,
    category="runtime",
)

RUNTIME_ERROR_CAPTURED: Final[DiagnosticSpec] = DiagnosticSpec(
    code=4023,
    message="ERROR CAPTURED BY TRY",
    severity=Severity.INFO,
    category="runtime",
)

# -------------------------
# Diagnostic registry (5000s)
# -------------------------
DIAGNOSTICS_UNKNOWN_CODE: Final[DiagnosticSpec] = DiagnosticSpec(
    code=5000,
    message="IEXCEPTHANDLER_ERROR | ERROR CODE ISN'T RECOGNIZED",
    category="diagnostics",
)


def _build_registry(*specs: DiagnosticSpec) -> Mapping[int, DiagnosticSpec]:
    registry: dict[int, DiagnosticSpec] = {}
    for spec in specs:
        if spec.code in registry:
            raise ValueError(f"Duplicate diagnostic code: {spec.code}")
        registry[spec.code] = spec
    return MappingProxyType(registry)


ERROR_CODES: Final[Mapping[int, DiagnosticSpec]] = _build_registry(
    LEXER_UNRECOGNIZED_TOKEN,
    LEXER_UNTERMINATED_STRING,
    LEXER_UNTERMINATED_NUMBER,
    PARSER_CURRENT_TOKEN_MISMATCH,
    PARSER_POSITION_OUT_OF_RANGE,
    PARSER_EMPTY_TOKEN_LIST,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_EXTRA_CLOSING_TAG,
    PARSER_TAG_NAME_NOT_FOUND,
    PARSER_ATTRIBUTE_NAME_NOT_FOUND,
    PARSER_TAG_NOT_CLOSED,
    PARSER_DUPLICATE_ATTRIBUTE,
    PARSER_ATTRIBUTE_VALUE_NOT_FOUND,
    PARSER_UNHANDLED,
    RUNTIME_UNHANDLED,
    RUNTIME_TAG_NOT_SUPPORTED,
    RUNTIME_TYPE_MISMATCH,
    RUNTIME_ATTRIBUTE_VALUE_ERROR,
    RUNTIME_REQUIRED_ATTRIBUTE_MISSING,
    RUNTIME_VOID_IN_EXPRESSION,
    RUNTIME_DUPLICATE_VARIABLE,
    RUNTIME_VARIABLE_NOT_FOUND,
    RUNTIME_OPERAND_COUNT_MISMATCH,
    RUNTIME_TAG_BINDING_MISSING,
    RUNTIME_UNEXPECTED_VOID,
    RUNTIME_CONDITIONAL_TYPE_ERROR,
    RUNTIME_DUPLICATE_CONDITIONAL,
    RUNTIME_MISSING_CONDITION,
    RUNTIME_FUNCTION_NOT_FOUND,
    RUNTIME_VARIABLE_TYPE_NOT_SUPPORTED,
    RUNTIME_UNSET_ACCESS,
    RUNTIME_UNSUPPORTED_OPERANDS,
    RUNTIME_VALUE_CONVERSION,
    RUNTIME_ARGUMENT_BINDING,
    RUNTIME_FUNCTION_DEFINITION,
    RUNTIME_MISSING_CATCH,
    RUNTIME_DIVISION_BY_ZERO,
    RUNTIME_ERROR_CAPTURED,
    DIAGNOSTICS_UNKNOWN_CODE,
)
"""Read-only code -> spec table."""
