"""Expression evaluation: auto-evaluative, operative, call, input and get tags."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Final, Mapping

from tagscript.ast import Tag
from tagscript.ast.model import NUMBER_LITERAL_ATTRIBUTE, TEXT_LITERAL_ATTRIBUTE
from tagscript.diagnostics import TagScriptError, fatal
from tagscript.diagnostics.codes import (
    RUNTIME_ATTRIBUTE_VALUE_ERROR,
    RUNTIME_DIVISION_BY_ZERO,
    RUNTIME_OPERAND_COUNT_MISMATCH,
    RUNTIME_REQUIRED_ATTRIBUTE_MISSING,
    RUNTIME_TAG_BINDING_MISSING,
    RUNTIME_TAG_NOT_SUPPORTED,
    RUNTIME_VOID_IN_EXPRESSION,
)
from tagscript.runtime.context import RuntimeContext
from tagscript.runtime.functions import PassedArgument
from tagscript.runtime.scope import Scope
from tagscript.syntax import OperativeKind, TagKind
from tagscript.values import (
    ArrayValue,
    BinaryOperator,
    DataKind,
    StringValue,
    UnaryOperator,
    Value,
    binary_operation,
    data_kind_for_name,
    divides_by_zero,
    parse_value,
    unary_operation,
)

logger = logging.getLogger(__name__)

BINARY_OPERATORS: Final[Mapping[OperativeKind, BinaryOperator]] = MappingProxyType(
    {
        OperativeKind.SUM: BinaryOperator.ADD,
        OperativeKind.SUBTRACT: BinaryOperator.SUBTRACT,
        OperativeKind.MULTIPLY: BinaryOperator.MULTIPLY,
        OperativeKind.DIVIDE: BinaryOperator.DIVIDE,
        OperativeKind.MODULO: BinaryOperator.MODULO,
        OperativeKind.RAISE: BinaryOperator.POWER,
        OperativeKind.ROOT: BinaryOperator.ROOT,
        OperativeKind.EQUALS: BinaryOperator.EQUALS,
        OperativeKind.AND: BinaryOperator.AND,
        OperativeKind.OR: BinaryOperator.OR,
    }
)

UNARY_OPERATORS: Final[Mapping[OperativeKind, UnaryOperator]] = MappingProxyType(
    {
        OperativeKind.NEGATE: UnaryOperator.NEGATE,
    }
)

NO_AUTOBREAK: Final[str] = "no-autobreak"


def span_length(tag: Tag) -> int:
    """Caret width for a tag: the literal with its delimiters, else the tag name."""
    match tag.kind:
        case TagKind.LITERAL_TEXT:
            return len(tag.attributes.get(TEXT_LITERAL_ATTRIBUTE, "")) + 2
        case TagKind.LITERAL_NUMBER:
            return len(tag.attributes.get(NUMBER_LITERAL_ATTRIBUTE, "")) + 2
        case _:
            return len(tag.name)


def locate(error: TagScriptError, tag: Tag) -> TagScriptError:
    return error.located(tag.position, span_length(tag))


class ExpressionEvaluator:
    """Evaluates expression-position tags against one scope."""

    def __init__(self, scope: Scope, context: RuntimeContext) -> None:
        self._scope = scope
        self._context = context

    @property
    def scope(self) -> Scope:
        return self._scope

    def evaluate_auto(self, tag: Tag) -> Value:
        """Evaluate the single nested body of an auto-evaluative tag."""
        if len(tag.children) != 1:
            raise fatal(
                RUNTIME_OPERAND_COUNT_MISMATCH.code,
                f"<{tag.name}> must have exactly 1 tag inside it, found {len(tag.children)}",
                tag.position,
                len(tag.name),
            )
        return self.evaluate(tag.children[0])

    def evaluate(self, tag: Tag) -> Value:
        try:
            match tag.kind:
                case TagKind.LITERAL_TEXT:
                    return StringValue(tag.require_attribute(TEXT_LITERAL_ATTRIBUTE))
                case TagKind.LITERAL_NUMBER:
                    return parse_value(tag.require_attribute(NUMBER_LITERAL_ATTRIBUTE), DataKind.NUMBER)
                case TagKind.GET:
                    return self.get(tag)
                case TagKind.OPERATIVE:
                    return self.operate(tag)
                case TagKind.ARRAY:
                    return ArrayValue(tuple(self.evaluate(child) for child in tag.children))
                case TagKind.INPUT:
                    return self.input(tag)
                case TagKind.CALL:
                    value = self.call(tag)
                    if value is None:
                        raise fatal(
                            RUNTIME_VOID_IN_EXPRESSION.code,
                            f"Function '{tag.attribute('name')}' has no return value and cannot be used in an expression",
                        )
                    return value
                case _:
                    raise fatal(
                        RUNTIME_TAG_NOT_SUPPORTED.code,
                        f"Tag '{tag.name}' is not supported in an expression",
                    )
        except TagScriptError as error:
            raise locate(error, tag) from None

    def get(self, tag: Tag) -> Value:
        return self._scope.require(tag.require_attribute("name")).get()

    def operate(self, tag: Tag) -> Value:
        operative = tag.operative_kind
        if operative is None:
            raise fatal(
                RUNTIME_TAG_BINDING_MISSING.code,
                f"Tag '{tag.name}' is not bound to an operator",
            )
        if len(tag.children) != operative.arity:
            plural = "operand" if operative.arity == 1 else "operands"
            raise fatal(
                RUNTIME_OPERAND_COUNT_MISMATCH.code,
                f"A {tag.name} tag must have exactly {operative.arity} {plural}, found {len(tag.children)}",
            )

        operands = [self.evaluate(child) for child in tag.children]
        unary = UNARY_OPERATORS.get(operative)
        if unary is not None:
            return unary_operation(unary, operands[0])

        binary = BINARY_OPERATORS[operative]
        left, right = operands
        result = binary_operation(binary, left, right)
        if divides_by_zero(binary, right):
            self._context.diagnostics.warning(
                RUNTIME_DIVISION_BY_ZERO.code,
                f"<{tag.name}> by zero yields {result.format()}",
                tag.position,
                len(tag.name),
            )
        return result

    def call(self, tag: Tag) -> Value | None:
        """Invoke a built-in function. Returns None for void functions."""
        name = tag.require_attribute("name")
        arguments: list[PassedArgument] = []
        for child in tag.children:
            if child.kind != TagKind.ARGUMENT:
                raise fatal(
                    RUNTIME_TAG_NOT_SUPPORTED.code,
                    f"Function call tag only supports 'arg' tags, found '{child.name}'",
                    child.position,
                    span_length(child),
                )
            arguments.append(PassedArgument(self.evaluate_auto(child), child.attribute("name")))

        function = self._context.functions.require(name)
        logger.debug("Calling %s with %d argument(s)", name, len(arguments))
        return function.call(arguments)

    def input(self, tag: Tag) -> Value:
        """Prompt, read one line and either store it (`save-to`) or parse it (`target-type`)."""
        save_to = tag.attribute("save-to")
        target_type = tag.attribute("target-type")
        if save_to is None and target_type is None:
            raise fatal(
                RUNTIME_REQUIRED_ATTRIBUTE_MISSING.code,
                "Input tag requires either a 'save-to' or a 'target-type' attribute",
            )
        if save_to is not None and target_type is not None:
            raise fatal(
                RUNTIME_ATTRIBUTE_VALUE_ERROR.code,
                "Input tag accepts only one of 'save-to' and 'target-type'",
            )

        variable = self._scope.require(save_to) if save_to is not None else None
        kind = variable.declared_kind if variable is not None else data_kind_for_name(target_type or "")
        if kind is None:
            raise fatal(RUNTIME_ATTRIBUTE_VALUE_ERROR.code, f"'{target_type}' is not a valid datatype")

        io = self._context.io
        prompt = tag.attribute("prompt")
        if prompt is not None:
            io.write(prompt)
            if not tag.has_attribute(NO_AUTOBREAK):
                io.write(self._context.autobreak)

        value = parse_value(io.read_line(), kind)
        if variable is None:
            return value
        variable.assign(value)
        return variable.get()
