"""Statement interpreter: walks one block's tags in order."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from tagscript.ast import Tag
from tagscript.diagnostics import TagScriptError, fatal
from tagscript.diagnostics.codes import (
    RUNTIME_ATTRIBUTE_VALUE_ERROR,
    RUNTIME_CONDITIONAL_TYPE_ERROR,
    RUNTIME_DUPLICATE_CONDITIONAL,
    RUNTIME_ERROR_CAPTURED,
    RUNTIME_MISSING_CATCH,
    RUNTIME_MISSING_CONDITION,
    RUNTIME_TAG_NOT_SUPPORTED,
    RUNTIME_UNEXPECTED_VOID,
    RUNTIME_UNHANDLED,
)
from tagscript.runtime.context import RuntimeContext
from tagscript.runtime.evaluator import NO_AUTOBREAK, ExpressionEvaluator, locate, span_length
from tagscript.runtime.result import RunResult
from tagscript.runtime.scope import Scope, Variable
from tagscript.syntax import TagKind
from tagscript.values import BooleanValue, DataKind, StringValue, Value, data_kind_for_name
from tagscript.values.model import check_kind

logger = logging.getLogger(__name__)

_OUTPUT_EXPRESSIONS = frozenset(
    {
        TagKind.LITERAL_TEXT,
        TagKind.LITERAL_NUMBER,
        TagKind.GET,
        TagKind.OPERATIVE,
        TagKind.ARRAY,
    }
)


class Interpreter:
    """Runs the direct children of one block tag.

    Nested blocks (if/while/try/catch bodies) get their own `Interpreter`
    over the same `Scope`, so variables declared anywhere stay visible to the
    rest of the program. `run()` never raises for runtime errors: it returns
    a FAILED result after recording the diagnostic in the run's
    `DiagnosticContext`.
    """

    def __init__(self, block: Tag, scope: Scope | None = None, context: RuntimeContext | None = None) -> None:
        self._block = block
        self._scope = scope if scope is not None else Scope()
        self._context = context if context is not None else RuntimeContext()
        self._evaluator = ExpressionEvaluator(self._scope, self._context)

    @property
    def scope(self) -> Scope:
        return self._scope

    @property
    def context(self) -> RuntimeContext:
        return self._context

    def run(self) -> RunResult:
        try:
            return self._run_children(self._block.children)
        except TagScriptError as error:
            diagnostic = error.diagnostic
        except RecursionError:
            diagnostic = fatal(
                RUNTIME_UNHANDLED.code,
                "Blocks are nested too deeply to run",
                self._block.position,
                len(self._block.name),
            ).diagnostic
        self._context.diagnostics.record_failure(diagnostic)
        return RunResult.failed(diagnostic)

    def _run_children(self, children: Sequence[Tag]) -> RunResult:
        index = 0
        while index < len(children):
            tag = children[index]
            try:
                match tag.kind:
                    case TagKind.IF:
                        chain = _collect_if_chain(children, index)
                        index += len(chain) - 1
                        result = self._run_if_chain(chain)
                    case TagKind.TRY:
                        catch_tag = children[index + 1] if index + 1 < len(children) else None
                        if catch_tag is None or catch_tag.kind != TagKind.CATCH:
                            raise fatal(RUNTIME_MISSING_CATCH.code, "Try tag must be followed by a 'catch' tag")
                        index += 1
                        result = self._run_try(tag, catch_tag)
                    case _:
                        result = self._run_statement(tag)
            except TagScriptError as error:
                raise locate(error, tag) from None

            if not result.is_completed:
                return result
            index += 1
        return RunResult.completed()

    def _run_statement(self, tag: Tag) -> RunResult:
        match tag.kind:
            case TagKind.OUTPUT:
                self._run_output(tag)
            case TagKind.VARIABLE:
                self._run_variable(tag)
            case TagKind.SET:
                variable = self._scope.require(tag.require_attribute("name"))
                variable.assign(self._evaluator.evaluate_auto(tag))
            case TagKind.INPUT:
                self._evaluator.input(tag)
            case TagKind.WHILE:
                return self._run_while(tag)
            case TagKind.CALL:
                self._evaluator.call(tag)
            case TagKind.RETURN:
                value = self._evaluator.evaluate_auto(tag) if tag.children else None
                return RunResult.returned(value)
            case _:
                raise fatal(
                    RUNTIME_TAG_NOT_SUPPORTED.code,
                    f"Tag '{tag.name}' does not qualify as a stand-alone tag",
                )
        return RunResult.completed()

    def _run_output(self, tag: Tag) -> None:
        io = self._context.io
        autobreak = not tag.has_attribute(NO_AUTOBREAK)
        for child in tag.children:
            try:
                if child.kind == TagKind.BREAK:
                    io.write(self._context.autobreak * _break_amount(child))
                    continue
                io.write(self._output_value(child).format())
                if autobreak:
                    io.write(self._context.autobreak)
            except TagScriptError as error:
                raise locate(error, child) from None

    def _output_value(self, tag: Tag) -> Value:
        if tag.kind == TagKind.CALL:
            value = self._evaluator.call(tag)
            if value is None:
                raise fatal(
                    RUNTIME_UNEXPECTED_VOID.code,
                    f"Function '{tag.attribute('name')}' has no return value and cannot be printed",
                )
            return value
        if tag.kind in _OUTPUT_EXPRESSIONS:
            return self._evaluator.evaluate(tag)
        raise fatal(
            RUNTIME_TAG_NOT_SUPPORTED.code,
            f"Tag '{tag.name}' is either not supported by the output tag or does not exist",
        )

    def _run_variable(self, tag: Tag) -> None:
        name = tag.require_attribute("name")
        type_name = tag.require_attribute("type")
        kind = data_kind_for_name(type_name)
        if kind is None:
            raise fatal(RUNTIME_ATTRIBUTE_VALUE_ERROR.code, f"'{type_name}' is not a valid datatype")
        self._scope.ensure_available(name)

        initial = self._evaluator.evaluate_auto(tag) if tag.children else None
        if initial is not None:
            check_kind(initial.kind, kind)
        variable = self._scope.declare(name, kind)
        if initial is not None:
            variable.assign(initial)

    def _run_if_chain(self, chain: Sequence[Tag]) -> RunResult:
        branches = [_split_branch(branch) for branch in chain]
        for branch, (condition, body) in zip(chain, branches, strict=True):
            if condition is None or self._test(condition):
                return self._run_nested(body, branch)
        return RunResult.completed()

    def _run_while(self, tag: Tag) -> RunResult:
        condition, body = _split_branch(tag)
        if condition is None:
            raise fatal(
                RUNTIME_MISSING_CONDITION.code,
                f"Every {tag.name} tag must have a 'condition' tag inside it",
                tag.position,
                len(tag.name),
            )
        while self._test(condition):
            result = self._run_nested(body, tag)
            if not result.is_completed:
                return result
        return RunResult.completed()

    def _run_try(self, try_tag: Tag, catch_tag: Tag) -> RunResult:
        target = self._catch_target(catch_tag)
        diagnostics = self._context.diagnostics

        with diagnostics.suppressing() as suppression:
            result = self._run_nested(try_tag.children, try_tag)
        if not result.is_failed:
            return result

        captured = suppression.message or ""
        diagnostics.info(RUNTIME_ERROR_CAPTURED.code, captured, try_tag.position, len(try_tag.name))
        if target is not None:
            target.assign(StringValue(captured))
        return self._run_nested(catch_tag.children, catch_tag)

    def _catch_target(self, catch_tag: Tag) -> Variable | None:
        name = catch_tag.attribute("save-to")
        if name is None:
            return None
        try:
            variable = self._scope.require(name)
            check_kind(variable.declared_kind, DataKind.STRING)
        except TagScriptError as error:
            raise locate(error, catch_tag) from None
        return variable

    def _test(self, condition: Tag) -> bool:
        value = self._evaluator.evaluate_auto(condition)
        if not isinstance(value, BooleanValue):
            raise fatal(
                RUNTIME_CONDITIONAL_TYPE_ERROR.code,
                f"The body of a condition tag must resolve to a boolean, got {value.kind}",
                condition.position,
                len(condition.name),
            )
        return value.value

    def _run_nested(self, children: Sequence[Tag], owner: Tag) -> RunResult:
        logger.debug("Entering <%s> body at %s (%d tags)", owner.name, owner.position, len(children))
        return Interpreter(Tag.block(children, owner.position), self._scope, self._context).run()


def _collect_if_chain(children: Sequence[Tag], start: int) -> list[Tag]:
    """The if tag at `start` plus every directly following elseif, up to one else."""
    chain = [children[start]]
    for tag in children[start + 1 :]:
        if tag.kind not in (TagKind.ELSEIF, TagKind.ELSE):
            break
        chain.append(tag)
        if tag.kind == TagKind.ELSE:
            break
    return chain


def _split_branch(tag: Tag) -> tuple[Tag | None, list[Tag]]:
    """Separate the condition tag of an if/elseif/else/while from its body."""
    condition: Tag | None = None
    body: list[Tag] = []
    for child in tag.children:
        if child.kind != TagKind.CONDITION:
            body.append(child)
            continue
        if tag.kind == TagKind.ELSE:
            raise fatal(
                RUNTIME_TAG_NOT_SUPPORTED.code,
                "An else tag can't have a 'condition' tag inside it",
                child.position,
                span_length(child),
            )
        if condition is not None:
            raise fatal(
                RUNTIME_DUPLICATE_CONDITIONAL.code,
                f"There can't be more than one condition in a {tag.name} tag",
                child.position,
                span_length(child),
            )
        condition = child

    if tag.kind != TagKind.ELSE and condition is None:
        raise fatal(
            RUNTIME_MISSING_CONDITION.code,
            f"Every {tag.name} tag must have a 'condition' tag inside it",
            tag.position,
            len(tag.name),
        )
    return condition, body


def _break_amount(tag: Tag) -> int:
    text = tag.attribute("amount")
    if text is None:
        return 1
    normalized = text.strip()
    if not (normalized.isascii() and normalized.isdigit()) or int(normalized) <= 0:
        raise fatal(
            RUNTIME_ATTRIBUTE_VALUE_ERROR.code,
            f"br's 'amount' attribute must be a positive integer, got '{text}'",
        )
    return int(normalized)
