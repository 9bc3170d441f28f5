"""Tree-walking runtime."""

from tagscript.runtime.context import RuntimeContext
from tagscript.runtime.evaluator import ExpressionEvaluator
from tagscript.runtime.functions import (
    DEFAULT_REGISTRY,
    BuiltinFunction,
    FunctionRegistry,
    ParameterDef,
    PassedArgument,
    default_registry,
)
from tagscript.runtime.interpreter import Interpreter
from tagscript.runtime.io import ConsoleIO
from tagscript.runtime.result import RunResult, RunStatus
from tagscript.runtime.scope import Scope, Variable

__all__ = [
    "DEFAULT_REGISTRY",
    "BuiltinFunction",
    "ConsoleIO",
    "ExpressionEvaluator",
    "FunctionRegistry",
    "Interpreter",
    "ParameterDef",
    "PassedArgument",
    "RunResult",
    "RunStatus",
    "RuntimeContext",
    "Scope",
    "Variable",
    "default_registry",
]
