"""Pipeline entrypoints and run configuration."""

from tagscript.pipeline.entrypoints import parse, run_source, tokenize
from tagscript.pipeline.options import DEBUG_ENV_VAR, RunOptions
from tagscript.pipeline.result import RunOutcome

__all__ = [
    "DEBUG_ENV_VAR",
    "RunOptions",
    "RunOutcome",
    "parse",
    "run_source",
    "tokenize",
]
