"""TagScript: a tag-based scripting language interpreter."""

from tagscript.pipeline import RunOptions, RunOutcome, parse, run_source, tokenize

__all__ = [
    "RunOptions",
    "RunOutcome",
    "parse",
    "run_source",
    "tokenize",
]
