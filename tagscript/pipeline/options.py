"""Run configuration."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

DEBUG_ENV_VAR: Final[str] = "TAGSCRIPT_DEBUG"
_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


@dataclass(frozen=True, slots=True)
class RunOptions:
    """Flags controlling one interpreter run."""

    debug: bool = False
    autobreak: str = "\n"
    render_source_context: bool = True

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> "RunOptions":
        env = os.environ if environ is None else environ
        return RunOptions(debug=env.get(DEBUG_ENV_VAR, "").strip().lower() in _TRUTHY)
