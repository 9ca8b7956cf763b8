"""Small shared utilities for the CLI and web layers."""

from sketch_catalog.utils.exit_codes import ExitCode
from sketch_catalog.utils.json_norm import stable_json_dump, stable_json_dumps, to_builtin

__all__ = ["ExitCode", "stable_json_dump", "stable_json_dumps", "to_builtin"]
