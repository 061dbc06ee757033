"""Schema enforcement for model-run documents."""

from __future__ import annotations

from model_runner.schema.enforcer import (
    INPUT_ERROR_PREFIX,
    OUTPUT_ERROR_PREFIX,
    enforce_input_schema,
    enforce_output_schema,
    input_schema_violations,
    output_schema_violations,
)
from model_runner.schema.resources import clear_schema_cache, load_schema, schema_path

__all__ = [
    "INPUT_ERROR_PREFIX",
    "OUTPUT_ERROR_PREFIX",
    "clear_schema_cache",
    "enforce_input_schema",
    "enforce_output_schema",
    "input_schema_violations",
    "load_schema",
    "output_schema_violations",
    "schema_path",
]
