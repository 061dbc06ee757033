"""Schema enforcement for model-run input and output documents.

Both operations validate the whole document before failing, so the raised
error lists every violation rather than only the first one found.
"""

from __future__ import annotations

import logging
from typing import Any, List

import jsonschema

from model_runner.errors import ERROR_PREFIXES, ModelSchemaValidationError, SchemaViolation
from model_runner.io import PathLike, read_json_file
from model_runner.schema.resources import schema_validator

logger = logging.getLogger(__name__)

INPUT_ERROR_PREFIX = ERROR_PREFIXES["input"]
OUTPUT_ERROR_PREFIX = ERROR_PREFIXES["output"]


def _sort_key(err: jsonschema.ValidationError) -> tuple:
    return (
        [str(p) for p in err.absolute_path],
        [str(p) for p in err.absolute_schema_path],
        err.message,
    )


def schema_violations(kind: str, document: Any) -> List[SchemaViolation]:
    validator = schema_validator(kind)
    errors = sorted(validator.iter_errors(document), key=_sort_key)
    return [
        SchemaViolation(
            path="/".join(str(p) for p in err.absolute_path),
            message=err.message,
            validator=str(err.validator),
        )
        for err in errors
    ]


def input_schema_violations(document: Any) -> List[SchemaViolation]:
    return schema_violations("input", document)


def output_schema_violations(document: Any) -> List[SchemaViolation]:
    return schema_violations("output", document)


def enforce_input_schema(document: Any) -> None:
    violations = input_schema_violations(document)
    if violations:
        logger.info("model input failed schema enforcement (%d violations)", len(violations))
        raise ModelSchemaValidationError("input", violations)


def enforce_output_schema(file_path: PathLike) -> None:
    """Read a model output file and enforce the output schema on it.

    I/O errors propagate unchanged; unparseable content raises
    ModelOutputParseError rather than a schema error.
    """
    document = read_json_file(file_path)
    violations = output_schema_violations(document)
    if violations:
        logger.info(
            "model output %s failed schema enforcement (%d violations)",
            file_path,
            len(violations),
        )
        raise ModelSchemaValidationError("output", violations)
