from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path

import yaml

from model_runner.errors import ModelRunnerError
from model_runner.io import load_yaml_or_json
from model_runner.schema import enforce_input_schema, enforce_output_schema
from model_runner.schema.resources import SCHEMA_KINDS, load_schema, schema_path

logger = logging.getLogger(__name__)


def _check_schemas() -> int:
    for kind in SCHEMA_KINDS:
        load_schema(kind)
        print(f"OK: {kind} schema ({schema_path(kind)})")
    return 0


def validate_document(kind: str, path: Path) -> None:
    if kind == "input":
        enforce_input_schema(load_yaml_or_json(path))
    elif kind == "output":
        enforce_output_schema(path)
    else:
        raise ValueError(f"Unknown document kind: {kind!r}")


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Validate a model-run input or output document against its JSON schema."
    )
    parser.add_argument(
        "--kind",
        choices=SCHEMA_KINDS,
        default=None,
        help="Which schema to enforce (input: run request JSON/YAML; output: model results JSON).",
    )
    parser.add_argument(
        "--path",
        type=Path,
        default=None,
        help="Document to validate.",
    )
    parser.add_argument(
        "--check_schemas",
        action="store_true",
        help="Only check that the bundled schemas load and are valid JSON Schema.",
    )
    parser.add_argument(
        "--log_level",
        default=os.environ.get("MODEL_RUNNER_LOG_LEVEL", "WARNING"),
        help="Logging level (default: $MODEL_RUNNER_LOG_LEVEL or WARNING).",
    )
    args = parser.parse_args()

    level = logging.getLevelName(str(args.log_level).strip().upper())
    if not isinstance(level, int):
        parser.error(f"unknown log level: {args.log_level!r}")

    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if args.check_schemas:
        try:
            return _check_schemas()
        except ModelRunnerError as e:
            raise SystemExit(f"Schema check failed:\n{e}")

    if args.kind is None or args.path is None:
        parser.error("--kind and --path are required unless --check_schemas is given")

    logger.debug("validating %s document %s", args.kind, args.path)
    try:
        validate_document(args.kind, args.path)
    except (ModelRunnerError, FileNotFoundError, ValueError, yaml.YAMLError) as e:
        raise SystemExit(f"Validation failed for {args.path}:\n{e}")

    print(f"OK: {args.kind} {args.path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
