from __future__ import annotations

import json
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema

from model_runner.errors import SchemaLoadError

logger = logging.getLogger(__name__)

SCHEMA_KINDS = ("input", "output")
SCHEMAS_DIR_ENV = "MODEL_RUNNER_SCHEMAS_DIR"


def default_schemas_dir() -> Path:
    # model_runner/schema/* → model_runner/schemas/
    return Path(__file__).resolve().parents[1] / "schemas"


def schemas_dir() -> Path:
    override = str(os.environ.get(SCHEMAS_DIR_ENV) or "").strip()
    if override:
        return Path(override)
    return default_schemas_dir()


def schema_path(kind: str) -> Path:
    if kind not in SCHEMA_KINDS:
        raise ValueError(f"Unknown schema kind: {kind!r} (expected one of {SCHEMA_KINDS})")
    return schemas_dir() / f"{kind}.schema.json"


@lru_cache(maxsize=None)
def load_schema(kind: str) -> Dict[str, Any]:
    """Load and check a bundled schema. Cached for the life of the process."""
    path = schema_path(kind)
    if not path.exists():
        raise SchemaLoadError(f"schema not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"invalid json in schema: {path} ({e})") from e
    if not isinstance(data, dict):
        raise SchemaLoadError(f"schema must be an object: {path}")
    try:
        jsonschema.Draft202012Validator.check_schema(data)
    except jsonschema.SchemaError as e:
        raise SchemaLoadError(f"invalid JSON Schema: {path} ({e.message})") from e

    logger.debug("loaded %s schema from %s", kind, path)
    return data


@lru_cache(maxsize=None)
def schema_validator(kind: str) -> jsonschema.Draft202012Validator:
    return jsonschema.Draft202012Validator(load_schema(kind))


def clear_schema_cache() -> None:
    schema_validator.cache_clear()
    load_schema.cache_clear()
