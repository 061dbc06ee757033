from __future__ import annotations

import json
from pathlib import Path

import jsonschema
import pytest

from model_runner.errors import ModelSchemaValidationError, SchemaLoadError
from model_runner.schema import enforce_input_schema, load_schema, schema_path
from model_runner.schema.resources import SCHEMAS_DIR_ENV, default_schemas_dir


@pytest.mark.parametrize("kind", ["input", "output"])
def test_bundled_schema_loadable(kind: str) -> None:
    schema = load_schema(kind)
    jsonschema.Draft202012Validator.check_schema(schema)
    assert schema_path(kind).parent == default_schemas_dir()


def test_load_schema_is_memoized() -> None:
    assert load_schema("input") is load_schema("input")


def test_unknown_schema_kind_rejected() -> None:
    with pytest.raises(ValueError):
        schema_path("intermediate")


def test_schemas_dir_env_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    schema = {
        "$schema": "https://json-schema.org/draft/2020-12/schema",
        "type": "object",
        "required": ["only_field"],
    }
    (tmp_path / "input.schema.json").write_text(json.dumps(schema), encoding="utf-8")
    monkeypatch.setenv(SCHEMAS_DIR_ENV, str(tmp_path))

    enforce_input_schema({"only_field": 1})
    with pytest.raises(ModelSchemaValidationError, match=r"Invalid model input JSON\. Details:"):
        enforce_input_schema({})


def test_missing_schema_file_is_load_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(SCHEMAS_DIR_ENV, str(tmp_path))
    with pytest.raises(SchemaLoadError, match="schema not found"):
        load_schema("output")


def test_invalid_schema_is_load_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "output.schema.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
    monkeypatch.setenv(SCHEMAS_DIR_ENV, str(tmp_path))
    with pytest.raises(SchemaLoadError, match="invalid JSON Schema"):
        load_schema("output")


def test_non_object_schema_is_load_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "output.schema.json").write_text("[]", encoding="utf-8")
    monkeypatch.setenv(SCHEMAS_DIR_ENV, str(tmp_path))
    with pytest.raises(SchemaLoadError, match="schema must be an object"):
        load_schema("output")
