from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

import yaml

from model_runner.errors import ModelOutputParseError

PathLike = Union[str, Path]

_YAML_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class JsonCompatibleLoader(yaml.SafeLoader):
    """SafeLoader that keeps dates and timestamps as plain strings."""


JsonCompatibleLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _YAML_TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def load_yaml_or_json(path: PathLike) -> Any:
    """Load a YAML/JSON document by file extension.

    Unlike schema enforcement, no shape checks happen here: the top-level value
    is returned as parsed so the schema can report on it. YAML is loaded into
    JSON types only, so unquoted dates stay strings.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    suffix = path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        return yaml.load(path.read_text(encoding="utf-8"), Loader=JsonCompatibleLoader)
    if suffix == ".json":
        return json.loads(path.read_text(encoding="utf-8"))
    raise ValueError(f"Unsupported document file extension: {path}")


def read_json_file(path: PathLike) -> Any:
    path = Path(path)
    raw = path.read_bytes()
    try:
        return json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ModelOutputParseError(path, str(e)) from e
