from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence


class ModelRunnerError(RuntimeError):
    pass


class SchemaLoadError(ModelRunnerError):
    """Raised when a bundled schema file is missing or is not a valid schema."""


class ModelOutputParseError(ModelRunnerError):
    """Raised when a model output file does not contain parseable JSON."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"invalid json in model output file: {path} ({detail})")
        self.path = path
        self.detail = detail


@dataclass(frozen=True)
class SchemaViolation:
    path: str
    message: str
    validator: str = ""

    def format(self) -> str:
        loc = self.path or "<root>"
        return f"- {loc}: {self.message}"


ERROR_PREFIXES = {
    "input": "Invalid model input JSON. Details:",
    "output": "Invalid model output JSON. Details:",
}


class ModelSchemaValidationError(ModelRunnerError):
    """A document failed schema enforcement.

    The message is the fixed prefix for `kind` followed by one line per
    violation, so every problem can be fixed in a single pass.
    """

    def __init__(self, kind: str, violations: Sequence[SchemaViolation]) -> None:
        if kind not in ERROR_PREFIXES:
            raise ValueError(f"Unknown document kind: {kind!r}")
        self.kind = kind
        self.prefix = ERROR_PREFIXES[kind]
        self.violations = tuple(violations)
        lines = [v.format() for v in self.violations]
        super().__init__("\n".join([self.prefix, *lines]))
