"""Repo-root entry point for the model_runner package.

The installable package is `model-runner/src/model_runner/`. Appending it to
this package's search path lets a checkout validate run requests and model
outputs directly, e.g.
`python -m model_runner.cli.validate_document --kind output --path out.json`.
"""

from __future__ import annotations

from pathlib import Path

_REPO_ROOT = Path(__file__).resolve().parents[1]
_REAL_PKG = _REPO_ROOT / "model-runner" / "src" / "model_runner"
if _REAL_PKG.is_dir():
    __path__.append(str(_REAL_PKG))  # type: ignore[name-defined]

__all__ = [
    "cli",
    "errors",
    "io",
    "schema",
]
