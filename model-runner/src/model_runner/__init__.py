"""Model runner (schema enforcement).

Provides:
- JSON Schema enforcement for model-run requests and model outputs
- a CLI for checking a single document by hand
"""

__all__ = [
    "cli",
    "errors",
    "io",
    "schema",
]
