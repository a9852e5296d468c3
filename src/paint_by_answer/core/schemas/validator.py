"""
Schema Validation Utilities

Validates stored activity payloads before they are turned into models.

The external store hands the core a row-shaped dictionary (title, grid size,
flat grid data, questions with answer options). This module checks that
shape against `activity.schema.json` using jsonschema, then checks the one
cross-field rule the schema cannot express: the grid data length.

Colour strings are NOT validated here - a malformed colour is treated as
"no colour" during deserialization rather than rejecting the activity.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema.exceptions import best_match

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_activity(data: dict[str, Any]) -> None:
    """
    Validate a stored activity payload.

    Args:
        data: Activity dictionary from the external store

    Raises:
        ValidationError: If the payload does not match the schema or the
            grid data length does not match the grid size
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Activity payload must be an object, got {type(data).__name__}")

    validator = jsonschema.Draft7Validator(_load_schema("activity"))
    schema_errors = list(validator.iter_errors(data))
    if schema_errors:
        first = best_match(schema_errors)
        path = "/".join(str(p) for p in first.absolute_path)
        raise ValidationError(
            f"Invalid activity payload at '{path}': {first.message}",
            path=path,
            errors=[e.message for e in schema_errors],
        )

    grid_data = data.get("grid_data")
    size = data["grid_size"]
    if grid_data is not None and len(grid_data) != size * size:
        raise ValidationError(
            f"grid_data has {len(grid_data)} cells, expected {size * size} for size {size}",
            path="grid_data",
        )
