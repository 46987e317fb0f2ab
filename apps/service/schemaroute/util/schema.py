"""Helpers for loading JSON schemas and validating payloads."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

SCHEMA_SUFFIX = ".schema.json"

DEFAULT_SCHEMA_DIR = Path(__file__).resolve().parents[1] / "schemas"


class UnknownSchemaError(LookupError):
    """Raised when a schema name has no document behind it."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No schema named {name!r}")


def schema_path(name: str, *, schema_dir: Path | None = None) -> Path:
    return (schema_dir or DEFAULT_SCHEMA_DIR) / f"{name}{SCHEMA_SUFFIX}"


def load_schema(name: str, *, schema_dir: Path | None = None) -> dict[str, Any]:
    path = schema_path(name, schema_dir=schema_dir)
    if not path.is_file():
        raise UnknownSchemaError(name)
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def iter_schema_names(schema_dir: Path | None = None) -> list[str]:
    directory = schema_dir or DEFAULT_SCHEMA_DIR
    if not directory.is_dir():
        return []
    return sorted(
        path.name[: -len(SCHEMA_SUFFIX)]
        for path in directory.iterdir()
        if path.name.endswith(SCHEMA_SUFFIX)
    )


def validate(document: Any, *, schema_name: str, schema_dir: Path | None = None) -> None:
    schema = load_schema(schema_name, schema_dir=schema_dir)
    validator = Draft202012Validator(schema)
    try:
        validator.validate(document)
    except ValidationError as exc:
        raise SchemaValidationError(exc) from exc


class SchemaValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, error: ValidationError, *, stage: str | None = None) -> None:
        self.error = error
        self.stage = stage
        super().__init__(error.message)

    @property
    def path(self) -> str:
        return ".".join(str(elem) for elem in self.error.path)
