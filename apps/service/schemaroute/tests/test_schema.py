"""Ensure shipped schema documents load and validate payloads."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from ..util.schema import (
    DEFAULT_SCHEMA_DIR,
    SchemaValidationError,
    UnknownSchemaError,
    iter_schema_names,
    load_schema,
    validate,
)


def test_shipped_schema_names() -> None:
    assert iter_schema_names() == ["EditTodoParams", "EditTodoReqBody", "EditTodoResBody"]


@pytest.mark.parametrize(
    "case", [
        ("EditTodoParams", {"id": "1"}),
        ("EditTodoReqBody", {"message": "todo"}),
        ("EditTodoReqBody", {"message": "todo", "completed": True}),
        ("EditTodoResBody", {"id": "1", "message": "todo", "completed": False}),
    ]
)
def test_payload_valid(case):
    schema_name, document = case
    validate(document, schema_name=schema_name)


def test_validation_error_reports_path() -> None:
    with pytest.raises(SchemaValidationError) as excinfo:
        validate({"message": 3}, schema_name="EditTodoReqBody")
    assert excinfo.value.path == "message"
    assert "string" in str(excinfo.value)


def test_unknown_schema() -> None:
    with pytest.raises(UnknownSchemaError):
        load_schema("NoSuchSchema")


def test_custom_schema_dir(tmp_path: Path) -> None:
    (tmp_path / "Thing.schema.json").write_text(json.dumps({"type": "integer"}), encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    assert iter_schema_names(tmp_path) == ["Thing"]
    assert load_schema("Thing", schema_dir=tmp_path) == {"type": "integer"}
    assert DEFAULT_SCHEMA_DIR.is_dir()
