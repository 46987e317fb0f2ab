"""Tests for the compiled validator registry."""
from __future__ import annotations

import json
from typing import TypedDict

import pytest
from jsonschema import SchemaError

from ..core.registry import ACCEPT_ANY, ValidatorRegistry, default_registry
from ..core.result import Stage
from ..util.schema import UnknownSchemaError


class Widget(TypedDict):
    name: str


@pytest.fixture
def registry() -> ValidatorRegistry:
    return ValidatorRegistry.from_mapping(
        {
            "Widget": {
                "type": "object",
                "properties": {"name": {"type": "string"}},
                "required": ["name"],
            }
        }
    )


def test_lookup_by_name_and_type(registry: ValidatorRegistry) -> None:
    assert registry.get("Widget") is registry.get(Widget)
    assert "Widget" in registry
    assert Widget in registry
    assert registry.names() == ["Widget"]


def test_missing_reference_accepts_anything(registry: ValidatorRegistry) -> None:
    bound = registry.get(None)
    assert bound is ACCEPT_ANY
    assert bound.check(Stage.QUERY, {"anything": ["goes"]}).ok


def test_unknown_reference(registry: ValidatorRegistry) -> None:
    with pytest.raises(UnknownSchemaError) as excinfo:
        registry.get("Gadget")
    assert excinfo.value.name == "Gadget"


def test_registry_is_read_only(registry: ValidatorRegistry) -> None:
    with pytest.raises(TypeError):
        registry.validators["Gadget"] = registry.get("Widget")  # type: ignore[index]


def test_malformed_schema_rejected_at_build() -> None:
    with pytest.raises(SchemaError):
        ValidatorRegistry.from_mapping({"Broken": {"type": 12}})


def test_check_returns_failure(registry: ValidatorRegistry) -> None:
    result = registry.get(Widget).check(Stage.BODY, {})
    assert not result.ok
    assert result.stage is Stage.BODY
    assert "'name' is a required property" in result.message


def test_from_directory(tmp_path) -> None:
    (tmp_path / "Count.schema.json").write_text(json.dumps({"type": "integer"}), encoding="utf-8")
    registry = ValidatorRegistry.from_directory(tmp_path)
    assert registry.schema("Count") == {"type": "integer"}
    assert registry.get("Count").check(Stage.RESPONSE, 3).ok


def test_default_registry_built_once() -> None:
    assert default_registry() is default_registry()
    assert "EditTodoReqBody" in default_registry()
