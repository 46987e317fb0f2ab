"""Registry of compiled JSON Schema validators keyed by schema name."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from ..util.schema import UnknownSchemaError, iter_schema_names, load_schema
from ..util.settings import Settings
from .result import Stage, Valid, ValidationFailure, ValidationResult

logger = logging.getLogger(__name__)

SchemaRef = str | type | None


@dataclass(frozen=True, slots=True)
class BoundSchema:
    """A schema document together with its compiled validator."""

    name: str | None
    schema: dict[str, Any]
    validator: Draft202012Validator

    def check(self, stage: Stage, value: Any) -> ValidationResult:
        error = best_match(self.validator.iter_errors(value))
        if error is None:
            return Valid(value)
        return ValidationFailure(stage=stage, value=value, schema=self.schema, error=error)


ACCEPT_ANY = BoundSchema(name=None, schema={}, validator=Draft202012Validator({}))


def ref_name(ref: SchemaRef) -> str | None:
    """Return the schema name a reference points at."""

    if ref is None or isinstance(ref, str):
        return ref
    return ref.__name__


class ValidatorRegistry:
    """Read-only set of validators compiled once at construction."""

    def __init__(self, schemas: Mapping[str, dict[str, Any]]) -> None:
        compiled: dict[str, BoundSchema] = {}
        for name, schema in schemas.items():
            Draft202012Validator.check_schema(schema)
            compiled[name] = BoundSchema(
                name=name,
                schema=schema,
                validator=Draft202012Validator(schema),
            )
        self._validators = MappingProxyType(compiled)

    @classmethod
    def from_mapping(cls, schemas: Mapping[str, dict[str, Any]]) -> "ValidatorRegistry":
        return cls(dict(schemas))

    @classmethod
    def from_directory(cls, schema_dir: Path) -> "ValidatorRegistry":
        names = iter_schema_names(schema_dir)
        registry = cls({name: load_schema(name, schema_dir=schema_dir) for name in names})
        logger.info("Compiled %d schemas from %s", len(names), schema_dir)
        return registry

    @property
    def validators(self) -> Mapping[str, BoundSchema]:
        return self._validators

    def names(self) -> list[str]:
        return sorted(self._validators)

    def __contains__(self, ref: object) -> bool:
        if not isinstance(ref, (str, type)):
            return False
        return ref_name(ref) in self._validators

    def get(self, ref: SchemaRef) -> BoundSchema:
        name = ref_name(ref)
        if name is None:
            return ACCEPT_ANY
        try:
            return self._validators[name]
        except KeyError:
            raise UnknownSchemaError(name) from None

    def schema(self, name: str) -> dict[str, Any]:
        return self.get(name).schema


@cache
def default_registry() -> ValidatorRegistry:
    """Process-wide registry built from the configured schema directory."""

    return ValidatorRegistry.from_directory(Settings.from_env().schema_dir)
