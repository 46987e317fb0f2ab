"""Validation outcomes returned by each pipeline stage."""
from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from jsonschema import ValidationError

from ..util.schema import SchemaValidationError

T = TypeVar("T")


class Stage(str, Enum):
    """Pipeline stages that can reject a payload, in execution order."""

    PARAMS = "params"
    BODY = "body"
    QUERY = "query"
    RESPONSE = "response"

    @property
    def is_client_error(self) -> bool:
        return self is not Stage.RESPONSE


@dataclass(frozen=True, slots=True)
class Valid(Generic[T]):
    """Payload accepted by its schema, passed on unchanged."""

    value: T

    ok = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """First schema violation found by a stage."""

    stage: Stage
    value: Any
    schema: dict[str, Any]
    error: ValidationError

    ok = False

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def path(self) -> str:
        return ".".join(str(elem) for elem in self.error.path)

    def describe(self) -> str:
        return (
            f"Could not validate {self.stage.value} {_dump(self.value)} "
            f"against schema {_dump(self.schema)}"
        )

    def to_detail(self) -> dict[str, Any]:
        return {
            "stage": self.stage.value,
            "message": self.message,
            "path": self.path,
            "value": self.value,
            "schema": self.schema,
        }

    def raise_for_failure(self) -> None:
        raise SchemaValidationError(self.error, stage=self.stage.value)

    def unwrap(self) -> Any:
        self.raise_for_failure()


ValidationResult = Valid[Any] | ValidationFailure


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, default=str)
