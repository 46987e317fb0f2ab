"""Pydantic models for validation error responses."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.result import ValidationFailure


class ValidationFailureDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    stage: str
    message: str
    path: str = ""
    value: Any = None
    schema_: dict[str, Any] = Field(default_factory=dict, alias="schema")

    @classmethod
    def from_failure(cls, failure: ValidationFailure) -> "ValidationFailureDetail":
        return cls(**failure.to_detail())


class ValidationErrorResponse(BaseModel):
    detail: ValidationFailureDetail
