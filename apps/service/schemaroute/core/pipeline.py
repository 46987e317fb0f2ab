"""Ordered validation of a request, its handler call and the response."""
from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable

from .registry import ACCEPT_ANY, BoundSchema, SchemaRef, ValidatorRegistry
from .result import Stage, Valid, ValidationResult

logger = logging.getLogger(__name__)

Handler = Callable[[Any, Any, Any], Any]


@dataclass(frozen=True, slots=True)
class RouteSchemas:
    """Schema references declared for one route.

    Each reference is a schema name or the ``TypedDict`` named after it;
    ``None`` accepts any payload.
    """

    params: SchemaRef = None
    body: SchemaRef = None
    query: SchemaRef = None
    response: SchemaRef = None

    def bind(self, registry: ValidatorRegistry) -> "RouteValidators":
        return RouteValidators(
            params=registry.get(self.params),
            body=registry.get(self.body),
            query=registry.get(self.query),
            response=registry.get(self.response),
        )


@dataclass(frozen=True, slots=True)
class RouteValidators:
    """Compiled validators for each stage of a route."""

    params: BoundSchema = ACCEPT_ANY
    body: BoundSchema = ACCEPT_ANY
    query: BoundSchema = ACCEPT_ANY
    response: BoundSchema = ACCEPT_ANY

    def for_stage(self, stage: Stage) -> BoundSchema:
        return getattr(self, stage.value)


def check_request(
    validators: RouteValidators,
    *,
    params: Any,
    body: Any,
    query: Any,
) -> ValidationResult:
    """Validate params, body and query in order, stopping at the first failure.

    On success the result value is the ``(params, body, query)`` tuple.
    """

    for stage, value in ((Stage.PARAMS, params), (Stage.BODY, body), (Stage.QUERY, query)):
        result = validators.for_stage(stage).check(stage, value)
        if not result.ok:
            return result
        logger.debug("%s accepted", stage.value)
    return Valid((params, body, query))


def check_response(validators: RouteValidators, payload: Any) -> ValidationResult:
    return validators.response.check(Stage.RESPONSE, payload)


def run_pipeline(
    validators: RouteValidators,
    handler: Handler,
    *,
    params: Any,
    body: Any,
    query: Any,
) -> ValidationResult:
    """Run the full pipeline for a synchronous handler."""

    request = check_request(validators, params=params, body=body, query=query)
    if not request.ok:
        return request
    return check_response(validators, handler(*request.value))


async def run_pipeline_async(
    validators: RouteValidators,
    handler: Handler,
    *,
    params: Any,
    body: Any,
    query: Any,
) -> ValidationResult:
    """Run the full pipeline, awaiting the handler when it is a coroutine."""

    request = check_request(validators, params=params, body=body, query=query)
    if not request.ok:
        return request
    payload = handler(*request.value)
    if inspect.isawaitable(payload):
        payload = await payload
    return check_response(validators, payload)
