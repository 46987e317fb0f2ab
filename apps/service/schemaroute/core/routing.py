"""Register FastAPI routes guarded by JSON Schema validation."""
from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import APIRouter, FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from jsonschema import ValidationError

from ..models.errors import ValidationErrorResponse, ValidationFailureDetail
from .pipeline import Handler, RouteSchemas, RouteValidators, run_pipeline_async
from .registry import ValidatorRegistry, default_registry
from .result import Stage, Valid, ValidationFailure, ValidationResult

logger = logging.getLogger(__name__)

_FAILURE_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ValidationErrorResponse},
}


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def _read_body(request: Request, validators: RouteValidators) -> ValidationResult:
    """Parse a JSON request body; non-JSON and empty bodies read as ``{}``."""

    if not _is_json(request.headers.get("content-type", "")):
        return Valid({})
    raw = await request.body()
    if not raw.strip():
        return Valid({})
    try:
        return Valid(json.loads(raw))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        return ValidationFailure(
            stage=Stage.BODY,
            value=raw.decode("utf-8", errors="replace"),
            schema=validators.body.schema,
            error=ValidationError(f"Request body is not valid JSON: {exc}"),
        )


def _reject(failure: ValidationFailure, *, method: str, path: str) -> HTTPException:
    logger.debug("%s %s: %s", method, path, failure.describe())
    if failure.stage.is_client_error:
        logger.warning("%s %s rejected %s: %s", method, path, failure.stage.value, failure.message)
        code = status.HTTP_400_BAD_REQUEST
    else:
        logger.error("%s %s handler returned invalid response: %s", method, path, failure.message)
        code = status.HTTP_500_INTERNAL_SERVER_ERROR
    detail = ValidationFailureDetail.from_failure(failure)
    return HTTPException(status_code=code, detail=detail.model_dump(by_alias=True))


def register_validated_route(
    router: APIRouter | FastAPI,
    method: str,
    path: str,
    schemas: RouteSchemas,
    handler: Handler,
    *,
    registry: ValidatorRegistry | None = None,
) -> RouteValidators:
    """Add one route whose inputs and output are checked against ``schemas``.

    Schema references are bound to compiled validators here, so an unknown
    reference raises ``UnknownSchemaError`` at registration time. Requests run
    params, body, query, handler and response in that order and stop at the
    first failure: input failures answer 400, response failures answer 500.
    """

    method = method.upper()
    validators = schemas.bind(registry or default_registry())

    async def endpoint(request: Request) -> JSONResponse:
        params = dict(request.path_params)
        body = await _read_body(request, validators)
        if not body.ok:
            # Params are checked before the body even when the JSON does not parse.
            result = validators.params.check(Stage.PARAMS, params)
            if result.ok:
                result = body
        else:
            result = await run_pipeline_async(
                validators,
                handler,
                params=params,
                body=body.value,
                query=dict(request.query_params),
            )
        if not result.ok:
            raise _reject(result, method=method, path=path)
        return JSONResponse(content=result.value, status_code=status.HTTP_200_OK)

    name = getattr(handler, "__name__", "validated_endpoint")
    endpoint.__name__ = name
    endpoint.__doc__ = handler.__doc__
    router.add_api_route(
        path,
        endpoint,
        methods=[method],
        name=name,
        responses=_FAILURE_RESPONSES,
    )
    logger.info("Registered %s %s -> %s", method, path, name)
    return validators


def get(
    router: APIRouter | FastAPI,
    path: str,
    schemas: RouteSchemas,
    handler: Handler,
    **kwargs: Any,
) -> RouteValidators:
    return register_validated_route(router, "GET", path, schemas, handler, **kwargs)


def put(
    router: APIRouter | FastAPI,
    path: str,
    schemas: RouteSchemas,
    handler: Handler,
    **kwargs: Any,
) -> RouteValidators:
    return register_validated_route(router, "PUT", path, schemas, handler, **kwargs)


def post(
    router: APIRouter | FastAPI,
    path: str,
    schemas: RouteSchemas,
    handler: Handler,
    **kwargs: Any,
) -> RouteValidators:
    return register_validated_route(router, "POST", path, schemas, handler, **kwargs)


def patch(
    router: APIRouter | FastAPI,
    path: str,
    schemas: RouteSchemas,
    handler: Handler,
    **kwargs: Any,
) -> RouteValidators:
    return register_validated_route(router, "PATCH", path, schemas, handler, **kwargs)


def delete(
    router: APIRouter | FastAPI,
    path: str,
    schemas: RouteSchemas,
    handler: Handler,
    **kwargs: Any,
) -> RouteValidators:
    return register_validated_route(router, "DELETE", path, schemas, handler, **kwargs)
