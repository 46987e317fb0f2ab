"""Serve JSON schema contracts."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from ..core.registry import ValidatorRegistry, default_registry
from ..util.schema import UnknownSchemaError

router = APIRouter(tags=["schema"])


def _registry(request: Request) -> ValidatorRegistry:
    return getattr(request.app.state, "registry", None) or default_registry()


@router.get("/schema/contracts")
async def list_schema_contracts(request: Request) -> dict[str, list[str]]:
    return {"schemas": _registry(request).names()}


@router.get("/schema/contracts/{name}")
async def get_schema_contract(request: Request, name: str) -> dict[str, Any]:
    try:
        return _registry(request).schema(name)
    except UnknownSchemaError as exc:
        raise HTTPException(status_code=404, detail="Schema not found") from exc
