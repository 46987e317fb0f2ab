"""Todo editing endpoint."""
from __future__ import annotations

from typing import Any, NotRequired, TypedDict

from fastapi import APIRouter

from ..core.pipeline import RouteSchemas
from ..core.registry import ValidatorRegistry
from ..core.routing import put


class EditTodoParams(TypedDict):
    id: str


class EditTodoReqBody(TypedDict):
    message: str
    completed: NotRequired[bool]


class EditTodoResBody(TypedDict):
    id: str
    message: str
    completed: bool


def edit_todo(params: EditTodoParams, body: EditTodoReqBody, query: Any) -> EditTodoResBody:
    """Echo the todo back with its completion flag flipped."""

    return {
        "id": params["id"],
        "message": body["message"],
        "completed": not body.get("completed", False),
    }


def build_router(registry: ValidatorRegistry | None = None) -> APIRouter:
    """Router carrying ``PUT /todo/{id}`` bound against ``registry``."""

    router = APIRouter(tags=["todo"])
    put(
        router,
        "/todo/{id}",
        RouteSchemas(params=EditTodoParams, body=EditTodoReqBody, response=EditTodoResBody),
        edit_todo,
        registry=registry,
    )
    return router
