"""schemaroute FastAPI application entrypoint."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from .api.schema import router as schema_router
from .api.todo import build_router as build_todo_router
from .core.registry import ValidatorRegistry
from .util.log import configure_logging
from .util.settings import Settings

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    registry = ValidatorRegistry.from_directory(settings.schema_dir)
    app = FastAPI(title="schemaroute", version="0.1.0")
    app.state.settings = settings
    app.state.registry = registry

    @app.on_event("startup")
    def _startup() -> None:
        logger.info("Listening on port %d", settings.port)

    app.include_router(build_todo_router(registry))
    if settings.expose_schemas:
        app.include_router(schema_router, prefix="/api")

    @app.get("/healthz")
    def healthcheck() -> dict[str, str]:
        """Basic health endpoint for readiness probes."""
        return {"status": "ok"}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = Settings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
