"""
FastAPI app factory aggregating per-resource routers under eventhub/routes.
Run with `eventhub serve` or `uvicorn --factory eventhub.api:create_app`.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .db import Store, read_config_yaml
from .errors import StoreError
from .version import APP_NAME, __version__

logger = logging.getLogger(__name__)


def _error_message(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return "Invalid request: " + "; ".join(parts) if parts else "Invalid request."


def create_app(store: Store | None = None, cfg_path: str | None = None) -> FastAPI:
    """Build the app around an explicit Store; every handler reaches it through ``deps.get_store``."""
    store = store or Store(cfg_path=cfg_path)
    cfg = read_config_yaml(cfg_path)

    app = FastAPI(title=APP_NAME, version=__version__)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.get("cors_origins", ["*"]),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # malformed body or a non-scalar field: same client error as a missing field
        return JSONResponse(status_code=400, content={"error": _error_message(exc)})

    @app.on_event("startup")
    def on_startup():
        try:
            store.ensure_schema()
            store.ping()
            logger.info("Connected to SQLite database. (%s)", store.db_path)
        except StoreError as e:
            logger.error("Failed to connect to DB: %s", e)

    from .routes import events as events_routes
    from .routes import participants as participants_routes

    app.include_router(events_routes.router)
    app.include_router(participants_routes.router)
    return app
