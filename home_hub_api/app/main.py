"""
Main entrypoint for the Smart Home Hub API.

This module assembles the FastAPI application: logging, permissive
CORS, error envelopes, the JSON API under ``/api``, the three HTML
pages and a static files mount for the rest of the site.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn home_hub_api.app.main:app --port 3000

All records live in a ``RecordStore`` attached to ``app.state``;
they are lost when the process exits.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.endpoints import pages
from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.errors import ServiceError
from .core.logging_config import setup_logging
from .core.store import RecordStore
from .schemas.common import envelope

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"]
PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": ", ".join(CORS_METHODS),
    "Access-Control-Allow-Headers": ", ".join(CORS_HEADERS),
}


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=envelope(exc.message, success=False))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content=envelope("Invalid request body", success=False))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope(str(exc.detail), success=False),
        headers=getattr(exc, "headers", None),
    )


def create_app(store: Optional[RecordStore] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[RecordStore]
        Record store to serve.  A new empty store is created when
        omitted.
    app_settings : Optional[Settings]
        Settings override; defaults to the environment derived
        ``settings`` instance.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.store = store if store is not None else RecordStore()
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    # Added after CORSMiddleware so it runs first: every OPTIONS request
    # is answered here, whether or not it carries CORS request headers.
    @app.middleware("http")
    async def answer_options(request: Request, call_next):
        if request.method == "OPTIONS":
            return Response(status_code=200, headers=PREFLIGHT_HEADERS)
        return await call_next(request)

    app.add_exception_handler(ServiceError, service_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)

    app.include_router(api_router, prefix="/api")
    app.include_router(pages.router)

    # Registered last so API routes and pages take precedence.
    if app_settings.static_root.is_dir():
        app.mount("/", StaticFiles(directory=app_settings.static_root), name="static")
    else:
        logger.warning("Static root %s does not exist; static files disabled", app_settings.static_root)

    @app.on_event("startup")
    async def startup_event() -> None:
        logger.info("Storage: in-memory (data persists until server restart)")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
