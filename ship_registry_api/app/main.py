"""
Main entrypoint for the Ship Registry API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, so it can be served
with::

    uvicorn ship_registry_api.app.main:app --reload
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.errors import MalformedRequest, StorageError
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


async def malformed_request_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report unparseable bodies, query values and path ids as 400."""
    errors = jsonable_encoder(exc.errors()) if isinstance(exc, RequestValidationError) else str(exc)
    logger.info("Malformed request to %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": str(MalformedRequest()), "errors": errors},
    )


async def storage_error_handler(request: Request, exc: StorageError) -> JSONResponse:
    logger.error("Storage failure on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure"},
    )


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    Configures logging, registers the error handlers and mounts the
    versioned API routers.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.add_exception_handler(RequestValidationError, malformed_request_handler)
    app.add_exception_handler(MalformedRequest, malformed_request_handler)
    app.add_exception_handler(StorageError, storage_error_handler)

    app.include_router(v1_router, prefix="/api/v1")

    @app.on_event("startup")
    async def startup_event() -> None:
        if settings.storage_backend == "sqlite":
            init_db()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
