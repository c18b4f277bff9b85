"""
Main entrypoint for the Posts API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn posts_api.app.main:app --port 8080

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .core.logging_config import setup_logging
from .core.store import init_store, store
from .api.v1.params import INVALID_BODY
from .api.v1.router import router as v1_router


def create_app() -> FastAPI:
    """Create and configure a FastAPI application.

    This function performs one‑time setup tasks such as configuring
    logging, installing the plain‑text error handlers and including
    versioned API routers.  It returns a fully configured FastAPI
    instance ready to be served.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the handlers
    # below can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    # Resources are served from the root (``/posts``) rather than under
    # a version prefix; existing clients address them there.
    app.include_router(v1_router)

    # Errors are plain text bodies, e.g. ``404 Post not found``.
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)

    # Request bodies that are not a JSON object are rejected outright
    # instead of being treated as an empty post.
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        return PlainTextResponse(INVALID_BODY, status_code=400)

    @app.on_event("startup")
    async def startup_event() -> None:
        # The store lives only in memory, so every start begins from
        # the sample data (or from nothing if seeding is disabled).
        init_store(seed=settings.seed_data)
        logger.info("Post store initialised with %d post(s)", len(store.list_posts()))

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
