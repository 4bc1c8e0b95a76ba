"""Main application module.

This module builds the FastAPI application: routes, middleware, exception
handlers, static files, and the lifespan that owns the code store.
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from loguru import logger

from urlshortener.api import build_api_router
from urlshortener.core.config import Settings, StoreBackend, settings as default_settings
from urlshortener.core.logging import setup_logging
from urlshortener.db.base import Database
from urlshortener.middleware.logging import RequestLoggingMiddleware
from urlshortener.store.base import CodeStore
from urlshortener.store.codes import ShortCodeGenerator
from urlshortener.store.memory import InMemoryCodeStore
from urlshortener.store.sql import SQLCodeStore


async def build_store(app_settings: Settings) -> CodeStore:
    """Create the code store selected by STORE_BACKEND, ready for use."""
    generator = ShortCodeGenerator(
        length=app_settings.URL_CODE_LENGTH,
        alphabet=app_settings.URL_CODE_ALPHABET,
    )
    if app_settings.STORE_BACKEND == StoreBackend.MEMORY:
        logger.warning("Using the in-memory store: mappings are lost on restart")
        return InMemoryCodeStore(generator=generator, max_attempts=app_settings.URL_CODE_MAX_ATTEMPTS)

    database = Database.from_settings(app_settings)
    try:
        await database.connect()
    except Exception:
        await database.dispose()
        raise
    return SQLCodeStore(database, generator=generator, max_attempts=app_settings.URL_CODE_MAX_ATTEMPTS)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Acquire the store at startup and release it at shutdown."""
    app_settings: Settings = app.state.settings
    logger.info(f"Starting {app_settings.APP_NAME} v{app_settings.APP_VERSION}")
    logger.info(f"Environment: {app_settings.ENVIRONMENT.value}")
    logger.info(f"Store backend: {app_settings.STORE_BACKEND.value}")

    store = await build_store(app_settings)
    app.state.store = store
    try:
        yield
    finally:
        logger.info(f"Shutting down {app_settings.APP_NAME}")
        await store.close()


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Build the application for the given settings (module settings by default)."""
    app_settings = app_settings or default_settings
    setup_logging(app_settings)

    app = FastAPI(
        title=app_settings.APP_NAME,
        description=app_settings.APP_DESCRIPTION,
        version=app_settings.APP_VERSION,
        docs_url="/docs" if app_settings.DEBUG else None,
        redoc_url="/redoc" if app_settings.DEBUG else None,
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    if app_settings.REQUEST_LOGGING_ENABLED:
        app.add_middleware(RequestLoggingMiddleware)

    static_dir = app_settings.STATIC_DIR
    index_file = static_dir / "index.html"

    @app.get("/", include_in_schema=False)
    async def index():
        if not index_file.is_file():
            return JSONResponse(status_code=404, content={"detail": "Not Found"})
        return FileResponse(index_file)

    app.include_router(build_api_router(app_settings))

    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
    else:
        logger.warning(f"Static directory {static_dir} not found, front-end disabled")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors with detailed information."""
        logger.info(f"Request validation error: {exc}")
        field_errors = {}
        for error in exc.errors():
            field = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
            field_errors.setdefault(field or "body", []).append(error.get("msg", "invalid"))
        return JSONResponse(
            status_code=422,
            content={"detail": "Validation error", "field_errors": field_errors}
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler to catch and log all unhandled exceptions."""
        error_id = f"error-{time.time()}"
        logger.bind(
            error_id=error_id,
            url=str(request.url),
            method=request.method,
        ).opt(exception=exc).error(f"Unhandled exception in {request.method} {request.url.path}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error occurred",
                "error_id": error_id,
                "message": str(exc) if app_settings.DEBUG else "Internal server error"
            }
        )

    return app


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "urlshortener.main:create_app",
        factory=True,
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_config=None,
    )
