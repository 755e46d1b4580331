"""
FastAPI REST API for the Error Query Builder

Converts natural-language error descriptions into Sentry, Datadog,
Elasticsearch and Splunk queries and keeps a short conversion history.

Run:
    uvicorn app.main:app --reload

Then visit:
    http://localhost:8000/docs
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

import config
from app.middleware.cors import get_cors_config, get_cors_headers
from app.routers import convert, health, history, platforms, validate
from core.database.session import build_engine, build_session_factory, init_db
from core.query_builder.engines import build_query_engine
from core.query_builder.service import QueryConversionService

logger = logging.getLogger(__name__)

API_VERSION = "2.0.0"


def _format_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Invalid request"


def create_app(settings: Optional[config.Settings] = None) -> FastAPI:
    """
    Build the API application.

    Args:
        settings: Explicit configuration; resolved from the environment when omitted
    """
    settings = settings or config.load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events"""
        config.setup_logging(settings)
        logger.info("Starting Error Query Builder API...")
        logger.info(config.get_config_summary(settings))

        config.ensure_sqlite_dir(settings.database_url)
        engine = build_engine(settings.database_url)
        await init_db(engine)

        app.state.db_engine = engine
        app.state.session_factory = build_session_factory(engine)
        if getattr(app.state, "conversion_service", None) is None:
            query_engine = build_query_engine(settings)
            app.state.conversion_service = QueryConversionService(query_engine)
            logger.info(f"Query engine: {query_engine.name}")

        yield

        logger.info("Shutting down Error Query Builder API...")
        await engine.dispose()

    app = FastAPI(
        title="Error Query Builder API",
        description="Natural-language to Sentry/Datadog/Elasticsearch/Splunk query conversion",
        version=API_VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.conversion_service = None

    app.add_middleware(CORSMiddleware, **get_cors_config(settings.cors_origins))

    if settings.enable_metrics:
        Instrumentator().instrument(app).expose(app)

    # Register routers
    app.include_router(health.router)
    app.include_router(platforms.router)
    app.include_router(convert.router)
    app.include_router(validate.router)
    app.include_router(history.router)

    @app.get("/", tags=["General"])
    async def root():
        """Root endpoint"""
        return {
            "message": "Error Query Builder API",
            "version": API_VERSION,
            "docs": "/docs",
            "health": "/api/health"
        }

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Render HTTPExceptions as {error: ...}"""
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail if isinstance(exc.detail, str) else str(exc.detail)},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Malformed bodies and query params are client errors"""
        return JSONResponse(
            status_code=400,
            content={"error": _format_validation_error(exc)},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions with CORS headers"""
        logger.error(f"Unhandled exception on {request.url.path}: {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
            headers=get_cors_headers(settings.cors_origins, request.headers.get("origin")),
        )

    return app


app = create_app()


# Run with: uvicorn app.main:app --reload
if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
