"""FastAPI application factory and configuration.

This module creates the FastAPI application with its middleware, routes,
exception handlers and lifecycle. The lifespan owns the database manager:
it is created and probed at startup, exposed as ``app.state.db``, and
disposed at shutdown.
"""

import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dailyforms.core.config import Settings, get_settings
from dailyforms.core.exceptions import (
    ConstraintViolationError,
    DailyFormsError,
    InvalidInputError,
    ValidationFailure,
    NotFoundError,
    QuotaExceededError,
    StorageError,
    UnknownFieldError,
)
from dailyforms.core.logging import bind_correlation_id, clear_context, configure_logging, get_logger
from dailyforms.infrastructure.persistence.database import DatabaseManager

logger = get_logger(__name__)

ERROR_STATUS_CODES: dict[type[DailyFormsError], int] = {
    InvalidInputError: 400,
    UnknownFieldError: 400,
    NotFoundError: 404,
    QuotaExceededError: 409,
    ConstraintViolationError: 409,
    StorageError: 503,
}


def status_code_for(exc: DailyFormsError) -> int:
    """Map a classified error to its HTTP status code."""
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return 500


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Startup never fails on an unreachable database; requests fail with 503
    until it recovers.
    """
    settings = get_settings()
    configure_logging(settings)

    logger.info(
        "Starting DailyForms",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
    )

    db = DatabaseManager(settings)
    app.state.db = db
    await db.connect()

    yield

    logger.info("Shutting down DailyForms")
    await db.disconnect()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional settings; loaded from the environment if omitted.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Daily form-based data collection",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_health_check(app)
    register_routes(app, settings)
    register_exception_handlers(app)
    register_middleware(app)

    return app


def register_health_check(app: FastAPI) -> None:
    """Register liveness and readiness endpoints."""

    @app.get("/health", tags=["health"])
    async def health_check():
        """Liveness check: the process is up. Does not touch the database."""
        return {"status": "healthy", "service": "DailyForms", "version": get_settings().app_version}

    @app.get("/ready", tags=["health"])
    async def readiness_check(request: Request):
        """Readiness check: probes the database."""
        db: DatabaseManager = request.app.state.db
        if await db.check_connection():
            return {"status": "ready", "database": "connected"}
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "database": "disconnected"},
        )


def register_routes(app: FastAPI, settings: Settings) -> None:
    """Register API routes."""
    from dailyforms.infrastructure.api.routes import collectors_router, entries_router

    app.include_router(
        collectors_router, prefix=f"{settings.api_prefix}/collectors", tags=["collectors"]
    )
    app.include_router(entries_router, prefix=f"{settings.api_prefix}/entries", tags=["entries"])


def register_exception_handlers(app: FastAPI) -> None:
    """Translate classified core errors to JSON responses."""

    @app.exception_handler(DailyFormsError)
    async def dailyforms_error_handler(request: Request, exc: DailyFormsError):
        status_code = status_code_for(exc)
        log = logger.error if status_code >= 500 else logger.info
        log(
            "Request failed",
            path=str(request.url.path),
            method=request.method,
            status_code=status_code,
            code=exc.code,
            error=exc.message,
        )
        return JSONResponse(status_code=status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        failures = [
            ValidationFailure(
                field=".".join(str(part) for part in error["loc"]),
                message=error["msg"],
                code="invalid_input",
            )
            for error in exc.errors()
        ]
        error = InvalidInputError("Malformed request", code="invalid_input", errors=failures)
        logger.info(
            "Request rejected",
            path=str(request.url.path),
            method=request.method,
            status_code=400,
            errors=len(failures),
        )
        return JSONResponse(status_code=400, content=error.to_dict())


def register_middleware(app: FastAPI) -> None:
    """Register request logging with correlation IDs."""

    @app.middleware("http")
    async def logging_middleware(request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", f"cid_{uuid.uuid4().hex[:12]}")
        bind_correlation_id(correlation_id)
        logger.info("Request started", method=request.method, path=str(request.url.path))
        try:
            response = await call_next(request)
            logger.info(
                "Request completed",
                method=request.method,
                path=str(request.url.path),
                status_code=response.status_code,
            )
            response.headers["X-Correlation-ID"] = correlation_id
            return response
        finally:
            clear_context()


app = create_app()
