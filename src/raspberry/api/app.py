"""FastAPI application factory.

- Validates inputs, reads/writes DB
- Returns JSON payloads
- Forbidden: interval computation beyond calling the aggregator
"""

from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, Generator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from raspberry.config import Settings, configure_logging
from raspberry.db.repo import DbSession
from raspberry.db.session import get_db_session as session_scope
from raspberry.db.session import get_session, init_db
from raspberry.ingest.movielist import seed_catalog
from raspberry.models.domain import IntervalInvariantError
from raspberry.models.types import HealthStatus

logger = logging.getLogger(__name__)


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(request.app.state.settings.db_path)
    try:
        yield session
    finally:
        session.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables and load the movie list on startup."""
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    logger.info("Starting Golden Raspberry Awards API...")

    init_db(settings.db_path)

    if settings.csv_path is not None:
        if settings.csv_path.exists():
            with session_scope(settings.db_path) as session:
                seed_catalog(session, settings.csv_path)
        else:
            logger.warning(f"Movie list not found at {settings.csv_path}, starting empty")

    logger.info(f"Environment: {settings.environment}")
    yield
    logger.info("Shutting down")


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "Validation failed: " + "; ".join(parts)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional settings. Defaults to Settings.from_env().

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title="Golden Raspberry Awards API",
        description="Worst Picture nominees and producer award intervals",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Tag each request with a correlation ID and log its outcome."""
        correlation_id = str(uuid.uuid4())
        request.state.correlation_id = correlation_id
        started = time.perf_counter()

        logger.debug(f"[{correlation_id}] {request.method} {request.url.path}")
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                f"[{correlation_id}] Unhandled API error on {request.method} {request.url.path}"
            )
            response = JSONResponse(
                status_code=500,
                content={"detail": "Internal server error", "correlation_id": correlation_id},
            )

        duration_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"[{correlation_id}] {request.method} {request.url.path} - "
            f"{response.status_code} ({duration_ms:.1f}ms)"
        )
        response.headers["X-Correlation-ID"] = correlation_id
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": _format_validation_errors(exc)})

    @app.exception_handler(IntervalInvariantError)
    async def interval_error_handler(request: Request, exc: IntervalInvariantError):
        logger.error(f"Interval invariant violated on {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    # Include routes
    from raspberry.api.routes import movies, producers

    app.include_router(movies.router, prefix="/api")
    app.include_router(producers.router, prefix="/api")

    # Health check endpoint
    @app.get("/health", response_model=HealthStatus)
    def health_check() -> HealthStatus:
        """Health check endpoint."""
        return HealthStatus(
            status="healthy",
            uptime=int(time.monotonic() - app.state.started_at),
            timestamp=datetime.now(timezone.utc).isoformat(),
            environment=settings.environment,
        )

    return app


# Default app instance
app = create_app()
