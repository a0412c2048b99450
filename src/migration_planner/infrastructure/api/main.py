"""
FastAPI application entry point.

Implements the API layer of the Infrastructure following Clean Architecture.
This module sets up the FastAPI app, registers routes, middleware, and exception handlers.
"""

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from migration_planner import __version__
from migration_planner.infrastructure.observability import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.

    Startup:
    - Configure observability (structured logging)
    """
    configure_logging()
    logger.info("Migration planner API started", version=__version__)

    yield

    logger.info("Migration planner API stopped")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title="LWC Migration Planner API",
        description=(
            "Dependency analysis for Aura components and Visualforce pages: "
            "builds the component dependency graph, detects circular "
            "dependencies and plans the order of conversion to Lightning Web "
            "Components."
        ),
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware (should be first)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,  # Cannot use credentials with wildcard origins
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Custom middleware (order matters: last added = first executed)
    from .middleware.error_handler import (
        ErrorHandlerMiddleware,
        get_status_text,
        problem_response,
    )
    from .middleware.logging_middleware import LoggingMiddleware

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)  # Outermost: assigns correlation IDs

    # Register routes
    from .routes import dependencies, health

    app.include_router(health.router, prefix="/api/v1")
    app.include_router(
        dependencies.router,
        prefix="/api/v1/dependency-graph",
        tags=["Dependency Graph"],
    )

    # Register exception handlers for proper RFC 7807 format
    from .schemas.error_schema import ProblemDetails

    def _correlation_id(request: Request) -> str:
        return getattr(request.state, "correlation_id", None) or str(uuid.uuid4())

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Convert HTTPException to RFC 7807 Problem Details."""
        problem = ProblemDetails(
            type="about:blank",
            title=get_status_text(exc.status_code),
            status=exc.status_code,
            detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
            instance=request.url.path,
            correlation_id=_correlation_id(request),
            suggestions=getattr(exc, "suggestions", None),
        )
        return problem_response(problem)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Convert Pydantic validation errors to RFC 7807 Problem Details."""
        problem = ProblemDetails(
            type="about:blank",
            title="Unprocessable Entity",
            status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Validation failed: {exc.errors()}",
            instance=request.url.path,
            correlation_id=_correlation_id(request),
        )
        return problem_response(problem)

    # Root endpoint
    @app.get("/", status_code=status.HTTP_200_OK)
    async def root():
        """Root endpoint - API information."""
        return {
            "name": "LWC Migration Planner API",
            "version": __version__,
            "status": "operational",
            "docs": "/docs",
        }

    return app


# Create app instance
app = create_app()
