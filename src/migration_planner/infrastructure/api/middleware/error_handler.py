"""Global error handling middleware.

Converts all exceptions to RFC 7807 Problem Details format for consistent error responses.
Includes correlation IDs for request tracing.
"""

import uuid

from fastapi import Request, status
from fastapi.exceptions import HTTPException
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from migration_planner.infrastructure.api.schemas.error_schema import ProblemDetails
from migration_planner.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)

STATUS_TEXTS = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    422: "Unprocessable Entity",
    500: "Internal Server Error",
    503: "Service Unavailable",
}


def get_status_text(status_code: int) -> str:
    """Get human-readable status text for HTTP status code.

    Args:
        status_code: HTTP status code

    Returns:
        Status text (e.g., "Not Found" for 404)
    """
    return STATUS_TEXTS.get(status_code, "Error")


def problem_response(problem: ProblemDetails) -> JSONResponse:
    """Create JSONResponse from ProblemDetails.

    Args:
        problem: Problem Details object

    Returns:
        JSONResponse with appropriate status code and headers
    """
    return JSONResponse(
        status_code=problem.status,
        content=problem.model_dump(exclude_none=True),
        media_type="application/problem+json",
        headers={"X-Correlation-ID": problem.correlation_id or ""},
    )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Middleware to handle all exceptions and return RFC 7807 Problem Details."""

    async def dispatch(self, request: Request, call_next):
        """Catch all exceptions and convert to Problem Details format.

        Args:
            request: Incoming HTTP request
            call_next: Next middleware/handler in chain

        Returns:
            Response with Problem Details format on error
        """
        correlation_id = request.headers.get("X-Correlation-ID") or str(uuid.uuid4())
        request.state.correlation_id = correlation_id

        try:
            response = await call_next(request)
            response.headers["X-Correlation-ID"] = correlation_id
            return response

        except Exception as exc:
            logger.error(
                "Request failed",
                correlation_id=correlation_id,
                path=request.url.path,
                method=request.method,
                exc_info=exc,
            )

            problem = self._exception_to_problem(exc, request, correlation_id)
            return problem_response(problem)

    def _exception_to_problem(
        self, exc: Exception, request: Request, correlation_id: str
    ) -> ProblemDetails:
        """Convert exception to RFC 7807 Problem Details.

        Args:
            exc: Exception that was raised
            request: Request that caused the exception
            correlation_id: Correlation ID for tracing

        Returns:
            ProblemDetails object
        """
        if isinstance(exc, HTTPException):
            return ProblemDetails(
                type="about:blank",
                title=get_status_text(exc.status_code),
                status=exc.status_code,
                detail=exc.detail if isinstance(exc.detail, str) else str(exc.detail),
                instance=request.url.path,
                correlation_id=correlation_id,
            )

        if isinstance(exc, ValueError):
            return ProblemDetails(
                type="https://httpstatuses.com/400",
                title="Bad Request",
                status=status.HTTP_400_BAD_REQUEST,
                detail=str(exc),
                instance=request.url.path,
                correlation_id=correlation_id,
            )

        return ProblemDetails(
            type="https://httpstatuses.com/500",
            title="Internal Server Error",
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred",
            instance=request.url.path,
            correlation_id=correlation_id,
        )


class ComponentNotFoundError(HTTPException):
    """404 for a component identifier that resolves to nothing in the graph."""

    def __init__(self, target: str, suggestions: list[str] | None = None):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Component '{target}' not found",
        )
        self.target = target
        self.suggestions = suggestions or []
