"""Request logging middleware.

Binds the request's correlation ID into the structlog context so every event
emitted through structlog while handling the request carries it.
"""

import time
from typing import Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from migration_planner.infrastructure.observability.logging import get_logger

logger = get_logger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log one event when a request arrives and one when it finishes.

    Analysis payloads can be large, so the request body size is logged
    alongside the status code and duration.
    """

    async def dispatch(
        self, request: Request, call_next: Callable
    ) -> Response:
        start_time = time.perf_counter()

        structlog.contextvars.bind_contextvars(
            correlation_id=getattr(request.state, "correlation_id", None),
            method=request.method,
            path=request.url.path,
        )

        logger.info(
            "Request received",
            client_ip=self._client_ip(request),
            request_bytes=int(request.headers.get("content-length") or 0),
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                duration_ms=self._elapsed_ms(start_time),
                error=str(e),
            )
            raise
        else:
            log = logger.warning if response.status_code >= 500 else logger.info
            log(
                "Request completed",
                status_code=response.status_code,
                duration_ms=self._elapsed_ms(start_time),
            )
            return response
        finally:
            structlog.contextvars.unbind_contextvars("correlation_id", "method", "path")

    @staticmethod
    def _elapsed_ms(start_time: float) -> float:
        return round((time.perf_counter() - start_time) * 1000, 2)

    @staticmethod
    def _client_ip(request: Request) -> str:
        """First X-Forwarded-For hop, else the socket peer."""
        forwarded_for = request.headers.get("X-Forwarded-For")
        if forwarded_for:
            return forwarded_for.split(",")[0].strip()
        return request.client.host if request.client else "unknown"
