"""API middleware components.

This module contains middleware for error handling, request logging,
and other cross-cutting concerns.
"""

from .error_handler import ErrorHandlerMiddleware
from .logging_middleware import LoggingMiddleware

__all__ = [
    "ErrorHandlerMiddleware",
    "LoggingMiddleware",
]
