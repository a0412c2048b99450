"""Observability infrastructure module.

Provides structured logging with OpenTelemetry trace correlation.
"""

from migration_planner.infrastructure.observability.logging import (
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
]
