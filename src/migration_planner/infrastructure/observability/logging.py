"""structlog setup for the migration planner.

Events are rendered once, at the end of a shared processor chain, so the
API's structured loggers and the domain services' stdlib loggers produce the
same output. Dependency expressions are raw component markup and are
shortened before rendering.
"""

import logging
import sys
from typing import Any

import structlog
from opentelemetry import trace

from migration_planner.infrastructure.config import get_settings

MAX_LOG_VALUE_LENGTH = 200

EventDict = dict[str, Any]


def configure_logging() -> None:
    """Install the processor chain and route stdlib logging to stdout.

    The level, renderer (JSON or console) and service name come from
    ObservabilitySettings. Safe to call more than once.
    """
    observability = get_settings().observability

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, observability.log_level.upper()),
    )

    structlog.configure(
        processors=_processors(json_output=observability.log_json_format),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def _processors(json_output: bool) -> list:
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    return [
        # Request context bound by LoggingMiddleware
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_trace_context,
        _add_service_context,
        _truncate_long_values,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        renderer,
    ]


def _add_trace_context(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Attach trace_id/span_id when an OpenTelemetry span is active."""
    span_context = trace.get_current_span().get_span_context()
    if span_context.is_valid:
        event_dict["trace_id"] = format(span_context.trace_id, "032x")
        event_dict["span_id"] = format(span_context.span_id, "016x")
    return event_dict


def _add_service_context(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Bind the service name and environment to every event."""
    settings = get_settings()
    event_dict.setdefault("service", settings.observability.service_name)
    event_dict.setdefault("environment", settings.environment)
    return event_dict


def _truncate_long_values(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Shorten string values longer than MAX_LOG_VALUE_LENGTH.

    Nested dicts are walked as well. The event message itself is left intact.
    """

    def truncate(value: Any) -> Any:
        if isinstance(value, str) and len(value) > MAX_LOG_VALUE_LENGTH:
            return f"{value[:MAX_LOG_VALUE_LENGTH]}...({len(value)} chars)"
        if isinstance(value, dict):
            return {k: truncate(v) for k, v in value.items()}
        return value

    return {k: v if k == "event" else truncate(v) for k, v in event_dict.items()}


def get_logger(name: str) -> structlog.BoundLogger:
    """Structured logger for an infrastructure module, e.g. get_logger(__name__)."""
    return structlog.get_logger(name)
