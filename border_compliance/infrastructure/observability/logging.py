"""Structured logging configuration with structlog.

Supports production (JSON) and development (console) output modes.

Log Entry Format (production):
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "anchor_submitted",
        "correlation_id": "uuid",
        "service": "ProofAnchoringService",
        ...additional context
    }

Usage:
    from border_compliance.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os
import sys
from typing import cast

import structlog
from structlog.typing import Processor

from border_compliance.application.observability.correlation import (
    correlation_id_processor,
)

# Environment variable for log level (default: WARNING keeps the console quiet)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"


def _get_log_level(level_name: str | None = None) -> int:
    """Resolve a log level name, falling back to the environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    name = (level_name or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    return getattr(logging, name, logging.WARNING)


def configure_structlog(
    environment: str = "production", level: str | None = None
) -> None:
    """Configure structlog for the application.

    Should be called once at startup. Logs go to stderr so they never
    interleave with operator prompts on stdout.

    Args:
        environment: 'production' for JSON output, 'development' for console.
        level: Log level name; defaults to LOG_LEVEL from the environment.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger_for_service(
    service_name: str, component: str = "compliance"
) -> structlog.BoundLogger:
    """Get a logger with service name and component already bound."""
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
