"""Observability infrastructure: structlog configuration.

Usage:
    from border_compliance.infrastructure.observability import configure_structlog

    configure_structlog(environment="development")
"""

from border_compliance.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "configure_structlog",
    "get_logger_for_service",
]
