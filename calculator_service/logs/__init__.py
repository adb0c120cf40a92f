"""Logging module - structlog configuration and request logging."""

from .setup import configure_logging, add_service_name
from .middleware import RequestLoggingMiddleware


__all__ = [
    "configure_logging",
    "add_service_name",
    "RequestLoggingMiddleware",
]
