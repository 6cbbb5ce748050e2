"""Shared logging utilities for FastAPI applications."""

import logging

from common import settings


class HealthCheckFilter(logging.Filter):
    """Filter out health check requests from uvicorn access logs."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Return False to suppress health check log entries."""
        return '/health' not in record.getMessage()


def configure_logging(level: str | None = None) -> None:
    """Configure root logging and suppress health checks in uvicorn access logs.

    Args:
        level: Log level name; defaults to ``settings.LOG_LEVEL``.
    """
    logging.basicConfig(level=level or settings.LOG_LEVEL)
    access_logger = logging.getLogger('uvicorn.access')
    if not any(isinstance(f, HealthCheckFilter) for f in access_logger.filters):
        access_logger.addFilter(HealthCheckFilter())
