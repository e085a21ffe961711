"""Uptime Scout middleware components."""

from uptime_scout.middleware.base import UptimeMiddleware
from uptime_scout.middleware.errors import ErrorHandlingMiddleware
from uptime_scout.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "UptimeMiddleware",
]
