"""API middleware package."""

from skillpath.api.middleware.error_handler import (
    create_error_response,
    setup_exception_handlers,
)
from skillpath.api.middleware.logging import RequestLoggingMiddleware, setup_logging

__all__ = [
    "RequestLoggingMiddleware",
    "create_error_response",
    "setup_exception_handlers",
    "setup_logging",
]
