"""API middleware."""

from edufin.api.middleware.error_handler import ErrorHandlerMiddleware
from edufin.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
