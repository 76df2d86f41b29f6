"""Error handling utilities and decorators."""

import asyncio
import traceback
from typing import Optional, Callable, Any, Dict
from functools import wraps

from .exceptions import BaseApplicationError, ServiceError
from utils.monitoring import get_logger, track_error

logger = get_logger(__name__)


class ErrorHandler:
    """
    Centralized error handling.

    Features:
    - Error logging
    - Error tracking
    - Bounded history for the health endpoint
    """

    def __init__(self):
        self.error_count = 0
        self.error_history: list = []
        self.max_history = 100

    def log_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None
    ):
        """
        Log error with context.

        Args:
            error: Exception to log
            context: Additional context
        """
        self.error_count += 1

        error_info = {
            "type": type(error).__name__,
            "message": str(error),
            "context": context or {},
            "traceback": "".join(
                traceback.format_exception(type(error), error, error.__traceback__)
            ),
        }

        self.error_history.append(error_info)
        if len(self.error_history) > self.max_history:
            self.error_history.pop(0)

        if isinstance(error, BaseApplicationError):
            # Client errors are expected traffic; keep the cause chain for the rest
            cause = error.__cause__ if error.status_code >= 500 else None
            logger.error(
                f"{error.error_code}: {error.message}",
                error=cause,
                error_code=error.error_code,
                status_code=error.status_code,
                details=error.details,
                request=context,
            )
        else:
            logger.error(
                f"{type(error).__name__}: {str(error)}",
                error=error,
                request=context,
            )

        track_error(type(error).__name__)

    def get_stats(self) -> Dict[str, Any]:
        """Get error statistics."""
        error_types = {}
        for error in self.error_history:
            error_type = error["type"]
            error_types[error_type] = error_types.get(error_type, 0) + 1

        return {
            "total_errors": self.error_count,
            "recent_errors": len(self.error_history),
            "error_types": error_types,
        }


# Global error handler
_global_handler: Optional[ErrorHandler] = None


def get_error_handler() -> ErrorHandler:
    """Get or create global error handler."""
    global _global_handler
    if _global_handler is None:
        _global_handler = ErrorHandler()
    return _global_handler


def handle_errors(message: str):
    """
    Decorator that turns unexpected failures in an endpoint into a
    ServiceError carrying a generic, caller-safe message.

    Client errors (status below 500) pass through unchanged so their own
    status code and message reach the caller. Server-side application
    errors are wrapped like any other failure.

    Usage:
        @router.post("/evaluate")
        @handle_errors("Failed to evaluate quiz.")
        async def evaluate(...):
            ...
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def async_wrapper(*args, **kwargs) -> Any:
            try:
                return await func(*args, **kwargs)
            except BaseApplicationError as e:
                if e.status_code >= 500:
                    raise ServiceError(message, operation=func.__name__) from e
                raise
            except Exception as e:
                raise ServiceError(message, operation=func.__name__) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except BaseApplicationError as e:
                if e.status_code >= 500:
                    raise ServiceError(message, operation=func.__name__) from e
                raise
            except Exception as e:
                raise ServiceError(message, operation=func.__name__) from e

        return async_wrapper if asyncio.iscoroutinefunction(func) else sync_wrapper

    return decorator
