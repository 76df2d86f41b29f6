"""Error handling framework."""

from .exceptions import (
    BaseApplicationError,
    ValidationError,
    DocumentExtractionError,
    LLMError,
    ServiceError,
)
from .handlers import (
    ErrorHandler,
    get_error_handler,
    handle_errors,
)

__all__ = [
    # Exceptions
    "BaseApplicationError",
    "ValidationError",
    "DocumentExtractionError",
    "LLMError",
    "ServiceError",
    # Handlers
    "ErrorHandler",
    "get_error_handler",
    "handle_errors",
]
