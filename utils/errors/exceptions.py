"""Custom exception classes with detailed error information."""

from typing import Optional, Dict, Any
from datetime import datetime, timezone


class BaseApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize base error.

        Args:
            message: Short, caller-safe error message
            error_code: Machine-readable error code (logged, not returned)
            status_code: HTTP status code
            details: Additional error details (logged, not returned)
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Response body for the caller; internals stay in the logs."""
        return {"error": self.message}


class ValidationError(BaseApplicationError):
    """Client input error."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        **kwargs
    ):
        super().__init__(
            message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            **kwargs
        )
        self.details["field"] = field


class DocumentExtractionError(BaseApplicationError):
    """Uploaded document could not be turned into text."""

    def __init__(
        self,
        message: str,
        file_name: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, error_code="DOCUMENT_EXTRACTION_ERROR", **kwargs)
        self.details["file_name"] = file_name


class LLMError(BaseApplicationError):
    """Generative-language API error."""

    def __init__(
        self,
        message: str,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, error_code="LLM_ERROR", **kwargs)
        self.details["provider"] = provider
        self.details["model"] = model


class ServiceError(BaseApplicationError):
    """Unexpected failure inside an endpoint, reported with a generic message."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, error_code="SERVICE_ERROR", **kwargs)
        self.details["operation"] = operation
