"""
Custom exceptions for the Branch Content Engine.

Provides a hierarchy of exceptions for different error scenarios:
- ContentEngineError: Base exception for all custom errors
- GenerationError: The generative model call failed or returned nothing
- ResponseParseError: No usable JSON object in the model output
- ContentValidationError: JSON found but not in the required shape
- StoreError: Redis read/write failures
- ConfigurationError: Missing or invalid configuration
"""

from typing import Any, Dict, Optional


class ContentEngineError(Exception):
    """
    Base exception for all Branch Content Engine errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "CONTENT_ENGINE_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# =============================================================================
# Generation Errors
# =============================================================================


class GenerationError(ContentEngineError):
    """Raised when the generative model call fails or yields no text."""

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.model_name = model_name
        super().__init__(
            message=f"Content generation failed: {message}",
            code="GENERATION_ERROR",
            details={"model_name": model_name, **(details or {})},
        )


class ResponseParseError(ContentEngineError):
    """
    Raised when the model output contains no parsable JSON object.

    The raw response is kept so it can be logged for inspection.
    """

    def __init__(
        self,
        message: str,
        raw_response: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.raw_response = raw_response
        super().__init__(
            message=message,
            code="RESPONSE_PARSE_ERROR",
            details=details,
        )


class ContentValidationError(ContentEngineError):
    """Raised when parsed model output does not match the required format."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.field = field
        super().__init__(
            message=message,
            code="CONTENT_VALIDATION_ERROR",
            details={"field": field, **(details or {})},
        )


# =============================================================================
# Infrastructure Errors
# =============================================================================


class StoreError(ContentEngineError):
    """Raised when a key-value store operation fails."""

    def __init__(
        self,
        operation: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.operation = operation
        super().__init__(
            message=f"Store {operation} failed: {message}",
            code="STORE_ERROR",
            details={"operation": operation, **(details or {})},
        )


class ConfigurationError(ContentEngineError):
    """Raised when configuration is invalid or missing."""

    def __init__(
        self,
        config_key: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.config_key = config_key
        super().__init__(
            message=f"Configuration error for '{config_key}': {message}",
            code="CONFIGURATION_ERROR",
            details={"config_key": config_key, **(details or {})},
        )
