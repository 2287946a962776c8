"""
Utility modules for the Branch Content Engine.

Contains:
- logging: Structured logging setup
- exceptions: Custom exception classes
- gemini_client: Google AI client wrapper
"""

from app.utils.exceptions import (
    ContentEngineError,
    GenerationError,
    ResponseParseError,
    ContentValidationError,
    StoreError,
    ConfigurationError,
)
from app.utils.logging import setup_logging, get_logger

__all__ = [
    # Exceptions
    "ContentEngineError",
    "GenerationError",
    "ResponseParseError",
    "ContentValidationError",
    "StoreError",
    "ConfigurationError",
    # Logging
    "setup_logging",
    "get_logger",
]
