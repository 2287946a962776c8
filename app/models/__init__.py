"""
Pydantic models for the Branch Content Engine.

This module contains all data models organized as:
- domain.py: Stance, content pairs and generation jobs
- requests.py: API request models
- responses.py: API response models
"""

from app.models.domain import (
    ContentPair,
    GenerationJob,
    Stance,
)
from app.models.requests import GenerateContentRequest
from app.models.responses import (
    ErrorResponse,
    GenerateContentResponse,
    HealthCheckResponse,
)

__all__ = [
    # Domain models
    "ContentPair",
    "GenerationJob",
    "Stance",
    # Request models
    "GenerateContentRequest",
    # Response models
    "ErrorResponse",
    "GenerateContentResponse",
    "HealthCheckResponse",
]
