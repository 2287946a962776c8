"""
API Response Models for the Branch Content Engine endpoints.

Job payloads are returned as GenerationJob directly (camelCase JSON).
"""

from datetime import datetime, timezone
from typing import Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class GenerateContentResponse(BaseModel):
    """Response model for a successful generation."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(
        default="Content generated successfully.",
        description="Human-readable status message",
    )
    job_id: str = Field(..., alias="jobId", description="ID of the stored job")


class HealthCheckResponse(BaseModel):
    """Response model for health check endpoint."""

    status: Literal["healthy", "degraded", "unhealthy"] = Field(
        ..., description="Overall health status"
    )
    service: str = Field(
        default="branch-content-engine",
        description="Service name",
    )
    version: str = Field(..., description="API version")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Health check timestamp",
    )
    dependencies: Optional[Dict[str, bool]] = Field(
        None,
        description="Status of external dependencies",
    )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., description="Human-readable error message")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "An internal server error occurred.",
            }
        }
    )
