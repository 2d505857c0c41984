"""
Pydantic schemas for FastAPI responses that are specific to the API layer.

Meal, controls and outcome models live in mealbrowser.models and are used as
response models directly; this module only adds the service-level payloads.
"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""
    status: str = Field(..., description="'ok' whenever the endpoint is reachable")
    name: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    uptime_seconds: int = Field(..., ge=0, description="Seconds since the app started")
    provider_base_url: str = Field(..., description="Recipe catalog base URL in use")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "ok",
                "name": "MealDB Browser API",
                "version": "1.0.0",
                "uptime_seconds": 42,
                "provider_base_url": "https://www.themealdb.com/api/json/v1",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Shape of HTTPException bodies, used for OpenAPI documentation."""
    detail: str = Field(..., description="Human readable error message")
