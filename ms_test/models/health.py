"""Health check models"""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Health check response"""
    model_config = ConfigDict(frozen=True)

    status: str = Field(description="Service status")
    service: str = Field(description="Service name")
