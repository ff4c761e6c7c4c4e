"""Greeting models"""

from pydantic import BaseModel, ConfigDict, Field


class GreetingResponse(BaseModel):
    """Response served for every path other than the health check"""
    model_config = ConfigDict(frozen=True)

    message: str = Field(description="Greeting text")
    version: str = Field(description="Service version")
    timestamp: str = Field(description="ISO-8601 UTC instant the request was handled")
