"""System API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="API status")
    version: str = Field(..., description="API version")
    deepl_configured: bool = Field(..., description="Whether a DeepL auth key is set")
