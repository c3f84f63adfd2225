"""Request DTOs for API endpoints."""

from pydantic import BaseModel, Field


class ShortenUrlRequest(BaseModel):
    """Request DTO for shortening a URL."""

    url: str = Field(..., description="Absolute URL to shorten", min_length=1)
