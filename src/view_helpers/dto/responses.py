"""Response DTOs for API endpoints."""

from pydantic import BaseModel, Field


class ShortenUrlResponse(BaseModel):
    """Response DTO for URL shortening."""

    url: str = Field(..., description="The URL as submitted")
    short_url: str = Field(..., description="The shortened URL (same as url when shortening is off)")


class HelperListResponse(BaseModel):
    """Response DTO listing the helpers templates can call."""

    helpers: list[str] = Field(..., description="Registered helper names")
    aliases: dict[str, str] = Field(
        default_factory=dict,
        description="Template alias -> helper name",
    )


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    url_shortener: str = Field(..., description="Configured URL shortener mode")
    shortener_healthy: bool | None = Field(
        None,
        description="Whether the short link store is reachable (None when not applicable)",
    )
