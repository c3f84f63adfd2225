"""Data Transfer Objects for API contracts.

These Pydantic models define the JSON side of the HTTP surface. Helpers
themselves are only reachable from templates.
"""

from .requests import ShortenUrlRequest
from .responses import HealthCheckResponse, HelperListResponse, ShortenUrlResponse

__all__ = [
    "ShortenUrlRequest",
    "HealthCheckResponse",
    "HelperListResponse",
    "ShortenUrlResponse",
]
