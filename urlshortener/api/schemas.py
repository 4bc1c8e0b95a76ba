"""API request and response schemas.

This module contains Pydantic models for API request validation
and response serialization.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


class URLCreateRequest(BaseModel):
    """Request schema for creating a shortened URL.

    The URL is an opaque string; only blank input is rejected.
    """
    url: str = Field(..., min_length=1)

    @field_validator("url")
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("url must not be blank")
        return v


class URLResponse(BaseModel):
    """Response schema for URL information."""
    short_code: str
    original_url: str
    short_url: str  # Full URL including base domain


class HealthComponent(BaseModel):
    status: str
    latency_ms: Optional[float] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    timestamp: float
    components: Dict[str, HealthComponent]


class ErrorResponse(BaseModel):
    """Response schema for errors."""
    detail: str
    field_errors: Optional[Dict[str, List[str]]] = None
