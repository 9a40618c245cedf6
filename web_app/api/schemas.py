"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import List
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    url: str = Field(..., description="The absolute http/https URL to shorten")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://example.com/very/long/path/to/resource"},
            ]
        }
    }


class LinkInfoResponse(BaseModel):
    """A short link and its click count."""

    id: str = Field(..., description="Opaque link id")
    short_code: str = Field(..., description="The short code")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The original long URL")
    clicks: int = Field(..., ge=0, description="Number of redirects served")
    created_at: datetime = Field(..., description="Creation timestamp")


class ShortenResponse(LinkInfoResponse):
    """Response after shortening a URL."""

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "4f1c2a9e0b7d4c1f9a8e2d3c4b5a6978",
                    "short_code": "aB3xY9z",
                    "short_url": "https://short.link/aB3xY9z",
                    "original_url": "https://example.com/very/long/path",
                    "clicks": 0,
                    "created_at": "2024-01-01T12:00:00Z"
                }
            ]
        }
    }


class LinkListResponse(BaseModel):
    """Recently created links."""

    count: int
    links: List[LinkInfoResponse]


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    database: str = Field(..., description="Database status")
    cache: str = Field(..., description="Cache status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")
