"""API routes implementation."""

import logging

from fastapi import APIRouter, Request, HTTPException, Query, status
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    LinkInfoResponse,
    LinkListResponse,
    HealthResponse,
    ErrorResponse,
)
from shortlinks.database.models import ShortLink
from shortlinks.errors import ShortLinkError
from ..request_utils import short_url_for

router = APIRouter()

logger = logging.getLogger("shortlinks.api")


def _link_payload(request: Request, link: ShortLink) -> dict:
    return {
        "id": link.id,
        "short_code": link.short_code,
        "short_url": short_url_for(request, link.short_code),
        "original_url": link.original_url,
        "clicks": link.clicks,
        "created_at": link.created_at,
    }


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    summary="Create short URL",
    description="Create a shortened URL. The link is stored before the response is sent.",
)
async def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service

    try:
        link = await service.submit(body.url)
    except ShortLinkError as e:
        reason = e.details.get("reason")
        raise HTTPException(
            status_code=e.status_code,
            detail=f"{e.message} ({reason})" if reason else e.message,
        )
    except Exception as e:
        logger.error(f"Unexpected error shortening URL: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal error",
        )

    return ShortenResponse(**_link_payload(request, link))


@router.get(
    "/links",
    response_model=LinkListResponse,
    summary="List recent links",
    description="List recently created links, newest first.",
)
async def list_links(request: Request, limit: int = Query(50, ge=1, le=200)):
    """List recently created links."""
    service = request.app.state.service

    try:
        links = await service.list_recent_links(limit)
    except Exception as e:
        logger.error(f"Failed to list links: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service temporarily unavailable",
        )

    return LinkListResponse(
        count=len(links),
        links=[LinkInfoResponse(**_link_payload(request, link)) for link in links],
    )


@router.get(
    "/links/{short_code}",
    response_model=LinkInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
        503: {"model": ErrorResponse, "description": "Store unavailable"},
    },
    summary="Get link information",
    description="Get a link and its click count. Does not count as a click.",
)
async def get_link_info(request: Request, short_code: str):
    """Get information about a short link."""
    service = request.app.state.service

    try:
        link = await service.get_link(short_code)
    except Exception as e:
        logger.error(f"Failed to load link {short_code}: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service temporarily unavailable",
        )

    if not link:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short code '{short_code}' not found",
        )

    return LinkInfoResponse(**_link_payload(request, link))


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
async def health_check(request: Request):
    """Health check endpoint for monitoring."""
    service = request.app.state.service

    health = await service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        database="healthy" if health["database"] else "unhealthy",
        cache="healthy" if health["cache"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
