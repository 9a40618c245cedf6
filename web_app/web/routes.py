"""Web interface routes implementation."""

import logging
import os
from typing import Optional

from fastapi import APIRouter, Request, Form, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from shortlinks.errors import ShortLinkError, InvalidCodeError, LinkNotFoundError
from .state import COOKIE_NAME, RecentLinks, remember, build_link_rows
from ..request_utils import request_base_url, short_url_for

router = APIRouter()

logger = logging.getLogger("shortlinks.web")

template_dir = os.path.join(os.path.dirname(__file__), "..", "templates")
templates = Jinja2Templates(directory=template_dir)

COOKIE_MAX_AGE = 60 * 60 * 24 * 365
UNAVAILABLE_MESSAGE = "Service temporarily unavailable. Please try again."


def _recent_links(request: Request) -> RecentLinks:
    config = request.app.state.config
    return RecentLinks.from_cookie(request.cookies.get(COOKIE_NAME, ""), limit=config.recent_links_limit)


async def _render_home(request: Request, notice: Optional[str] = None, url_value: str = "", status_code: int = 200):
    """Render the submission form and the visitor's links with current click counts."""
    service = request.app.state.service
    state = _recent_links(request)

    links = []
    if state.codes:
        try:
            links = await service.get_links(state.codes)
        except Exception as e:
            # Render the form without the list
            logger.error(f"Failed to load recent links: {e}")
    rows = build_link_rows(state, links, request_base_url(request))

    return templates.TemplateResponse(
        request,
        "index.html",
        {"rows": rows, "notice": notice, "url_value": url_value},
        status_code=status_code,
    )


def _render_error(request: Request, message: str, status_code: int = 404):
    return templates.TemplateResponse(
        request,
        "error.html",
        {"error_message": message, "status_code": status_code},
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def homepage(request: Request):
    """Serve the homepage."""
    return await _render_home(request)


@router.post("/create", response_class=HTMLResponse, include_in_schema=False)
async def create_short_url_web(request: Request, url: str = Form("")):
    """Handle form submission to create short URL."""
    service = request.app.state.service

    try:
        link = await service.submit(url)
    except ShortLinkError as e:
        # Input stays in the form so it can be corrected
        return await _render_home(request, notice=e.message, url_value=url, status_code=e.status_code)
    except Exception as e:
        logger.error(f"Failed to shorten URL: {e}")
        return await _render_home(
            request,
            notice="Failed to shorten URL. Please try again.",
            url_value=url,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    state = remember(_recent_links(request), link.short_code)

    # Relative redirect so it works behind a proxy path as well
    response = RedirectResponse(
        url=f"result/{link.short_code}",
        status_code=status.HTTP_303_SEE_OTHER,
    )
    response.set_cookie(
        key=COOKIE_NAME,
        value=state.to_cookie(),
        max_age=COOKIE_MAX_AGE,
        httponly=True,
        samesite="lax",
    )
    return response


@router.get("/result/{short_code}", response_class=HTMLResponse, include_in_schema=False)
async def result_page(request: Request, short_code: str):
    """Show result page with short URL."""
    service = request.app.state.service

    try:
        link = await service.get_link(short_code)
    except Exception as e:
        logger.error(f"Failed to load link {short_code}: {e}")
        return _render_error(request, UNAVAILABLE_MESSAGE, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)

    if not link:
        return _render_error(request, f"Short code '{short_code}' not found")

    return templates.TemplateResponse(
        request,
        "result.html",
        {
            "short_url": short_url_for(request, short_code),
            "short_code": short_code,
            "original_url": link.original_url,
            "clicks": link.clicks,
        },
    )


@router.get("/health", include_in_schema=False)
async def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    service = request.app.state.service

    health = await service.health_check()

    if health["overall"]:
        return {"status": "healthy"}

    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail="Service unhealthy",
    )


@router.get("/{short_code}", include_in_schema=False)
async def redirect_to_url(request: Request, short_code: str):
    """Resolve a short code and redirect to the original URL."""
    service = request.app.state.service

    try:
        original_url = await service.resolve(short_code)
    except (InvalidCodeError, LinkNotFoundError) as e:
        return _render_error(request, e.message, status_code=e.status_code)

    # 302 so every visit comes back through here and is counted
    return RedirectResponse(url=original_url, status_code=status.HTTP_302_FOUND)
