"""Request helpers shared by the API and HTML routes."""

from fastapi import Request

from shortlinks.common.headers import build_base_url
from shortlinks.common.url_builder import build_short_url


def request_base_url(request: Request) -> str:
    """Origin the client reached us at (proxy headers first, then Host, then config)."""
    config = request.app.state.config
    return build_base_url(
        headers=dict(request.headers),
        fallback_base_url=config.base_url,
        request_scheme=request.url.scheme,
        request_host=request.headers.get("host"),
    )


def short_url_for(request: Request, short_code: str) -> str:
    """Full short URL for a code as seen by this client."""
    return build_short_url(short_code=short_code, base_url=request_base_url(request))
