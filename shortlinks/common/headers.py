"""Header parsing utilities for short links."""

from typing import Dict, Optional


def build_base_url(
    headers: Dict[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
) -> str:
    """Build base URL (origin) from headers or fallback.

    Priority:
    1. X-Forwarded-Proto + X-Forwarded-Host (first hop of each)
    2. Request scheme + host
    3. Fallback base URL from config

    Args:
        headers: Request headers (any case)
        fallback_base_url: Fallback base URL from configuration
        request_scheme: Request scheme (http/https)
        request_host: Request host

    Returns:
        Base URL (e.g., https://example.com)
    """
    headers_lower = {k.lower(): v for k, v in headers.items()}
    forwarded_proto = headers_lower.get("x-forwarded-proto")
    forwarded_host = headers_lower.get("x-forwarded-host")

    if forwarded_proto and forwarded_host:
        proto = forwarded_proto.split(",")[0].strip()
        host = forwarded_host.split(",")[0].strip()
        return f"{proto}://{host}"

    if request_scheme and request_host:
        return f"{request_scheme}://{request_host}"

    return fallback_base_url.rstrip("/")
