"""URL building utilities for short links."""


def build_short_url(short_code: str, base_url: str) -> str:
    """Build complete short URL.

    Args:
        short_code: The short code
        base_url: Origin the service is reachable at (e.g., https://example.com)

    Returns:
        Complete short URL, ``<origin>/<short_code>``
    """
    return f"{base_url.rstrip('/')}/{short_code}"
