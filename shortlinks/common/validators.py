"""Validation utilities for short links."""

import re
from urllib.parse import urlparse
from typing import Tuple

MAX_URL_LENGTH = 2048
MAX_SHORT_CODE_LENGTH = 32


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate a URL.

    Only absolute http/https URLs with a host are accepted.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    if any(c.isspace() for c in url):
        return False, "URL must not contain whitespace"

    try:
        result = urlparse(url)

        # Scheme must be exactly http or https
        if result.scheme not in ("http", "https"):
            return False, "URL must use http or https protocol"

        # hostname is None for things like "http://:80" or "https://"
        if not result.netloc or not result.hostname:
            return False, "URL must have a valid domain"

        # .port raises ValueError on a malformed port
        if result.port == 0:
            return False, "URL must have a valid port"

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"


def is_valid_short_code(short_code: str, max_length: int = MAX_SHORT_CODE_LENGTH) -> Tuple[bool, str]:
    """Validate a short code taken from a request path.

    Args:
        short_code: The short code to validate
        max_length: Maximum length for short code

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str) or not short_code.strip():
        return False, "Short code is required"

    if len(short_code) > max_length:
        return False, f"Short code must be at most {max_length} characters"

    if not re.fullmatch(r'[A-Za-z0-9]+', short_code):
        return False, "Short code can only contain letters and numbers"

    return True, ""
