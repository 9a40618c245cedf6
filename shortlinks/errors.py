"""
Error classes for the short link service.

Each error carries the HTTP status code the web layer should answer with and a
user-facing default message. All of them are ValueErrors so callers that only
care about "the input was bad" can keep catching ValueError.
"""

from typing import Optional, Dict, Any


class ShortLinkError(ValueError):
    """
    Base short link error.

    Attributes:
        status_code: HTTP status code (default: 500)
        message: Error message (default: "Internal server error")
        details: Optional additional error details
    """
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """
        Initialize short link error.

        Args:
            message: Error message (overrides default)
            details: Optional additional error details
        """
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)


class EmptyInputError(ShortLinkError):
    """Submitted URL was blank."""
    status_code = 400
    message = "Please enter a URL to shorten"


class InvalidURLError(ShortLinkError):
    """Submitted URL is not an absolute http/https URL."""
    status_code = 400
    message = "Please enter a valid HTTP or HTTPS URL"


class InvalidCodeError(ShortLinkError):
    """Short code is empty or malformed."""
    status_code = 404
    message = "Invalid short code"


class LinkNotFoundError(ShortLinkError):
    """No short link matches the code (or the lookup failed)."""
    status_code = 404
    message = "URL not found"


class ClickAccountingError(ShortLinkError):
    """Click counter could not be updated. Never surfaced to users."""
    status_code = 500
    message = "Failed to update click count"
