"""Core business logic for short links."""

from .shortcode import ShortCodeGenerator
from .service import ShortLinkService

__all__ = ["ShortCodeGenerator", "ShortLinkService"]
